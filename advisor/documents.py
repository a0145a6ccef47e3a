from io import BytesIO

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from advisor.errors import ValidationError
from advisor.models import ComparedDocument, DocumentAnalysis, DocumentComparison
from advisor.prompts import COMPARE_QUESTION, DEFAULT_DOCUMENT_QUESTION, compare_prompt, document_prompt
from advisor.relay import ChatRelay

DOCUMENT_TEMPERATURE = 0.3
DOCUMENT_MAX_TOKENS = 2000
COMPARE_TEMPERATURE = 0.2
COMPARE_MAX_TOKENS = 3000
COMPARE_MAX_CHARS = 8000


def extract_text(pdf_bytes: bytes) -> tuple[str, int]:
    """Return the concatenated page text and the page count of a PDF."""
    if not pdf_bytes:
        raise ValidationError("Dokument mangler. Upload en PDF-fil.")
    try:
        reader = PdfReader(BytesIO(pdf_bytes))
        pages = reader.pages
        text = "".join(p.extract_text() or "" for p in pages)
    except PdfReadError as e:
        print(f"Could not read PDF: {e}", flush=True)
        raise ValidationError("Dokumentet kunne ikke læses. Upload en gyldig PDF-fil.") from e
    if not text.strip():
        raise ValidationError("Dokumentet indeholder ingen læsbar tekst.")
    return text, len(pages)


async def analyze_document(relay: ChatRelay, pdf_bytes: bytes, question: str | None = None) -> DocumentAnalysis:
    text, pages = extract_text(pdf_bytes)
    options = relay.options(temperature=DOCUMENT_TEMPERATURE, max_tokens=DOCUMENT_MAX_TOKENS)
    prompt = (question or "").strip() or DEFAULT_DOCUMENT_QUESTION
    analysis = await relay.relay(document_prompt(text), prompt, options)
    return DocumentAnalysis(analysis=analysis, pages=pages, word_count=len(text.split()))


async def compare_documents(relay: ChatRelay, documents: list[ComparedDocument]) -> DocumentComparison:
    if len(documents) < 2:
        raise ValidationError("Mindst 2 dokumenter påkrævet for sammenligning")
    if any(not doc.text.strip() for doc in documents):
        raise ValidationError("Dokument tekst mangler. Indsend teksten for hvert dokument.")

    excerpts = [(doc.id, doc.text[:COMPARE_MAX_CHARS]) for doc in documents]
    options = relay.options(temperature=COMPARE_TEMPERATURE, max_tokens=COMPARE_MAX_TOKENS)
    comparison = await relay.relay(compare_prompt(excerpts), COMPARE_QUESTION, options)
    return DocumentComparison(comparison=comparison, documents_compared=len(documents))
