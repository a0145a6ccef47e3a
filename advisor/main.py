import os
from contextlib import asynccontextmanager
from pathlib import Path

from agents import set_tracing_disabled
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from advisor.config import Settings
from advisor.documents import analyze_document, compare_documents
from advisor.errors import RelayError, ValidationError
from advisor.models import (
    ChatError,
    ChatReply,
    ChatRequest,
    CompareRequest,
    DocumentAnalysis,
    DocumentComparison,
    HealthStatus,
)
from advisor.notify import push
from advisor.relay import ChatRelay

load_dotenv(override=True)

port = int(os.environ.get("PORT", 8000))

FRONTEND_DIR = Path(__file__).parent.parent / "frontend"
CHAT_PATH = "/api/chat"
INVALID_REQUEST_MESSAGE = "Ugyldig forespørgsel. Tjek de indsendte felter."

_ERROR_RESPONSES = {
    400: {"model": ChatError},
    429: {"model": ChatError},
    500: {"model": ChatError},
}


def get_relay(request: Request) -> ChatRelay:
    return request.app.state.relay


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    if any(err.get("type") == "json_invalid" for err in exc.errors()):
        return await relay_error_handler(request, ValidationError("invalid JSON body"))
    if request.url.path == CHAT_PATH:
        return await relay_error_handler(request, ValidationError())
    return await relay_error_handler(request, ValidationError(INVALID_REQUEST_MESSAGE))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    print(f"Unexpected error on {request.url.path}: {type(exc).__name__}: {exc}", flush=True)
    return JSONResponse(status_code=500, content={"error": "Intern serverfejl"})


def create_app(settings: Settings | None = None, relay: ChatRelay | None = None) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        set_tracing_disabled(not settings.tracing_enabled)
        app.state.relay = relay or ChatRelay(settings)
        if not settings.provider_configured:
            print("WARNING: OPENAI_API_KEY not set, chat requests will fail", flush=True)
            push(settings, "WARNING: OPENAI_API_KEY is not configured")
        yield

    app = FastAPI(title="AI Forsikringsrådgiver", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RelayError, relay_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    @app.get("/health", response_model=HealthStatus)
    async def health():
        return HealthStatus(status="ok", provider_configured=settings.provider_configured)

    @app.post(CHAT_PATH, response_model=ChatReply, responses=_ERROR_RESPONSES)
    async def chat(request: ChatRequest, relay: ChatRelay = Depends(get_relay)):
        reply = await relay.chat(request.message)
        return ChatReply(reply=reply)

    @app.post("/api/documents/analyze", response_model=DocumentAnalysis, responses=_ERROR_RESPONSES)
    async def analyze(
        file: UploadFile | None = File(None),
        question: str | None = Form(None),
        relay: ChatRelay = Depends(get_relay),
    ):
        pdf_bytes = await file.read() if file is not None else b""
        return await analyze_document(relay, pdf_bytes, question)

    @app.post("/api/documents/compare", response_model=DocumentComparison, responses=_ERROR_RESPONSES)
    async def compare(request: CompareRequest, relay: ChatRelay = Depends(get_relay)):
        return await compare_documents(relay, request.documents)

    # Mount frontend last (catch-all)
    if FRONTEND_DIR.exists():
        app.mount("/", StaticFiles(directory=str(FRONTEND_DIR), html=True), name="static")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=port)
