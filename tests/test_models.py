import pydantic
import pytest

from advisor.models import ChatError, ChatReply, ChatRequest, CompletionOptions, DocumentAnalysis


def test_chat_request_stores_message():
    req = ChatRequest(message="Hvad dækker min bilforsikring?")
    assert req.message == "Hvad dækker min bilforsikring?"


def test_chat_request_keeps_surrounding_whitespace():
    assert ChatRequest(message="  hej  ").message == "  hej  "


def test_chat_request_requires_message():
    with pytest.raises(pydantic.ValidationError):
        ChatRequest()


def test_chat_request_rejects_blank_message():
    with pytest.raises(pydantic.ValidationError):
        ChatRequest(message=" \n\t")


def test_chat_request_rejects_non_string_message():
    with pytest.raises(pydantic.ValidationError):
        ChatRequest(message=123)


def test_chat_reply_stores_reply():
    assert ChatReply(reply="hej tilbage").model_dump() == {"reply": "hej tilbage"}


def test_chat_error_stores_error():
    assert ChatError(error="message is required").model_dump() == {"error": "message is required"}


def test_completion_options_accepts_bounds():
    CompletionOptions(model="gpt-4o-mini", temperature=0, max_tokens=1)
    CompletionOptions(model="gpt-4o-mini", temperature=2, max_tokens=1)


@pytest.mark.parametrize("temperature", [-0.1, 2.1])
def test_completion_options_rejects_temperature_out_of_range(temperature):
    with pytest.raises(pydantic.ValidationError):
        CompletionOptions(model="gpt-4o-mini", temperature=temperature, max_tokens=10)


def test_completion_options_rejects_non_positive_max_tokens():
    with pytest.raises(pydantic.ValidationError):
        CompletionOptions(model="gpt-4o-mini", temperature=0.7, max_tokens=0)


def test_completion_options_rejects_empty_model():
    with pytest.raises(pydantic.ValidationError):
        CompletionOptions(model="", temperature=0.7, max_tokens=10)


def test_document_analysis_fields():
    result = DocumentAnalysis(analysis="ok", pages=3, word_count=120)
    assert result.pages == 3
    assert result.word_count == 120
