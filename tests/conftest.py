from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from agents import set_tracing_disabled

from advisor.config import Settings
from advisor.provider import CompletionClient


@pytest.fixture(autouse=True, scope="session")
def disable_tracing():
    set_tracing_disabled(True)
    yield


@pytest.fixture
def settings():
    return Settings(openai_api_key="sk-test-key", model="gpt-4o-mini", tracing_enabled=False)


@pytest.fixture
def unconfigured_settings():
    return Settings(openai_api_key="", tracing_enabled=False)


@pytest.fixture
def completion_client():
    """A CompletionClient stand-in whose ``complete`` is an AsyncMock."""
    client = MagicMock(spec=CompletionClient)
    client.complete = AsyncMock(return_value="Svar")
    return client


def make_status_error(cls, status_code, code=None):
    """Create an openai APIStatusError subclass instance with an optional error code."""
    req = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    resp = httpx.Response(status_code, request=req)
    body = {"code": code, "message": "error"} if code else {}
    return cls("error", response=resp, body=body)


def make_completion(content="Svar", usage=None):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message, finish_reason="stop")], usage=usage)
