import openai
from agents import trace
from agents.tracing import generation_span
from openai import AsyncOpenAI

from advisor.errors import (
    EmptyResponse,
    InvalidCredential,
    MissingCredential,
    ModelUnavailable,
    ProviderError,
    QuotaExceeded,
    RateLimited,
    UnknownProviderError,
)
from advisor.models import CompletionOptions


def classify(error: openai.OpenAIError) -> ProviderError:
    """Translate an OpenAI SDK exception into a ProviderError variant."""
    code = getattr(error, "code", None)
    if code == "insufficient_quota":
        return QuotaExceeded(str(error))
    if isinstance(error, openai.RateLimitError):
        return RateLimited(str(error))
    if isinstance(error, openai.AuthenticationError) or code == "invalid_api_key":
        return InvalidCredential(str(error))
    if isinstance(error, openai.NotFoundError) or code == "model_not_found":
        return ModelUnavailable(str(error))
    return UnknownProviderError(str(error))


class CompletionClient:
    """Single-shot chat completion against the OpenAI API."""

    def __init__(self, api_key: str, client: AsyncOpenAI | None = None) -> None:
        self.api_key = api_key
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def complete(self, system_prompt: str, user_message: str, options: CompletionOptions) -> str:
        if not self.api_key.strip():
            raise MissingCredential("no API key configured")

        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_message},
        ]
        try:
            with trace("Insurance Advisor Chat"):
                with generation_span(input=messages, model=options.model) as gen_span:
                    response = await self.client.chat.completions.create(
                        model=options.model,
                        messages=messages,
                        temperature=options.temperature,
                        max_tokens=options.max_tokens,
                    )
                    content = response.choices[0].message.content if response.choices else None
                    if content:
                        gen_span.span_data.output = [{"role": "assistant", "content": content}]
                    if response.usage:
                        gen_span.span_data.usage = {
                            "input_tokens": response.usage.prompt_tokens,
                            "output_tokens": response.usage.completion_tokens,
                        }
        except openai.OpenAIError as e:
            raise classify(e) from e
        except Exception as e:
            raise UnknownProviderError(f"{type(e).__name__}: {e}") from e

        if not content:
            raise EmptyResponse("provider returned no content")
        return content
