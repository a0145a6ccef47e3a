from advisor.config import Settings
from advisor.errors import (
    ConfigurationError,
    InvalidCredential,
    ProviderError,
    QuotaExceeded,
    to_relay_error,
)
from advisor.models import CompletionOptions
from advisor.notify import push
from advisor.prompts import SYSTEM_PROMPT
from advisor.provider import CompletionClient

CHAT_TEMPERATURE = 0.7
CHAT_MAX_TOKENS = 1000

# Failures an operator has to fix; these also trigger a push notification.
_OPERATOR_ERRORS = (QuotaExceeded, InvalidCredential)


class ChatRelay:
    """Forwards one user message to the provider and returns the reply text.

    Raises ``RelayError`` subclasses carrying the HTTP status and the
    user-facing message; provider exceptions never escape raw.
    """

    def __init__(self, settings: Settings, client: CompletionClient | None = None) -> None:
        self.settings = settings
        self.client = client or CompletionClient(settings.openai_api_key)

    def options(self, temperature: float = CHAT_TEMPERATURE, max_tokens: int = CHAT_MAX_TOKENS) -> CompletionOptions:
        return CompletionOptions(model=self.settings.model, temperature=temperature, max_tokens=max_tokens)

    async def relay(self, system_prompt: str, message: str, options: CompletionOptions) -> str:
        if not self.settings.provider_configured:
            raise ConfigurationError()
        try:
            return await self.client.complete(system_prompt, message, options)
        except ProviderError as e:
            print(f"Provider error ({type(e).__name__}): {e}", flush=True)
            if isinstance(e, _OPERATOR_ERRORS):
                push(self.settings, f"WARNING: {type(e).__name__} from OpenAI")
            raise to_relay_error(e) from e

    async def chat(self, message: str) -> str:
        return await self.relay(SYSTEM_PROMPT, message, self.options())
