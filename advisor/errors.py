"""Error taxonomy for the chat relay and its mapping to Danish user messages."""


class RelayError(Exception):
    """An error that is rendered to the client as ``{"error": message}``."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(RelayError):
    def __init__(self, message: str = "message is required") -> None:
        super().__init__(400, message)


class ConfigurationError(RelayError):
    def __init__(self, message: str = "provider credential not configured") -> None:
        super().__init__(500, message)


class ProviderError(Exception):
    """Base class for failures originating from the completion provider."""


class MissingCredential(ProviderError):
    pass


class QuotaExceeded(ProviderError):
    pass


class InvalidCredential(ProviderError):
    pass


class ModelUnavailable(ProviderError):
    pass


class RateLimited(ProviderError):
    pass


class EmptyResponse(ProviderError):
    pass


class UnknownProviderError(ProviderError):
    pass


MISSING_CREDENTIAL_MESSAGE = "provider credential not configured"
EMPTY_RESPONSE_MESSAGE = "no response from AI"

_MESSAGES: dict[type[ProviderError], tuple[int, str]] = {
    MissingCredential: (500, MISSING_CREDENTIAL_MESSAGE),
    QuotaExceeded: (500, "OpenAI API kvote opbrugt. Kontakt administrator."),
    InvalidCredential: (500, "Ugyldig OpenAI API nøgle. Tjek miljøvariabler."),
    ModelUnavailable: (500, "AI model ikke tilgængelig."),
    RateLimited: (429, "For mange forespørgsler. Vent et øjeblik og prøv igen."),
    EmptyResponse: (500, EMPTY_RESPONSE_MESSAGE),
}


def describe(error: ProviderError) -> tuple[int, str]:
    """Return the HTTP status and Danish message for a provider error.

    Unrecognised errors fall back to a generic message embedding their text.
    """
    for cls in type(error).__mro__:
        if cls in _MESSAGES:
            return _MESSAGES[cls]
    detail = str(error) or "Ukendt fejl"
    return 500, f"Der opstod en intern serverfejl: {detail}"


def to_relay_error(error: ProviderError) -> RelayError:
    status_code, message = describe(error)
    return RelayError(status_code, message)
