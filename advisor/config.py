import os
from dataclasses import dataclass, field as _field

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_ORIGINS = ["http://localhost:5173", "http://localhost:8000"]


def _as_bool(raw: str | None, default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    openai_api_key: str = ""
    model: str = DEFAULT_MODEL
    allowed_origins: list[str] = _field(default_factory=lambda: list(DEFAULT_ORIGINS))
    tracing_enabled: bool = True
    pushover_token: str = ""
    pushover_user: str = ""

    @property
    def provider_configured(self) -> bool:
        return bool(self.openai_api_key.strip())

    @classmethod
    def from_env(cls) -> "Settings":
        raw_origins = os.environ.get("ALLOWED_ORIGINS", "")
        origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
        return cls(
            openai_api_key=os.environ.get("OPENAI_API_KEY", ""),
            model=os.environ.get("OPENAI_MODEL") or DEFAULT_MODEL,
            allowed_origins=origins or list(DEFAULT_ORIGINS),
            tracing_enabled=_as_bool(os.environ.get("TRACING_ENABLED"), True),
            pushover_token=os.environ.get("PUSHOVER_TOKEN", ""),
            pushover_user=os.environ.get("PUSHOVER_USER", ""),
        )
