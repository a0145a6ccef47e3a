import requests

from advisor.config import Settings

PUSHOVER_URL = "https://api.pushover.net/1/messages.json"


def push(settings: Settings, text: str) -> None:
    """Send an operator notification; no-op when Pushover is not configured."""
    if not settings.pushover_token or not settings.pushover_user:
        return
    try:
        requests.post(
            PUSHOVER_URL,
            data={
                "token": settings.pushover_token,
                "user": settings.pushover_user,
                "title": "Forsikringsrådgiver - Advarsel",
                "message": text,
            },
            timeout=10,
        )
    except requests.RequestException as e:
        print(f"Pushover notification failed: {e}", flush=True)
