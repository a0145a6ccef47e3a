from unittest.mock import patch

import requests

from advisor.config import Settings
from advisor.notify import PUSHOVER_URL, push


def test_push_posts_to_pushover():
    settings = Settings(pushover_token="tok", pushover_user="usr")
    with patch("advisor.notify.requests.post") as mock_post:
        push(settings, "hello")
    mock_post.assert_called_once()
    args, kwargs = mock_post.call_args
    assert args[0] == PUSHOVER_URL
    assert kwargs["data"]["token"] == "tok"
    assert kwargs["data"]["user"] == "usr"
    assert kwargs["data"]["message"] == "hello"


def test_push_skipped_without_credentials():
    with patch("advisor.notify.requests.post") as mock_post:
        push(Settings(), "hello")
    mock_post.assert_not_called()


def test_push_swallows_network_errors(capsys):
    settings = Settings(pushover_token="tok", pushover_user="usr")
    with patch("advisor.notify.requests.post", side_effect=requests.ConnectionError("down")):
        push(settings, "hello")
    assert "Pushover notification failed" in capsys.readouterr().out
