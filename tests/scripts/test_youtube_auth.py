"""Tests for the YouTube setup CLI."""

import io
from unittest.mock import MagicMock

from app.scripts.youtube_auth import run
from app.services.integrations.youtube_service import TokenSet, YouTubeApiError


def make_service(refresh_token: str | None = "1//refresh") -> MagicMock:
    service = MagicMock()
    service.get_authorization_url.return_value = "https://accounts.google.com/o/oauth2/auth?x=1"
    service.exchange_code_for_tokens.return_value = TokenSet(
        access_token="access", refresh_token=refresh_token
    )
    return service


def test_prints_url_and_refresh_token():
    service = make_service()
    stdout = io.StringIO()

    code = run(service=service, stdin=io.StringIO("4/abc\n"), stdout=stdout)

    assert code == 0
    output = stdout.getvalue()
    assert "https://accounts.google.com/o/oauth2/auth?x=1" in output
    assert "YOUTUBE_REFRESH_TOKEN=1//refresh" in output
    service.exchange_code_for_tokens.assert_called_once_with("4/abc")


def test_empty_code_exits_zero_without_exchange():
    service = make_service()

    code = run(service=service, stdin=io.StringIO("\n"), stdout=io.StringIO())

    assert code == 0
    service.exchange_code_for_tokens.assert_not_called()


def test_exchange_failure_exits_zero():
    service = make_service()
    service.exchange_code_for_tokens.side_effect = YouTubeApiError("invalid_grant")
    stdout = io.StringIO()

    code = run(service=service, stdin=io.StringIO("4/bad\n"), stdout=stdout)

    assert code == 0
    assert "YOUTUBE_REFRESH_TOKEN" not in stdout.getvalue()


def test_missing_refresh_token_not_printed():
    stdout = io.StringIO()

    code = run(service=make_service(None), stdin=io.StringIO("4/abc\n"), stdout=stdout)

    assert code == 0
    assert "YOUTUBE_REFRESH_TOKEN" not in stdout.getvalue()
