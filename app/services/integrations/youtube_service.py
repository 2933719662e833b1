"""YouTube helper service.

Thin wrapper around `google-api-python-client` for uploading stream
recordings, plus the OAuth2 authorization-code exchange used once to obtain
the refresh token.

Usage:
    from app.services.integrations.youtube_service import get_youtube_service

    video_id = get_youtube_service().upload(path, title="Sunday Mass", description="")
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

from google.auth.exceptions import GoogleAuthError
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaFileUpload
from loguru import logger
from pydantic import BaseModel

from app.app_config import AppEnvironConfig, get_app_environ_config

SCOPES = [
    "https://www.googleapis.com/auth/youtube.upload",
    "https://www.googleapis.com/auth/youtube",
]
AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"
# Fixed state so the printed consent URL is stable for a given configuration
SETUP_STATE = "parish-youtube-setup"

DEFAULT_TAGS = ["church", "live stream"]
# Nonprofits & Activism
CATEGORY_ID = "29"
PRIVACY_STATUS = "unlisted"


class YouTubeError(Exception):
    """Base error for the YouTube adapter."""


class YouTubeNotConfigured(YouTubeError):
    pass


class RecordingFileNotFound(YouTubeError):
    def __init__(self, file_path: str):
        self.file_path = file_path
        super().__init__(f"File not found: {file_path}")


class UploadFailed(YouTubeError):
    pass


class YouTubeApiError(YouTubeError):
    pass


class TokenSet(BaseModel):
    access_token: str | None = None
    refresh_token: str | None = None
    expiry: datetime | None = None
    scopes: list[str] = []


class YouTubeService:
    """Service wrapper for the YouTube Data API v3."""

    def __init__(
        self,
        cfg: AppEnvironConfig | None = None,
        client_factory: Callable[[], Any] | None = None,
    ) -> None:
        self._cfg = cfg or get_app_environ_config()
        self._client_factory = client_factory or self._build_client

    # ==================== AUTH ====================

    def _client_config(self) -> dict[str, Any]:
        if not self._cfg.YOUTUBE_CLIENT_ID or not self._cfg.YOUTUBE_CLIENT_SECRET:
            raise YouTubeNotConfigured("YOUTUBE_CLIENT_ID and YOUTUBE_CLIENT_SECRET must be set")
        return {
            "web": {
                "client_id": self._cfg.YOUTUBE_CLIENT_ID,
                "client_secret": self._cfg.YOUTUBE_CLIENT_SECRET,
                "auth_uri": AUTH_URI,
                "token_uri": TOKEN_URI,
                "redirect_uris": [self._cfg.YOUTUBE_REDIRECT_URI],
            }
        }

    def _build_flow(self) -> Flow:
        return Flow.from_client_config(
            self._client_config(),
            scopes=SCOPES,
            redirect_uri=self._cfg.YOUTUBE_REDIRECT_URI,
            state=SETUP_STATE,
            autogenerate_code_verifier=False,
        )

    def get_authorization_url(self) -> str:
        """Consent URL requesting offline access to upload and manage videos."""
        url, _state = self._build_flow().authorization_url(
            access_type="offline",
            prompt="consent",
        )
        return url

    def exchange_code_for_tokens(self, code: str) -> TokenSet:
        """Exchange an authorization code for a token set.

        Raises:
            YouTubeApiError: If the code is invalid, expired or the exchange fails
        """
        flow = self._build_flow()
        try:
            flow.fetch_token(code=code.strip())
        except Exception as e:
            logger.error(f"YouTube token exchange failed: {e!r}")
            raise YouTubeApiError(f"Token exchange failed: {e}") from e

        creds = flow.credentials
        return TokenSet(
            access_token=creds.token,
            refresh_token=creds.refresh_token,
            expiry=creds.expiry,
            scopes=list(creds.scopes or []),
        )

    # ==================== UPLOAD ====================

    def _build_client(self) -> Any:
        if not self._cfg.YOUTUBE_REFRESH_TOKEN:
            raise YouTubeNotConfigured("YOUTUBE_REFRESH_TOKEN must be set")
        creds = Credentials(
            token=None,
            refresh_token=self._cfg.YOUTUBE_REFRESH_TOKEN,
            token_uri=TOKEN_URI,
            client_id=self._cfg.YOUTUBE_CLIENT_ID,
            client_secret=self._cfg.YOUTUBE_CLIENT_SECRET,
            scopes=SCOPES,
        )
        return build("youtube", "v3", credentials=creds, cache_discovery=False)

    def upload(
        self,
        file_path: str,
        title: str,
        description: str,
        tags: list[str] | None = None,
    ) -> str:
        """Upload a recording as an unlisted video and return its video id.

        Raises:
            RecordingFileNotFound: If the file does not exist; the API is not called
            UploadFailed: If the API response carries no video id
            YouTubeApiError: If the API rejects the request or the credentials are refused
        """
        if not Path(file_path).is_file():
            raise RecordingFileNotFound(file_path)

        youtube = self._client_factory()
        body = {
            "snippet": {
                "title": title,
                "description": description,
                "categoryId": CATEGORY_ID,
                "tags": list(tags) if tags is not None else list(DEFAULT_TAGS),
            },
            "status": {
                "privacyStatus": PRIVACY_STATUS,
                "selfDeclaredMadeForKids": False,
            },
        }

        try:
            request = youtube.videos().insert(
                part="snippet,status",
                body=body,
                media_body=MediaFileUpload(file_path, chunksize=-1, resumable=True),
            )
            response = None
            while response is None:
                status, response = request.next_chunk()
                if status:
                    logger.debug(f"Uploading {file_path}: {int(status.progress() * 100)}%")
        except (HttpError, GoogleAuthError) as e:
            logger.error(f"YouTube upload of {file_path} failed: {e!r}")
            raise YouTubeApiError(str(e)) from e

        video_id = (response or {}).get("id")
        if not video_id:
            logger.error(f"YouTube upload of {file_path} returned no video id: {response}")
            raise UploadFailed("Failed to get video ID from YouTube")

        logger.info(f"Video uploaded to YouTube: {video_id}")
        return video_id

    def delete_local_recording(self, file_path: str) -> None:
        """Best-effort removal of a local recording; never raises."""
        try:
            path = Path(file_path)
            if path.exists():
                path.unlink()
                logger.info(f"Deleted local recording: {file_path}")
        except OSError as e:
            logger.warning(f"Error deleting local recording {file_path}: {e}")

    def upload_and_cleanup(
        self,
        file_path: str,
        title: str,
        description: str,
        tags: list[str] | None = None,
    ) -> str:
        """Upload, then delete the local file. Deletion only follows success."""
        video_id = self.upload(file_path, title, description, tags)
        self.delete_local_recording(file_path)
        return video_id


_youtube_service: YouTubeService | None = None


def get_youtube_service() -> YouTubeService:
    global _youtube_service
    if _youtube_service is None:
        _youtube_service = YouTubeService()
    return _youtube_service
