from pydantic import BaseModel

from app.shared.config import config

DEFAULT_YOUTUBE_REDIRECT_URI = "http://localhost:8000/auth/youtube/callback"


def _split_csv(value: str | None) -> list[str]:
    return [x.strip() for x in (value or "").split(",") if x.strip()]


class AppEnvironConfig(BaseModel):
    DEBUG: bool = config.is_debug()

    API_HOST: str = config.get("API_HOST", "0.0.0.0").strip()  # type: ignore
    API_PORT: int = int((config.get("API_PORT") or "").strip() or 8000)
    API_WORKERS: int = int((config.get("API_WORKERS") or "").strip() or 1)
    API_CORS_ORIGINS: list[str] = _split_csv(config.get("API_CORS_ORIGINS")) or [
        "http://localhost:3000"
    ]

    LOGFIRE_ENABLE: bool = config.get("LOGFIRE_ENABLE", "false").strip().lower() == "true"  # type: ignore
    LOGFIRE_TOKEN: str | None = (config.get("LOGFIRE_TOKEN") or "").strip() or None

    # Rate limit applied to admin and family login endpoints
    LOGIN_RATE_LIMIT: str = config.get("LOGIN_RATE_LIMIT", "10/minute").strip()  # type: ignore

    # Auth tokens
    JWT_SECRET: str = config.get("JWT_SECRET", "your-secret-key-change-in-production").strip()  # type: ignore
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_IN_HOURS: int = int((config.get("JWT_EXPIRES_IN_HOURS") or "").strip() or 168)

    # File storage
    UPLOAD_DIR: str = config.get("UPLOAD_DIR", "public/uploads").strip()  # type: ignore
    UPLOAD_MAX_BYTES: int = int((config.get("UPLOAD_MAX_BYTES") or "").strip() or 5 * 1024 * 1024)
    RECORDINGS_DIR: str = config.get("RECORDINGS_DIR", "recordings").strip()  # type: ignore

    # Live stream publishing
    DEFAULT_PUBLISH_DELAY_HOURS: float = float(
        (config.get("DEFAULT_PUBLISH_DELAY_HOURS") or "").strip() or 12
    )

    # YouTube configuration
    YOUTUBE_CLIENT_ID: str | None = (config.get("YOUTUBE_CLIENT_ID") or "").strip() or None
    YOUTUBE_CLIENT_SECRET: str | None = (config.get("YOUTUBE_CLIENT_SECRET") or "").strip() or None
    YOUTUBE_REDIRECT_URI: str = (
        config.get("YOUTUBE_REDIRECT_URI") or ""
    ).strip() or DEFAULT_YOUTUBE_REDIRECT_URI
    YOUTUBE_REFRESH_TOKEN: str | None = (config.get("YOUTUBE_REFRESH_TOKEN") or "").strip() or None


_app_environ_config = AppEnvironConfig()


def get_app_environ_config() -> AppEnvironConfig:
    return _app_environ_config
