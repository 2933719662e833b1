"""Bearer tokens for admins and registered families."""

from datetime import timedelta
from typing import Any

import jwt
from loguru import logger
from pydantic import BaseModel

from app.app_config import get_app_environ_config
from app.domain.utils.clock import utc_now

FAMILY_ROLE = "family"


class TokenClaims(BaseModel):
    id: str
    role: str
    username: str | None = None
    email: str | None = None
    phone: str | None = None


def issue_token(claims: TokenClaims) -> str:
    cfg = get_app_environ_config()
    now = utc_now()
    payload: dict[str, Any] = claims.model_dump(exclude_none=True)
    payload["iat"] = now
    payload["exp"] = now + timedelta(hours=cfg.JWT_EXPIRES_IN_HOURS)
    return jwt.encode(payload, cfg.JWT_SECRET, algorithm=cfg.JWT_ALGORITHM)


def decode_token(token: str) -> TokenClaims | None:
    """Verify signature and expiry. Returns None for any invalid token."""
    cfg = get_app_environ_config()
    try:
        payload = jwt.decode(token, cfg.JWT_SECRET, algorithms=[cfg.JWT_ALGORITHM])
        return TokenClaims(**payload)
    except jwt.ExpiredSignatureError:
        logger.debug("expired token")
    except (jwt.InvalidTokenError, ValueError) as e:
        logger.debug(f"invalid token: {e}")
    return None
