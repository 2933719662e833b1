import asyncio

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from app.api.v1.dependency import SuperAdmin
from app.api.v1.schemas.base import ApiOut
from app.services.integrations.youtube_service import YouTubeService, get_youtube_service
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

router = APIRouter(prefix="/youtube", tags=["YouTube"])

# Mounted at the root: Google redirects the browser to YOUTUBE_REDIRECT_URI
callback_router = APIRouter(tags=["YouTube"])


class AuthorizationUrlOut(BaseModel):
    url: str


class RefreshTokenOut(BaseModel):
    refresh_token: str
    env_line: str


@router.get("/auth-url")
async def authorization_url(
    admin: SuperAdmin,
    service: YouTubeService = Depends(get_youtube_service),
) -> ApiOut[AuthorizationUrlOut]:
    """Consent URL for linking the parish YouTube channel."""
    return ApiOut[AuthorizationUrlOut](
        results=AuthorizationUrlOut(url=service.get_authorization_url())
    )


@callback_router.get("/auth/youtube/callback")
async def authorization_callback(
    code: str | None = Query(None),
    error: str | None = Query(None),
    service: YouTubeService = Depends(get_youtube_service),
) -> ApiOut[RefreshTokenOut]:
    """Exchange the code Google redirects back with for a refresh token."""
    if error or not code:
        raise AppError(
            errcode=AppErrorCode.E_INVALID_PARAMS,
            errmesg=f"Authorization was not granted: {error or 'missing code'}",
            status_code=HttpStatusCode.BAD_REQUEST,
        )

    tokens = await asyncio.to_thread(service.exchange_code_for_tokens, code)
    if not tokens.refresh_token:
        raise AppError(
            errcode=AppErrorCode.E_YOUTUBE_API,
            errmesg="Token exchange returned no refresh token; revoke access and retry",
            status_code=HttpStatusCode.BAD_GATEWAY,
        )

    return ApiOut[RefreshTokenOut](
        results=RefreshTokenOut(
            refresh_token=tokens.refresh_token,
            env_line=f"YOUTUBE_REFRESH_TOKEN={tokens.refresh_token}",
        )
    )
