from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from loguru import logger

from app.domain.auth.tokens import FAMILY_ROLE, TokenClaims, decode_token
from app.schemas import AdminRole
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

ADMIN_ROLES = {role.value for role in AdminRole}

_bearer = HTTPBearer(auto_error=False)


def _bad_token(message: str = "Invalid or expired token") -> AppError:
    return AppError(
        errcode=AppErrorCode.E_BAD_TOKEN,
        errmesg=message,
        status_code=HttpStatusCode.UNAUTHORIZED,
    )


def _forbidden() -> AppError:
    return AppError(
        errcode=AppErrorCode.E_FORBIDDEN,
        errmesg="Insufficient permissions",
        status_code=HttpStatusCode.FORBIDDEN,
    )


async def get_current_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> TokenClaims:
    # Do not log the token itself.
    if credentials is None or not credentials.credentials:
        raise _bad_token("No token provided")

    claims = decode_token(credentials.credentials)
    if claims is None:
        raise _bad_token()

    logger.debug("Authenticated {} id={}", claims.role, claims.id)
    return claims


async def get_current_admin(
    claims: TokenClaims = Depends(get_current_claims),
) -> TokenClaims:
    if claims.role not in ADMIN_ROLES:
        raise _forbidden()
    return claims


async def get_super_admin(
    claims: TokenClaims = Depends(get_current_admin),
) -> TokenClaims:
    if claims.role != AdminRole.SUPER_ADMIN.value:
        raise _forbidden()
    return claims


async def get_current_family(
    claims: TokenClaims = Depends(get_current_claims),
) -> TokenClaims:
    if claims.role != FAMILY_ROLE:
        raise _forbidden()
    return claims


CurrentAdmin = Annotated[TokenClaims, Depends(get_current_admin)]
SuperAdmin = Annotated[TokenClaims, Depends(get_super_admin)]
CurrentFamily = Annotated[TokenClaims, Depends(get_current_family)]
