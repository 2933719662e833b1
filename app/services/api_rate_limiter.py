from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from app.app_config import get_app_environ_config
from app.shared.api.utils import ApiFailure, make_response
from app.utils.app_errors import AppErrorCode, HttpStatusCode

limiter = Limiter(key_func=get_remote_address)


def login_rate_limit():
    return limiter.limit(get_app_environ_config().LOGIN_RATE_LIMIT)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded: path={request.url.path} limit={exc.detail}")
    failure = ApiFailure(
        errcode=AppErrorCode.E_RATE_LIMITED.value,
        errmesg=f"Too many requests: {exc.detail}",
    )
    return make_response(failure, status_code=HttpStatusCode.TOO_MANY_REQUESTS)
