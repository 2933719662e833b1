from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger

from app.services.integrations.youtube_service import YouTubeError, YouTubeNotConfigured
from app.shared.api.utils import ApiFailure, make_response
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """
    Custom exception handler for AppError.
    Converts AppError to ApiFailure and returns via make_response.
    """
    # Log with the caller info captured when AppError was raised
    log_msg = f"{exc.errcode} {exc.erresid} msg={exc.errmesg} caller={exc.caller_info}"
    if exc.errcode == AppErrorCode.E_INTERNAL_ERROR.value:
        logger.error(log_msg)
    else:
        logger.warning(log_msg)

    failure = ApiFailure(errcode=exc.errcode, errmesg=exc.errmesg, erresid=exc.erresid)
    return make_response(failure, status_code=exc.status_code)


async def youtube_error_handler(request: Request, exc: YouTubeError) -> JSONResponse:
    """Map YouTube adapter failures reaching a route to the failure envelope."""
    if isinstance(exc, YouTubeNotConfigured):
        errcode, status_code = AppErrorCode.E_YOUTUBE_NOT_CONFIGURED, HttpStatusCode.BAD_REQUEST
    else:
        errcode, status_code = AppErrorCode.E_YOUTUBE_API, HttpStatusCode.BAD_GATEWAY

    logger.error(f"{type(exc).__name__}: {exc} path={request.url.path}")
    failure = ApiFailure(errcode=errcode.value, errmesg=str(exc))
    return make_response(failure, status_code=status_code)
