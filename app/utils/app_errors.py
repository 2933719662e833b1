"""Application error type raised by domain and API layers."""

import inspect
from enum import Enum, IntEnum
from uuid import uuid4


class AppErrorCode(str, Enum):
    E_INTERNAL_ERROR = "E_INTERNAL_ERROR"
    E_INVALID_REQUEST = "E_INVALID_REQUEST"
    E_INVALID_PARAMS = "E_INVALID_PARAMS"
    E_BAD_TOKEN = "E_BAD_TOKEN"
    E_BAD_CREDENTIALS = "E_BAD_CREDENTIALS"
    E_FORBIDDEN = "E_FORBIDDEN"
    E_RATE_LIMITED = "E_RATE_LIMITED"
    E_NOT_FOUND = "E_NOT_FOUND"
    E_ALREADY_EXISTS = "E_ALREADY_EXISTS"

    # Live stream
    E_STREAM_NOT_FOUND = "E_STREAM_NOT_FOUND"
    E_STREAM_ALREADY_LIVE = "E_STREAM_ALREADY_LIVE"
    E_STREAM_NOT_LIVE = "E_STREAM_NOT_LIVE"
    E_STREAM_VERSION_CONFLICT = "E_STREAM_VERSION_CONFLICT"
    E_VIDEO_NOT_FOUND = "E_VIDEO_NOT_FOUND"

    # Uploads
    E_UPLOAD_MISSING = "E_UPLOAD_MISSING"
    E_UPLOAD_REJECTED = "E_UPLOAD_REJECTED"

    # YouTube
    E_YOUTUBE_NOT_CONFIGURED = "E_YOUTUBE_NOT_CONFIGURED"
    E_YOUTUBE_API = "E_YOUTUBE_API"

    def __str__(self) -> str:
        return self.value


class HttpStatusCode(IntEnum):
    OK = 200
    CREATED = 201
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    PAYLOAD_TOO_LARGE = 413
    UNPROCESSABLE_ENTITY = 422
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500
    BAD_GATEWAY = 502


class AppError(Exception):
    """Error carrying an API error code, message and HTTP status.

    The caller location is captured at construction so the exception handler
    can log where the error was raised rather than where it was rendered.
    """

    def __init__(
        self,
        errcode: AppErrorCode | str = AppErrorCode.E_INTERNAL_ERROR,
        errmesg: str = "We are sorry, an error occurred.",
        status_code: HttpStatusCode | int = HttpStatusCode.INTERNAL_SERVER_ERROR,
    ):
        self.errcode = errcode.value if isinstance(errcode, AppErrorCode) else str(errcode)
        self.errmesg = errmesg
        self.status_code = int(status_code)
        self.erresid = uuid4().hex[:10]

        caller_frame = inspect.stack()[1]
        module = inspect.getmodule(caller_frame.frame)
        if module and getattr(module, "__name__", None):
            module_name = module.__name__
        else:
            module_name = caller_frame.filename
        self.caller_info = f"{module_name}:{caller_frame.function}:{caller_frame.lineno}"

        super().__init__(f"{self.errcode}: {errmesg}")
