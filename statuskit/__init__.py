# statuskit: consistent {code, success, message, payload} API responses
from .utils import (
    STATUS_MESSAGES,
    UNSET,
    HttpError,
    HttpErrorLike,
    Status,
    StatusCode,
    UnknownStatusCodeError,
    get_status_message,
    is_valid_http_code,
)
from .handlers import register_status_handlers, status_response

__all__ = [
    "STATUS_MESSAGES",
    "UNSET",
    "HttpError",
    "HttpErrorLike",
    "Status",
    "StatusCode",
    "UnknownStatusCodeError",
    "get_status_message",
    "is_valid_http_code",
    "register_status_handlers",
    "status_response",
]
