from .enums import StatusCode
from .errors import HttpError, HttpErrorLike, UnknownStatusCodeError
from .http_status import STATUS_MESSAGES, get_status_message, is_valid_http_code
from .response import UNSET, Status

__all__ = [
    "StatusCode",
    "HttpError",
    "HttpErrorLike",
    "UnknownStatusCodeError",
    "STATUS_MESSAGES",
    "get_status_message",
    "is_valid_http_code",
    "UNSET",
    "Status",
]
