"""
Standard API Response Status

Provides the value object every endpoint returns, so that all responses share
the same four-field shape:

    {"code": 201, "success": true, "message": "...", "payload": {...}}

Usage:
    status = Status[dict]()
    if details:
        status.success_status(StatusCode.CREATED, {"user_id": 123})
    else:
        status.error_status(StatusCode.BAD_REQUEST)
    return status_response(status)
"""
import logging
from typing import Any, Dict, Generic, Optional, TypeVar, Union

from pydantic import BaseModel

from ..core.config import get_settings
from .enums import StatusCode
from .errors import HttpErrorLike, UnknownStatusCodeError
from .http_status import get_status_message, is_valid_http_code
from .log_sanitizer import sanitize_for_log

logger = logging.getLogger(__name__)

T = TypeVar('T')


class _Unset:
    """Marker for an argument the caller did not supply."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


class Status(BaseModel, Generic[T]):
    """
    Mutable response status. Starts as 400 with an empty message so that a
    forgotten populating call never reads as a successful response.
    """
    code: int = StatusCode.BAD_REQUEST.value
    success: bool = False
    message: str = ""
    payload: Optional[T] = None

    @staticmethod
    def _check_message(message: Any) -> None:
        if message is not UNSET and not isinstance(message, str):
            raise TypeError(f"message must be a str, not {type(message).__name__}")

    def _set(self, message: Any = UNSET, payload: Any = UNSET) -> None:
        # Only supplied fields are written; an explicit "" message or falsy payload counts as supplied
        self._check_message(message)
        if message is not UNSET:
            self.message = message
        if payload is not UNSET:
            self.payload = payload

    def success_status(self, code: Union[StatusCode, int], payload: Any = UNSET) -> None:
        """
        Populate a success response with the catalog message for `code`.

        The code is not checked to be 2xx. The previous payload is kept when
        `payload` is not supplied.
        """
        message = get_status_message(code)
        self.code = int(code)
        self.success = True
        self._set(message=message, payload=payload)

    def success_ok(self, message: Any = UNSET, payload: Any = UNSET) -> None:
        """
        Populate a 200 response, overwriting only the fields supplied.

        Raises:
            TypeError: `message` is supplied but is not a str
        """
        self._check_message(message)
        self.code = StatusCode.OK.value
        self.success = True
        self._set(message=message, payload=payload)

    def error_status(self, code: Union[StatusCode, int]) -> None:
        """
        Populate an error response with the catalog message for `code`.

        Raises:
            UnknownStatusCodeError: strict mode and `code` is not in the catalog
        """
        message = get_status_message(code)
        self.code = int(code)
        self.success = False
        self.payload = None
        self._set(message=message)
        logger.debug(f"[STATUS] error_status {self.code}")

    def error(self, err: HttpErrorLike) -> None:
        """
        Populate an error response from any object exposing `code` and `message`.

        The code is passed through verbatim. Codes outside 100-599 are logged,
        or rejected in strict mode.
        """
        code = int(err.code)
        if err.message:
            self._check_message(err.message)
        if not is_valid_http_code(code):
            if get_settings().strict_status_codes:
                raise UnknownStatusCodeError(code)
            logger.warning(f"[STATUS] Custom error carries non-HTTP code {code}")

        self.code = code
        self.success = False
        self.payload = None
        # An error without text leaves the previous message in place
        if err.message:
            self._set(message=err.message)
        logger.debug(f"[STATUS] error {code}: {sanitize_for_log(err.message)}")

    def generic_error(self, err: Union[BaseException, HttpErrorLike]) -> None:
        """Fallback for unexpected failures: always 500 with the error's text."""
        message = getattr(err, "message", None)
        if not isinstance(message, str):
            message = str(err)

        self.code = StatusCode.INTERNAL_SERVER_ERROR.value
        self.success = False
        self.payload = None
        if message:
            self._set(message=message)
        logger.debug(f"[STATUS] generic_error: {sanitize_for_log(message)}")

    @classmethod
    def SUCCESS(cls, code: Union[StatusCode, int], payload: Any = UNSET) -> "Status":
        status = cls()
        status.success_status(code, payload)
        return status

    @classmethod
    def ERR(cls, code: Union[StatusCode, int]) -> "Status":
        status = cls()
        status.error_status(code)
        return status

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "success": self.success,
            "message": self.message,
            "payload": self.payload,
        }

    # camelCase aliases
    successStatus = success_status
    successOK = success_ok
    errorStatus = error_status
    genericError = generic_error
