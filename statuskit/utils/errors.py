from typing import Protocol, runtime_checkable

from .enums import StatusCode


@runtime_checkable
class HttpErrorLike(Protocol):
    """Anything carrying an HTTP-ish code and a message."""
    code: int
    message: str


class HttpError(Exception):
    """Application error with a status code, handled by Status.error()."""

    def __init__(self, message: str, code: int = StatusCode.INTERNAL_SERVER_ERROR):
        super().__init__(message)
        self.message = message
        self.code = int(code)

    def __repr__(self) -> str:
        return f"HttpError(code={self.code}, message={self.message!r})"


class UnknownStatusCodeError(ValueError):
    """Raised in strict mode for codes outside the catalog or the HTTP range."""

    def __init__(self, code):
        super().__init__(f"Unknown HTTP status code: {code}")
        self.code = code
