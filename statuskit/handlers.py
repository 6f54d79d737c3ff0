"""
FastAPI integration for Status.

Turns a populated Status into a JSONResponse whose status line matches
`status.code`, and maps raised errors onto Status bodies so clients always
receive the same four-field envelope.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from .core.config import get_settings
from .utils.enums import StatusCode
from .utils.errors import HttpError
from .utils.http_status import MAX_HTTP_CODE
from .utils.log_sanitizer import sanitize_for_log
from .utils.response import Status

logger = logging.getLogger(__name__)

FINAL_STATUS_MIN = 200


def status_response(status: Status) -> JSONResponse:
    """Build the HTTP response for a populated Status.

    The body always carries `status.code`. Codes that cannot appear on a
    final status line (business codes, 1xx) are sent as 500.
    """
    status_code = status.code
    if not FINAL_STATUS_MIN <= status_code <= MAX_HTTP_CODE:
        logger.warning(f"[STATUS] Code {status_code} is not a valid status line, responding with 500")
        status_code = StatusCode.INTERNAL_SERVER_ERROR.value
    return JSONResponse(status_code=status_code, content=jsonable_encoder(status.to_dict()))


def register_status_handlers(app: FastAPI) -> None:
    """Register HttpError and catch-all exception handlers on the application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(HttpError)
    async def handle_http_error(request: Request, exc: HttpError) -> JSONResponse:
        logger.warning(
            f"[STATUS] {request.method} {request.url.path} -> {exc.code}: {sanitize_for_log(exc.message)}"
        )
        status = Status()
        status.error(exc)
        return status_response(status)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            f"[STATUS] Unhandled error on {request.method} {request.url.path}: {sanitize_for_log(exc)}",
            exc_info=exc,
        )
        settings = get_settings()
        status = Status()
        if settings.expose_exception_messages:
            status.generic_error(exc)
        else:
            status.generic_error(HttpError(settings.generic_error_message))
        return status_response(status)
