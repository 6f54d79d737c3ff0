"""
HTTP Status Catalog

Default human-readable messages for every StatusCode member.
The mapping is total over the enumeration; lookups for ints outside it
go through the unknown-code policy configured in Settings.
"""
import logging
from typing import Dict, Union

from ..core.config import get_settings
from .enums import StatusCode
from .errors import UnknownStatusCodeError

logger = logging.getLogger(__name__)

MIN_HTTP_CODE = 100
MAX_HTTP_CODE = 599

STATUS_MESSAGES: Dict[StatusCode, str] = {
    StatusCode.OK: "Request succeeded.",
    StatusCode.CREATED: "Resource created successfully.",
    StatusCode.ACCEPTED: "Request accepted and is being processed.",
    StatusCode.NON_AUTHORITATIVE: "Non-authoritative information.",
    StatusCode.NO_CONTENT: "Request succeeded, no content to return.",
    StatusCode.RESET_CONTENT: "Reset content.",
    StatusCode.PARTIAL_CONTENT: "Partial content delivered.",

    StatusCode.MULTIPLE_CHOICES: "Multiple choices available.",
    StatusCode.MOVED_PERMANENTLY: "Resource moved permanently.",
    StatusCode.FOUND: "Resource found at another location.",
    StatusCode.SEE_OTHER: "See another resource.",
    StatusCode.NOT_MODIFIED: "Not modified since last request.",
    StatusCode.TEMPORARY_REDIRECT: "Temporary redirect.",
    StatusCode.PERMANENT_REDIRECT: "Permanent redirect.",

    StatusCode.BAD_REQUEST: "Bad request. Please check your input.",
    StatusCode.UNAUTHORIZED: "Unauthorized. Please log in.",
    StatusCode.PAYMENT_REQUIRED: "Payment required.",
    StatusCode.FORBIDDEN: "Forbidden. You do not have access.",
    StatusCode.NOT_FOUND: "Resource not found.",
    StatusCode.METHOD_NOT_ALLOWED: "Method not allowed.",
    StatusCode.NOT_ACCEPTABLE: "Not acceptable response format.",
    StatusCode.PROXY_AUTH_REQUIRED: "Proxy authentication required.",
    StatusCode.REQUEST_TIMEOUT: "Request timed out.",
    StatusCode.CONFLICT: "Conflict. This resource already exists or cannot be processed.",
    StatusCode.GONE: "Resource is gone and will not return.",
    StatusCode.LENGTH_REQUIRED: "Content length header required.",
    StatusCode.PRECONDITION_FAILED: "Precondition failed.",
    StatusCode.PAYLOAD_TOO_LARGE: "Request payload too large.",
    StatusCode.URI_TOO_LONG: "URI too long.",
    StatusCode.UNSUPPORTED_MEDIA_TYPE: "Unsupported media type.",
    StatusCode.RANGE_NOT_SATISFIABLE: "Requested range not satisfiable.",
    StatusCode.EXPECTATION_FAILED: "Expectation failed.",
    StatusCode.IM_A_TEAPOT: "I'm a teapot.",
    StatusCode.MISDIRECTED_REQUEST: "Request was misdirected.",
    StatusCode.UNPROCESSABLE_CONTENT: "Unprocessable content.",
    StatusCode.LOCKED: "Resource is locked.",
    StatusCode.FAILED_DEPENDENCY: "Failed dependency.",
    StatusCode.TOO_EARLY: "Request too early.",
    StatusCode.UPGRADE_REQUIRED: "Upgrade required.",
    StatusCode.PRECONDITION_REQUIRED: "Precondition required.",
    StatusCode.TOO_MANY_REQUESTS: "Too many requests. Please try again later.",
    StatusCode.REQUEST_HEADER_FIELDS_TOO_LARGE: "Request header fields too large.",
    StatusCode.UNAVAILABLE_FOR_LEGAL_REASONS: "Unavailable for legal reasons.",

    StatusCode.INTERNAL_SERVER_ERROR: "Internal server error.",
    StatusCode.NOT_IMPLEMENTED: "Feature not implemented.",
    StatusCode.BAD_GATEWAY: "Bad gateway.",
    StatusCode.SERVICE_UNAVAILABLE: "Server is currently unavailable or overloaded.",
    StatusCode.GATEWAY_TIMEOUT: "Server gateway timed out.",
    StatusCode.HTTP_VERSION_NOT_SUPPORTED: "HTTP version not supported.",
    StatusCode.VARIANT_ALSO_NEGOTIATES: "Variant negotiation failed.",
    StatusCode.INSUFFICIENT_STORAGE: "Insufficient storage.",
    StatusCode.LOOP_DETECTED: "Loop detected.",
    StatusCode.NOT_EXTENDED: "Not extended.",
    StatusCode.NETWORK_AUTH_REQUIRED: "Network authentication required.",
}


def is_valid_http_code(code: int) -> bool:
    return MIN_HTTP_CODE <= code <= MAX_HTTP_CODE


def get_status_message(code: Union[StatusCode, int]) -> str:
    """
    Return the default message for a status code.

    Args:
        code: A StatusCode member or a plain int

    Returns:
        The catalog message. Ints outside the catalog get
        settings.unknown_status_message unless strict mode is on.

    Raises:
        UnknownStatusCodeError: strict mode and code is not in the catalog
    """
    try:
        return STATUS_MESSAGES[StatusCode(code)]
    except ValueError:
        settings = get_settings()
        if settings.strict_status_codes:
            raise UnknownStatusCodeError(code)
        logger.warning(f"[STATUS] No catalog message for status code {code}, using fallback")
        return settings.unknown_status_message
