"""
Log Sanitization Utility

Caller-supplied messages and error text end up in log records when a Status
is populated. Values containing CR/LF or other characters outside the
allowlist are rewritten so they cannot forge additional log lines.

Usage:
    from statuskit.utils.log_sanitizer import sanitize_for_log

    logger.warning("Handled error: %s", sanitize_for_log(err.message))
"""

import re
from typing import Any, Optional

from ..core.config import get_settings

# Allowlist: alphanumerics, common punctuation found in status messages, spaces
SAFE_CHAR_PATTERN = re.compile(r"^[a-zA-Z0-9.,:;!?'()\-_@/ ]+$")

CRLF_PATTERN = re.compile(r'[\r\n]')

SAFE_PUNCTUATION = ".,:;!?'()-_@/ "


def sanitize_for_log(value: Any, max_length: Optional[int] = None, encoding: str = 'replace') -> str:
    """
    Sanitize user-controlled data for safe logging.

    Args:
        value: The value to sanitize (will be converted to string)
        max_length: Maximum output length. Defaults to settings.log_max_message_length
        encoding: 'replace' swaps unsafe chars for underscores, 'remove' drops them

    Returns:
        A string safe to interpolate into a log record

    Examples:
        >>> sanitize_for_log("Resource not found.")
        'Resource not found.'

        >>> sanitize_for_log("boom\\nADMIN=true")
        'boom_ADMIN_true'

        >>> sanitize_for_log("evil\\r\\nINJECTION", encoding='remove')
        'evilINJECTION'
    """
    if value is None:
        return "[NULL]"

    if max_length is None:
        max_length = get_settings().log_max_message_length

    str_value = str(value)[:max_length * 2]

    if SAFE_CHAR_PATTERN.match(str_value):
        return str_value[:max_length]

    if encoding == 'remove':
        sanitized = CRLF_PATTERN.sub('', str_value)
        sanitized = ''.join(c for c in sanitized if c.isalnum() or c in SAFE_PUNCTUATION)
    else:
        sanitized = CRLF_PATTERN.sub('_', str_value)
        sanitized = ''.join(c if c.isalnum() or c in SAFE_PUNCTUATION else '_' for c in sanitized)
    return sanitized[:max_length]
