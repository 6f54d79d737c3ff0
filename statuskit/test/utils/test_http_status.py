import logging

import pytest
from ...utils.enums import StatusCode
from ...utils.errors import UnknownStatusCodeError
from ...utils.http_status import (
    STATUS_MESSAGES,
    get_status_message,
    is_valid_http_code,
)


class TestStatusMessages:
    """Tests for the STATUS_MESSAGES catalog"""

    def test_catalog_is_total(self):
        """Every StatusCode member has a non-empty message"""
        for code in StatusCode:
            assert code in STATUS_MESSAGES
            assert isinstance(STATUS_MESSAGES[code], str)
            assert STATUS_MESSAGES[code]

    def test_catalog_has_no_extra_keys(self):
        assert set(STATUS_MESSAGES) == set(StatusCode)

    def test_known_messages(self):
        assert STATUS_MESSAGES[StatusCode.OK] == "Request succeeded."
        assert STATUS_MESSAGES[StatusCode.CREATED] == "Resource created successfully."
        assert STATUS_MESSAGES[StatusCode.NOT_FOUND] == "Resource not found."
        assert STATUS_MESSAGES[StatusCode.INTERNAL_SERVER_ERROR] == "Internal server error."


class TestGetStatusMessage:
    """Tests for get_status_message"""

    def test_lookup_by_member(self):
        assert get_status_message(StatusCode.FORBIDDEN) == "Forbidden. You do not have access."

    def test_lookup_by_plain_int(self):
        """Plain ints matching a member resolve like the member"""
        assert get_status_message(429) == "Too many requests. Please try again later."

    def test_unknown_code_falls_back(self, caplog):
        """Unknown codes get the configured fallback and a warning"""
        with caplog.at_level(logging.WARNING, logger="statuskit.utils.http_status"):
            message = get_status_message(599)

        assert message == "Unknown status."
        assert "599" in caplog.text

    def test_unknown_code_custom_fallback(self, monkeypatch):
        monkeypatch.setenv("STATUSKIT_UNKNOWN_STATUS_MESSAGE", "Something happened.")
        assert get_status_message(999) == "Something happened."

    def test_unknown_code_strict(self, strict_mode):
        """Strict mode raises on codes outside the catalog"""
        with pytest.raises(UnknownStatusCodeError) as exc_info:
            get_status_message(509)
        assert exc_info.value.code == 509

    def test_known_code_strict(self, strict_mode):
        assert get_status_message(StatusCode.OK) == "Request succeeded."


class TestIsValidHttpCode:
    """Tests for is_valid_http_code"""

    @pytest.mark.parametrize("code", [100, 200, 404, 599])
    def test_valid(self, code):
        assert is_valid_http_code(code) is True

    @pytest.mark.parametrize("code", [0, 99, 600, 1001, -1])
    def test_invalid(self, code):
        assert is_valid_http_code(code) is False
