import pytest
from ...utils.enums import StatusCode
from ...utils.errors import (
    HttpError,
    HttpErrorLike,
    UnknownStatusCodeError,
)


class TestHttpError:
    """Tests for HttpError"""

    def test_http_error_fields(self):
        """Test HttpError carries code and message"""
        error = HttpError("no token", 401)

        assert isinstance(error, Exception)
        assert error.code == 401
        assert error.message == "no token"
        assert str(error) == "no token"

    def test_http_error_default_code(self):
        """Test HttpError defaults to 500"""
        error = HttpError("boom")
        assert error.code == 500

    def test_http_error_accepts_status_code(self):
        """Test StatusCode members are stored as plain ints"""
        error = HttpError("missing", StatusCode.NOT_FOUND)
        assert error.code == 404
        assert type(error.code) is int

    def test_http_error_satisfies_protocol(self):
        """Test HttpError matches the code/message capability"""
        assert isinstance(HttpError("x", 400), HttpErrorLike)

    def test_plain_object_satisfies_protocol(self):
        """Test any object with code and message matches"""
        class Custom:
            code = 409
            message = "taken"

        assert isinstance(Custom(), HttpErrorLike)


class TestUnknownStatusCodeError:
    """Tests for UnknownStatusCodeError"""

    def test_is_value_error(self):
        error = UnknownStatusCodeError(999)
        assert isinstance(error, ValueError)
        assert error.code == 999
        assert "999" in str(error)
