"""Unit tests for error classes and user-facing formatting."""

import pytest

from sendgridman.exceptions import (
    DecodeError,
    EmptyTemplateError,
    NotFoundError,
    RateLimitError,
    RemoteError,
    SendgridmanError,
    StoreError,
    UnauthorizedError,
)
from sendgridman.utils.exceptions import format_error_for_user


class TestExceptionHierarchy:
    """Test cases for the exception classes."""

    @pytest.mark.parametrize(
        "exc_class",
        [RemoteError, UnauthorizedError, NotFoundError, DecodeError, EmptyTemplateError, StoreError],
    )
    def test_all_errors_share_base(self, exc_class):
        """Every error derives from SendgridmanError."""
        assert issubclass(exc_class, SendgridmanError)

    def test_store_error_details(self):
        """StoreError records ids and path."""
        error = StoreError("write failed", template_id="T1", version_id="V1", path="/out/a.html")

        assert str(error) == "write failed"
        assert error.details == {"template_id": "T1", "version_id": "V1", "path": "/out/a.html"}

    def test_rate_limit_error(self):
        """RateLimitError keeps retry_after and status code."""
        error = RateLimitError("slow down", retry_after=5, status_code=429)

        assert error.retry_after == 5
        assert error.status_code == 429


class TestFormatErrorForUser:
    """Test cases for format_error_for_user."""

    def test_remote_error_with_status(self):
        """API errors show the status code."""
        error = UnauthorizedError("Unauthorized", status_code=401, response_data={"errors": []})

        message = format_error_for_user(error)

        assert message.startswith("API error: Unauthorized")
        assert "Status code: 401" in message
        assert "Response" not in message

    def test_remote_error_debug_shows_response(self):
        """Debug output includes the response body."""
        error = RemoteError("Bad", status_code=400, response_data={"errors": [{"message": "x"}]})

        assert "Response:" in format_error_for_user(error, debug=True)

    def test_rate_limit_retry_after(self):
        """Rate limit errors show the retry delay."""
        error = RateLimitError("limit", retry_after=30, status_code=429)

        assert "Retry after: 30 seconds" in format_error_for_user(error)

    def test_store_error_debug_shows_cause(self):
        """Debug output for store errors names the OS error."""
        try:
            try:
                raise PermissionError("denied")
            except PermissionError as e:
                raise StoreError("cannot write", path="/out/a.html") from e
        except StoreError as error:
            message = format_error_for_user(error, debug=True)

        assert message.startswith("File error: cannot write")
        assert "PermissionError: denied" in message

    def test_empty_template(self):
        """Empty templates are labelled."""
        error = EmptyTemplateError("No versions for TemplateID=T1", template_id="T1")

        assert format_error_for_user(error) == "Empty template: No versions for TemplateID=T1"

    def test_decode_error(self):
        """Decode errors are labelled."""
        assert format_error_for_user(DecodeError("parse fail")) == "Invalid response: parse fail"

    def test_generic_error(self):
        """Other errors fall back to the default formatting."""
        assert format_error_for_user(ValueError("boom")) == "Error: boom"
        assert format_error_for_user(ValueError("boom"), debug=True) == "Error: boom\nType: ValueError"
