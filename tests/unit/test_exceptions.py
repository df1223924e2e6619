"""Unit tests for custom exception classes.

Tests the exception hierarchy, default error codes, message handling,
and details propagation for all custom exceptions in the quote service.
"""

from quote_service.exceptions import (
    QuoteServiceError,
    InputValidationError,
    StorageError,
    QuoteConversionError,
)


class TestQuoteServiceError:
    def test_base_error_attributes(self):
        err = QuoteServiceError("Something failed", error_code="ERR_TEST", details={"key": "value"})
        assert err.message == "Something failed"
        assert err.error_code == "ERR_TEST"
        assert err.details == {"key": "value"}
        assert str(err) == "Something failed"

    def test_base_error_defaults(self):
        err = QuoteServiceError("Minimal error")
        assert err.error_code == "ERR_UNKNOWN"
        assert err.details is None


class TestSubclassErrorCodes:
    """Each subclass must carry its own default error_code."""

    def test_input_validation_error_code(self):
        err = InputValidationError("bad id", details={"id": "x"})
        assert err.error_code == "ERR_INPUT_001"
        assert err.details == {"id": "x"}
        assert isinstance(err, QuoteServiceError)

    def test_storage_error_code(self):
        err = StorageError("disk full")
        assert err.error_code == "ERR_STORE_001"
        assert isinstance(err, QuoteServiceError)

    def test_quote_conversion_error_code(self):
        err = QuoteConversionError("already invoiced")
        assert err.error_code == "ERR_QUOTE_001"
        assert isinstance(err, QuoteServiceError)
