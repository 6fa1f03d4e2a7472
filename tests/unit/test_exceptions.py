"""Unit tests for custom exception classes.

Tests the exception hierarchy, default error codes, message handling,
and details propagation for all custom exceptions in the blueprint engine.
"""

import pytest

from blueprint_engine.exceptions import (
    BlueprintEngineError,
    InputValidationError,
    GenerationError,
    ExportError,
    UnsupportedFormatError,
)


class TestBlueprintEngineError:
    def test_base_error_attributes(self):
        err = BlueprintEngineError("Something failed", error_code="ERR_TEST", details={"key": "value"})
        assert err.message == "Something failed"
        assert err.error_code == "ERR_TEST"
        assert err.details == {"key": "value"}
        assert str(err) == "Something failed"

    def test_base_error_defaults(self):
        err = BlueprintEngineError("Minimal error")
        assert err.error_code == "ERR_UNKNOWN"
        assert err.details is None

    def test_is_exception_subclass(self):
        assert isinstance(BlueprintEngineError("test"), Exception)


class TestSubclassErrorCodes:
    """Each subclass must carry its own default error_code."""

    def test_input_validation_error_code(self):
        err = InputValidationError("too long", details={"field": "goals"})
        assert err.error_code == "ERR_INPUT_001"
        assert err.details == {"field": "goals"}
        assert isinstance(err, BlueprintEngineError)

    def test_generation_error_code(self):
        err = GenerationError("gen fail")
        assert err.error_code == "ERR_GEN_001"
        assert isinstance(err, BlueprintEngineError)

    def test_export_error_code(self):
        err = ExportError("render fail")
        assert err.error_code == "ERR_EXPORT_001"
        assert isinstance(err, BlueprintEngineError)

    def test_unsupported_format_is_export_error(self):
        err = UnsupportedFormatError("xml")
        assert err.error_code == "ERR_EXPORT_002"
        assert isinstance(err, ExportError)


class TestRaising:
    def test_catch_subclass_as_base(self):
        with pytest.raises(BlueprintEngineError) as exc_info:
            raise UnsupportedFormatError("bad format")
        assert exc_info.value.error_code == "ERR_EXPORT_002"
