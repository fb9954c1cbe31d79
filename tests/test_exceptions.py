"""Tests for the application exception taxonomy."""

from pageforge.exceptions import (
    AppError,
    ConfigurationError,
    DataValidationError,
    ExportError,
)


def test_subclasses_carry_codes():
    assert ConfigurationError("m").code == "CONFIGURATION_ERROR"
    assert DataValidationError("m").code == "DATA_VALIDATION_ERROR"
    assert ExportError("m").code == "EXPORT_ERROR"
    assert isinstance(ExportError("m"), AppError)


def test_str_and_to_dict():
    err = ExportError("disk full", context={"path": "/x"}, transient=True)
    assert str(err) == "EXPORT_ERROR: disk full"
    assert err.to_dict() == {
        "error_code": "EXPORT_ERROR",
        "message": "disk full",
        "context": {"path": "/x"},
        "is_transient": True,
    }
