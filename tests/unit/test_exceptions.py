"""Tests for the exception hierarchy."""

from tabstijl.exceptions import (
    ConfigurationError,
    InvalidNumberError,
    InvalidValueError,
    MissingValueError,
    TabstijlError,
    UnexpectedValueError,
    UnknownOptionError,
)


class TestHierarchy:
    """Test that every error can be caught through its base classes."""

    def test_configuration_errors(self) -> None:
        for exc in (
            UnknownOptionError("--x"),
            MissingValueError("--theme"),
            UnexpectedValueError("-b", "1"),
            InvalidValueError("--theme", "x"),
            InvalidNumberError("--padding", "x"),
        ):
            assert isinstance(exc, ConfigurationError)
            assert isinstance(exc, TabstijlError)


class TestMessages:
    """Test error messages name the offending option and value."""

    def test_unknown_option(self) -> None:
        exc = UnknownOptionError("--nope")
        assert str(exc) == "The '--nope' option is not available"
        assert exc.option == "--nope"
        assert exc.value is None

    def test_missing_value(self) -> None:
        assert str(MissingValueError("--padding")) == "The '--padding' option has no value assigned"

    def test_invalid_value(self) -> None:
        exc = InvalidValueError("--bg-color", "pink")
        assert str(exc) == "Invalid 'pink' value in '--bg-color' option"
        assert exc.value == "pink"

    def test_invalid_number_default_message(self) -> None:
        exc = InvalidNumberError("--padding", "abc")
        assert str(exc) == "Invalid value for '--padding' option"
        assert exc.reason is None

    def test_invalid_number_custom_reason(self) -> None:
        exc = InvalidNumberError("--padding", "-1", "too small")
        assert str(exc) == "too small"
        assert exc.value == "-1"
