"""Exceptions for tabstijl."""


# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class TabstijlError(Exception):
    """
    Base exception for all tabstijl errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(TabstijlError):
    """
    Base exception for command-line configuration errors.

    Configuration errors are fatal: they are raised before any input is
    read, so no partial table is ever written.

    Attributes:
        option: The offending option as written (e.g. ``--text-color``)
        value: The offending value, if the option carried one
    """

    def __init__(self, message: str, option: str, value: str | None = None) -> None:
        self.option = option
        self.value = value
        super().__init__(message)


class UnknownOptionError(ConfigurationError):
    """Raised when an option is not part of the option table."""

    def __init__(self, option: str) -> None:
        super().__init__(f"The '{option}' option is not available", option)


class MissingValueError(ConfigurationError):
    """Raised when an ``--option=VALUE`` option is given without ``=VALUE``."""

    def __init__(self, option: str) -> None:
        super().__init__(f"The '{option}' option has no value assigned", option)


class UnexpectedValueError(ConfigurationError):
    """Raised when a flag option is given a value."""

    def __init__(self, option: str, value: str) -> None:
        super().__init__(f"The '{option}' option does not take a value", option, value)


class InvalidValueError(ConfigurationError):
    """Raised when a value is empty or not in the option's enumerated set."""

    def __init__(self, option: str, value: str) -> None:
        super().__init__(f"Invalid '{value}' value in '{option}' option", option, value)


class InvalidNumberError(ConfigurationError):
    """Raised when a numeric value cannot be parsed or is out of range."""

    def __init__(self, option: str, value: str, reason: str | None = None) -> None:
        self.reason = reason
        message = reason or f"Invalid value for '{option}' option"
        super().__init__(message, option, value)
