"""Centralized error definitions for dateshortcut.

Every failure the parser can produce is a subclass of ``ShortcutError``.
Each error carries a stable ``code``, a message that quotes the offending
literal, and a ``details`` dict with the same literal so hosts can build
their own validation messages.

Usage:
    from dateshortcut.errors import ShortcutError, handle_error

    try:
        due = parser.parse(text)
    except ShortcutError as e:
        print(handle_error(e))
"""

from __future__ import annotations

from dateshortcut.errors.user_messages import (
    format_error_for_user,
    get_recovery_suggestion,
    get_user_message,
)


# =============================================================================
# Base Error
# =============================================================================


class ShortcutError(Exception):
    """Base exception for all dateshortcut errors.

    Attributes:
        code: Error code for categorization
        message: Developer-facing message embedding the offending input
        recoverable: Whether the caller can fix the input and retry
        details: Structured copy of the offending values
    """

    code: str = "SHORTCUT_ERROR"
    default_message: str = "The date shortcut could not be processed"
    recoverable: bool = True

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message or self.default_message
        self._user_message = user_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        """Get user-friendly message."""
        if self._user_message:
            return self._user_message
        return get_user_message(self)

    @property
    def recovery_suggestion(self) -> str:
        """Get recovery suggestion."""
        return get_recovery_suggestion(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "user_message": self.user_message,
            "recoverable": self.recoverable,
            "details": self.details,
        }


# =============================================================================
# Locale Errors
# =============================================================================


class LocaleError(ShortcutError):
    """Base error for locale resolution."""

    code = "LOCALE_ERROR"
    default_message = "Locale could not be resolved"


class UnknownLocaleError(LocaleError):
    """Locale tag has no registered keyword table."""

    code = "UNKNOWN_LOCALE"
    default_message = "Unknown locale"
    recoverable = False

    def __init__(self, locale: str) -> None:
        self.locale = locale
        super().__init__(
            f'Predefined locale "{locale}" not found.',
            details={"locale": locale},
        )


class LocaleAlreadyRegisteredError(LocaleError):
    """A locale tag is registered twice without ``replace=True``."""

    code = "LOCALE_ALREADY_REGISTERED"
    default_message = "Locale already registered"
    recoverable = False

    def __init__(self, locale: str) -> None:
        self.locale = locale
        super().__init__(
            f'Locale "{locale}" is already registered.',
            details={"locale": locale},
        )


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(ShortcutError):
    """Base error for parser configuration issues."""

    code = "CONFIGURATION_ERROR"
    default_message = "Configuration error"
    recoverable = False


class InvalidDefaultTimeFormatError(ConfigurationError):
    """Default time is not ``HH``, ``HH:MM`` or ``HH:MM:SS``."""

    code = "INVALID_DEFAULT_TIME_FORMAT"
    default_message = "Invalid default time format"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f'Invalid defaultTime format "{value}".',
            details={"default_time": value},
        )


class InvalidDefaultTimeValueError(ConfigurationError):
    """Default time components are out of range."""

    code = "INVALID_DEFAULT_TIME_VALUE"
    default_message = "Invalid default time value"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f'Invalid time values in defaultTime "{value}".',
            details={"default_time": value},
        )


class InvalidConfigError(ConfigurationError):
    """Settings file could not be validated."""

    code = "INVALID_CONFIG"
    default_message = "Invalid configuration"


# =============================================================================
# Shortcut Syntax Errors
# =============================================================================


class ShortcutSyntaxError(ShortcutError):
    """Base error for malformed shortcut input."""

    code = "SHORTCUT_SYNTAX_ERROR"
    default_message = "Malformed date shortcut"


class EmptyShortcutError(ShortcutSyntaxError):
    """Shortcut is empty or whitespace only."""

    code = "EMPTY_SHORTCUT"
    default_message = "Shortcut string cannot be empty."

    def __init__(self, shortcut: str = "") -> None:
        super().__init__(details={"shortcut": shortcut})


class InvalidPartFormatError(ShortcutSyntaxError):
    """Relative token does not look like ``[+-][digits]unit``."""

    code = "INVALID_PART_FORMAT"
    default_message = "Invalid relative part"

    def __init__(self, part: str) -> None:
        self.part = part
        super().__init__(
            f'Invalid part format "{part}" in shortcut.',
            details={"part": part},
        )


class UnknownUnitError(ShortcutSyntaxError):
    """Unit keyword is not known in the active locale."""

    code = "UNKNOWN_UNIT"
    default_message = "Unknown unit"

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(
            f'Unknown unit "{unit}" in shortcut.',
            details={"unit": unit},
        )


# =============================================================================
# Time Expression Errors
# =============================================================================


class TimeExpressionError(ShortcutSyntaxError):
    """Base error for the trailing time-of-day expression."""

    code = "TIME_EXPRESSION_ERROR"
    default_message = "Invalid time expression"


class InvalidTimeFormatError(TimeExpressionError):
    """Minutes or seconds are out of range."""

    code = "INVALID_TIME_FORMAT"
    default_message = "Invalid time format"

    def __init__(self, shortcut: str, time_text: str | None = None) -> None:
        self.shortcut = shortcut
        super().__init__(
            f'Invalid time format in shortcut "{shortcut}".',
            details={"shortcut": shortcut, "time": time_text},
        )


class InvalidHourError(TimeExpressionError):
    """24-hour clock hour is outside 0-23."""

    code = "INVALID_HOUR"
    default_message = "Invalid hour"

    def __init__(self, hour: str) -> None:
        self.hour = hour
        super().__init__(
            f'Invalid hour "{hour}" in shortcut.',
            details={"hour": hour},
        )


class InvalidAmPmHourError(TimeExpressionError):
    """12-hour clock hour is outside 1-12."""

    code = "INVALID_AM_PM_HOUR"
    default_message = "Invalid hour for AM/PM format"

    def __init__(self, hour: str) -> None:
        self.hour = hour
        super().__init__(
            f'Invalid hour "{hour}" for AM/PM format.',
            details={"hour": hour},
        )


# =============================================================================
# Calendar Errors
# =============================================================================


class CalendarError(ShortcutError):
    """Base error for calendar arithmetic."""

    code = "CALENDAR_ERROR"
    default_message = "Date calculation failed"


class WeekdayNotFoundError(CalendarError):
    """Month has fewer business days than the requested ordinal."""

    code = "WEEKDAY_NOT_FOUND"
    default_message = "Weekday not found"

    def __init__(self, ordinal: str, month: str) -> None:
        self.ordinal = ordinal
        self.month = month
        super().__init__(
            f"Could not find the {ordinal} weekday for the specified month ({month}).",
            details={"ordinal": ordinal, "month": month},
        )


class DateOutOfRangeError(CalendarError):
    """Result falls outside the representable calendar range."""

    code = "DATE_OUT_OF_RANGE"
    default_message = "Date out of range"

    def __init__(self, fragment: str) -> None:
        self.fragment = fragment
        super().__init__(
            f'Date out of range while applying "{fragment}".',
            details={"fragment": fragment},
        )


# =============================================================================
# Error Handler
# =============================================================================


def handle_error(error: Exception) -> str:
    """Handle an error and return a user-friendly message.

    Args:
        error: The exception to handle

    Returns:
        User-friendly error message with recovery suggestion
    """
    return format_error_for_user(error)


def is_recoverable(error: Exception) -> bool:
    """Check if the caller can fix the input and try again."""
    if isinstance(error, ShortcutError):
        return error.recoverable
    return False


__all__ = [
    # Base
    "ShortcutError",
    # Locale
    "LocaleError",
    "UnknownLocaleError",
    "LocaleAlreadyRegisteredError",
    # Configuration
    "ConfigurationError",
    "InvalidDefaultTimeFormatError",
    "InvalidDefaultTimeValueError",
    "InvalidConfigError",
    # Syntax
    "ShortcutSyntaxError",
    "EmptyShortcutError",
    "InvalidPartFormatError",
    "UnknownUnitError",
    # Time
    "TimeExpressionError",
    "InvalidTimeFormatError",
    "InvalidHourError",
    "InvalidAmPmHourError",
    # Calendar
    "CalendarError",
    "WeekdayNotFoundError",
    "DateOutOfRangeError",
    # Handlers
    "handle_error",
    "is_recoverable",
]
