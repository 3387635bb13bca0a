"""User-friendly error messages for dateshortcut.

Human-readable messages and recovery suggestions keyed by error code, so
input fields can show something better than a raw exception.
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Error Message Catalog
# =============================================================================

ERROR_MESSAGES: dict[str, str] = {
    # Locale errors
    "LOCALE_ERROR": "The language settings could not be loaded.",
    "UNKNOWN_LOCALE": "This language is not supported.",
    "LOCALE_ALREADY_REGISTERED": "A language with this name already exists.",
    # Configuration errors
    "CONFIGURATION_ERROR": "There's a configuration issue.",
    "INVALID_DEFAULT_TIME_FORMAT": "The default time is not written as HH, HH:MM or HH:MM:SS.",
    "INVALID_DEFAULT_TIME_VALUE": "The default time is not a valid time of day.",
    "INVALID_CONFIG": "The configuration is invalid. Check settings.",
    # Syntax errors
    "SHORTCUT_SYNTAX_ERROR": "We couldn't understand this date.",
    "EMPTY_SHORTCUT": "Please enter a date.",
    "INVALID_PART_FORMAT": "Part of this date isn't written correctly.",
    "UNKNOWN_UNIT": "This date uses a unit we don't recognize.",
    # Time errors
    "TIME_EXPRESSION_ERROR": "The time in this date isn't valid.",
    "INVALID_TIME_FORMAT": "Minutes and seconds must be between 00 and 59.",
    "INVALID_HOUR": "Hours must be between 0 and 23.",
    "INVALID_AM_PM_HOUR": "With am/pm, hours must be between 1 and 12.",
    # Calendar errors
    "CALENDAR_ERROR": "We couldn't calculate this date.",
    "WEEKDAY_NOT_FOUND": "That month doesn't have that many working days.",
    "DATE_OUT_OF_RANGE": "The resulting date is too far in the past or future.",
    # Generic
    "SHORTCUT_ERROR": "We couldn't understand this date. Please try again.",
    "UNKNOWN_ERROR": "Something went wrong. Please try again.",
}


# =============================================================================
# Recovery Suggestions
# =============================================================================

RECOVERY_SUGGESTIONS: dict[str, str] = {
    # Locale errors
    "LOCALE_ERROR": "Check the available languages with: dateshortcut locales",
    "UNKNOWN_LOCALE": "Use one of the built-in locales: en, de, fr, tr.",
    "LOCALE_ALREADY_REGISTERED": "Pass replace=True to overwrite the existing locale.",
    # Configuration errors
    "CONFIGURATION_ERROR": "Check config: dateshortcut config show",
    "INVALID_DEFAULT_TIME_FORMAT": "Use a value like '09', '09:30' or '09:30:00'.",
    "INVALID_DEFAULT_TIME_VALUE": "Hours go from 0 to 23, minutes and seconds from 0 to 59.",
    "INVALID_CONFIG": "Re-create the file with: dateshortcut config init",
    # Syntax errors
    "SHORTCUT_SYNTAX_ERROR": "Try something like 't', '+3d' or '1y 2m -3d'.",
    "EMPTY_SHORTCUT": "Type 't' for today, or an offset like '+2w'.",
    "INVALID_PART_FORMAT": "Write offsets as sign, number and unit, e.g. '+3d' or '-1w'.",
    "UNKNOWN_UNIT": "Use units like d (day), w (week), m (month), y (year) or wd (weekday).",
    # Time errors
    "TIME_EXPRESSION_ERROR": "Put the time at the end, e.g. 't 17:30' or 't 5:30pm'.",
    "INVALID_TIME_FORMAT": "Use a time like '9:05' or '17:30:15'.",
    "INVALID_HOUR": "Use a 24-hour time like '17:30'.",
    "INVALID_AM_PM_HOUR": "Use a time like '12am', '5pm' or '11:30am'.",
    # Calendar errors
    "CALENDAR_ERROR": "Try a simpler date expression.",
    "WEEKDAY_NOT_FOUND": "Use a smaller number, e.g. '1wd' for the first working day.",
    "DATE_OUT_OF_RANGE": "Use a smaller offset.",
    # Generic
    "SHORTCUT_ERROR": "If this persists, please report the issue.",
    "UNKNOWN_ERROR": "Please report the issue if it continues.",
}


# =============================================================================
# Helper Functions
# =============================================================================


def _error_code(error: Any) -> str:
    if hasattr(error, "code"):
        return error.code
    if isinstance(error, str):
        return error
    return type(error).__name__.upper()


def get_user_message(error: Any) -> str:
    """Get user-friendly message for an error.

    Args:
        error: The error (can be Exception or error code string)

    Returns:
        User-friendly error message
    """
    return ERROR_MESSAGES.get(_error_code(error), ERROR_MESSAGES["UNKNOWN_ERROR"])


def get_recovery_suggestion(error: Any) -> str:
    """Get recovery suggestion for an error.

    Args:
        error: The error (can be Exception or error code string)

    Returns:
        Recovery suggestion
    """
    return RECOVERY_SUGGESTIONS.get(_error_code(error), RECOVERY_SUGGESTIONS["UNKNOWN_ERROR"])


def format_error_for_user(error: Any) -> str:
    """Format a complete user-friendly error message.

    Args:
        error: The error to format

    Returns:
        Complete error message with recovery suggestion
    """
    message = get_user_message(error)
    suggestion = get_recovery_suggestion(error)

    return f"{message}\n\nSuggestion: {suggestion}"


def format_error_for_cli(error: Any) -> str:
    """Format error for CLI output.

    Args:
        error: The error to format

    Returns:
        CLI-formatted error message
    """
    code = getattr(error, "code", "ERROR")
    lines = [
        f"Error [{code}]: {get_user_message(error)}",
        "",
        f"Suggestion: {get_recovery_suggestion(error)}",
    ]

    details = getattr(error, "details", None)
    if details:
        lines.append("")
        lines.append("Details:")
        for key, value in details.items():
            if value is not None:
                lines.append(f"  {key}: {value}")

    return "\n".join(lines)


def format_error_for_ui(error: Any) -> dict:
    """Format error for form validation display."""
    return {
        "message": get_user_message(error),
        "suggestion": get_recovery_suggestion(error),
        "code": getattr(error, "code", "UNKNOWN_ERROR"),
        "recoverable": getattr(error, "recoverable", False),
        "details": dict(getattr(error, "details", {}) or {}),
    }


__all__ = [
    "ERROR_MESSAGES",
    "RECOVERY_SUGGESTIONS",
    "get_user_message",
    "get_recovery_suggestion",
    "format_error_for_user",
    "format_error_for_cli",
    "format_error_for_ui",
]
