from typing import Any

from calgrid.enums import CalendarErrorKind


class CalendarError(Exception):
    """Validation failure raised by the grid builder and the localizer."""

    kind: CalendarErrorKind

    def __init__(self, kind: CalendarErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class InvalidYearError(CalendarError):
    pass


class InvalidMonthError(CalendarError):
    pass


class InvalidDayError(CalendarError):
    pass


class InvalidLocaleError(CalendarError):
    pass


_ERRORS: dict[CalendarErrorKind, tuple[type[CalendarError], str]] = {
    CalendarErrorKind.INVALID_YEAR: (
        InvalidYearError,
        "year must be an integer within 1970 to 9998",
    ),
    CalendarErrorKind.INVALID_MONTH: (
        InvalidMonthError,
        "month must be an integer within 0 to 11 (January is 0)",
    ),
    CalendarErrorKind.INVALID_DAY: (
        InvalidDayError,
        "first day of week must be an integer within 0 to 6 (Sunday is 0)",
    ),
    CalendarErrorKind.INVALID_LOCALE: (
        InvalidLocaleError,
        "locale must be one of the supported language tags",
    ),
}


def calendar_error(kind: CalendarErrorKind, value: Any = None) -> CalendarError:
    """
    Build the error for a given kind.

    Args:
        kind: Which validation failed
        value: Offending input, appended to the message if given

    Returns:
        Instance of the matching CalendarError subclass (not raised)
    """
    error_cls, message = _ERRORS[kind]
    if value is not None:
        message = f"{message}, got {value!r}"
    return error_cls(kind, message)
