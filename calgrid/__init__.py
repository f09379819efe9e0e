from calgrid.enums import SupportedLocale, Weekday
from calgrid.exceptions import (
    CalendarError,
    InvalidDayError,
    InvalidLocaleError,
    InvalidMonthError,
    InvalidYearError,
)
from calgrid.grid import MonthGridBuilder

__version__ = "0.1.0"

__all__ = [
    "CalendarError",
    "InvalidDayError",
    "InvalidLocaleError",
    "InvalidMonthError",
    "InvalidYearError",
    "MonthGridBuilder",
    "SupportedLocale",
    "Weekday",
]
