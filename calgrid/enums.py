from enum import IntEnum, StrEnum


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class SupportedLocale(StrEnum):
    DE = "de"
    EN = "en"
    FR = "fr"


class CalendarErrorKind(StrEnum):
    INVALID_YEAR = "invalid_year"
    INVALID_MONTH = "invalid_month"
    INVALID_DAY = "invalid_day"
    INVALID_LOCALE = "invalid_locale"


class OutputFormat(StrEnum):
    TEXT = "text"
    MONTH = "month"
    DAYS = "days"
    JSON = "json"
