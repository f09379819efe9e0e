from datetime import date, timedelta

from calgrid.enums import Weekday


def get_weekday(day: date) -> Weekday:
    """Weekday of a date with Sunday as 0."""
    return Weekday(day.isoweekday() % 7)


def first_day_of_month(year: int, month: int) -> date:
    """First date of a month, month is 0-based (January is 0)."""
    return date(year, month + 1, 1)


def last_day_of_month(year: int, month: int) -> date:
    if month == 11:
        return date(year + 1, 1, 1) - timedelta(days=1)
    return date(year, month + 2, 1) - timedelta(days=1)


def is_in_month(day: date, year: int, month: int) -> bool:
    return day.year == year and day.month == month + 1
