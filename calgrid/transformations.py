from datetime import date
from typing import Annotated

from pydantic import BaseModel, Field

from calgrid.core.date_utils import (
    get_weekday,
    is_in_month,
    last_day_of_month,
)
from calgrid.enums import Weekday
from calgrid.grid import MonthGridBuilder


class CalendarDay(BaseModel):
    date: date
    day: int
    weekday: Weekday
    is_in_month: bool = True  # False for padding days from prev/next month


class CalendarWeek(BaseModel):
    days: Annotated[list[CalendarDay], Field(min_length=7, max_length=7)]


class CalendarMonth(BaseModel):
    year: int
    month: Annotated[int, Field(ge=0, le=11)]
    first_day_of_week: Weekday
    last_day: date
    weeks: list[CalendarWeek]


def build_calendar_month(
    builder: MonthGridBuilder, year: int, month: int
) -> CalendarMonth:
    def to_day(d: date) -> CalendarDay:
        return CalendarDay(
            date=d,
            day=d.day,
            weekday=get_weekday(d),
            is_in_month=is_in_month(d, year, month),
        )

    weeks = builder.build_grid(
        year, month, to_day, lambda days: CalendarWeek(days=days)
    )
    return CalendarMonth(
        year=year,
        month=month,
        first_day_of_week=builder.first_day_of_week,
        last_day=last_day_of_month(year, month),
        weeks=weeks,
    )
