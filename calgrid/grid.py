import logging
from datetime import date, timedelta
from typing import Any, Callable, TypeAlias

from calgrid.core.date_utils import first_day_of_month, get_weekday, is_in_month
from calgrid.core.timing import log_timing
from calgrid.enums import CalendarErrorKind, SupportedLocale, Weekday
from calgrid.exceptions import calendar_error
from calgrid.locale import month_name, parse_locale, weekday_abbr, weekday_name

logger = logging.getLogger(__name__)

MIN_YEAR = 1970
# December grids of the last year would need dates past date.max
MAX_YEAR = 9998
DAYS_PER_WEEK = 7

DateTransform: TypeAlias = Callable[[date], Any]
WeekTransform: TypeAlias = Callable[[list[Any]], Any]
Clock: TypeAlias = Callable[[], date]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_weekday(day: Any) -> Weekday:
    if not _is_int(day) or not 0 <= day <= 6:
        raise calendar_error(CalendarErrorKind.INVALID_DAY, day)
    return Weekday(day)


def validate_year_month(year: Any, month: Any) -> None:
    """Raise InvalidYearError or InvalidMonthError, year is checked first"""
    if not _is_int(year) or not MIN_YEAR <= year <= MAX_YEAR:
        raise calendar_error(CalendarErrorKind.INVALID_YEAR, year)
    if not _is_int(month) or not 0 <= month <= 11:
        raise calendar_error(CalendarErrorKind.INVALID_MONTH, month)


class MonthGridBuilder:
    """
    Builds week aligned date grids for a month.

    Months are 0-based (January is 0) and weekdays start with Sunday as 0.
    The builder owns the first day of the week and the display locale, both
    can be changed after construction. Grids returned earlier are never
    modified by a configuration change.

    Not thread safe, share instances across threads only with external locking.
    """

    def __init__(
        self,
        first_day_of_week: int | None = None,
        locale: str | SupportedLocale | None = None,
        clock: Clock = date.today,
    ) -> None:
        self._first_day_of_week = Weekday.SUNDAY
        if first_day_of_week:
            self._first_day_of_week = _validate_weekday(first_day_of_week)
        self._locale = SupportedLocale.EN if locale is None else parse_locale(locale)
        self._clock = clock

    @property
    def first_day_of_week(self) -> Weekday:
        return self._first_day_of_week

    @property
    def locale(self) -> SupportedLocale:
        return self._locale

    def set_first_day_of_week(self, day: int) -> None:
        self._first_day_of_week = _validate_weekday(day)
        logger.debug("First day of week set to %s", self._first_day_of_week.name)

    def set_locale(self, locale: str | SupportedLocale) -> None:
        self._locale = parse_locale(locale)
        logger.debug("Locale set to %s", self._locale)

    # -- Today ---------------------------------------------------------------

    @property
    def today(self) -> date:
        return self._clock()

    @property
    def year(self) -> int:
        return self.today.year

    @property
    def month(self) -> int:
        return self.today.month - 1

    @property
    def day_of_month(self) -> int:
        return self.today.day

    @property
    def day(self) -> Weekday:
        return get_weekday(self.today)

    @property
    def day_string(self) -> str:
        return weekday_name(self._locale, self.day)

    @property
    def month_string(self) -> str:
        return month_name(self._locale, self.month)

    def _resolve(self, year: int | None, month: int | None) -> tuple[Any, Any]:
        if year is None:
            today = self.today
            return today.year, today.month - 1
        return year, month

    # -- Grid ----------------------------------------------------------------

    def align_to_week_start(self, day: date) -> date:
        """Most recent date on or before `day` that falls on the first day of week"""
        start = day
        while get_weekday(start) != self._first_day_of_week:
            start -= timedelta(days=1)
        return start

    @log_timing
    def build_grid(
        self,
        year: int,
        month: int,
        date_transform: DateTransform | None = None,
        week_transform: WeekTransform | None = None,
    ) -> list[Any]:
        """
        Compute the weeks that cover a month.

        Args:
            year: Year, 1970 to 9998
            month: Month (0-11)
            date_transform: Applied to every date before it is put in a week
            week_transform: Applied to every completed week

        Returns:
            List of (transformed) weeks, each made of 7 (transformed) dates
        """
        validate_year_month(year, month)

        weeks = []
        current = self.align_to_week_start(first_day_of_month(year, month))
        while True:
            week = []
            for _ in range(DAYS_PER_WEEK):
                week.append(date_transform(current) if date_transform else current)
                current += timedelta(days=1)
            weeks.append(week_transform(week) if week_transform else week)

            if not (current.month - 1 <= month and current.year == year):
                break

        logger.debug(
            "Built %d weeks for %04d-%02d starting on %s",
            len(weeks),
            year,
            month + 1,
            self._first_day_of_week.name,
        )
        return weeks

    def day_numbers_grid(
        self, year: int | None = None, month: int | None = None
    ) -> list[list[int]]:
        """Day of month for every grid slot, 0 for days of the adjacent months"""
        year, month = self._resolve(year, month)
        return self.build_grid(
            year,
            month,
            lambda d: d.day if is_in_month(d, year, month) else 0,
        )

    def render_text(self, year: int | None = None, month: int | None = None) -> str:
        year, month = self._resolve(year, month)
        weeks = self.build_grid(
            year,
            month,
            lambda d: f"{d.day:>2}" if is_in_month(d, year, month) else "  ",
            " ".join,
        )
        return "\n".join(weeks)

    # -- Localized decoration ------------------------------------------------

    def weekday_header(self) -> str:
        """Abbreviated weekday names, starting at the first day of week"""
        return " ".join(
            f"{weekday_abbr(self._locale, (self._first_day_of_week + i) % 7):>2}"
            for i in range(DAYS_PER_WEEK)
        )

    def render_month(self, year: int | None = None, month: int | None = None) -> str:
        """render_text with a localized title and weekday header"""
        year, month = self._resolve(year, month)
        body = self.render_text(year, month)
        width = DAYS_PER_WEEK * 3 - 1
        title = f"{month_name(self._locale, month)} {year}".center(width).rstrip()
        return "\n".join([title, self.weekday_header(), body])
