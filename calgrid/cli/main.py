import argparse
import json
import logging
import sys

from calgrid.core.config import settings
from calgrid.core.logging_utils import setup_logging
from calgrid.enums import OutputFormat, SupportedLocale
from calgrid.exceptions import CalendarError
from calgrid.grid import MonthGridBuilder, validate_year_month
from calgrid.result import Err, Ok, Result
from calgrid.transformations import build_calendar_month

logger = logging.getLogger(__name__)


def parse_format(value: str) -> OutputFormat:
    try:
        return OutputFormat(value.lower())
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid format '{value}'. Choose from: "
            + ", ".join(f.value for f in OutputFormat)
        )


def resolve_calendar(
    args: argparse.Namespace,
) -> Result[tuple[MonthGridBuilder, int, int], CalendarError]:
    """Build the builder and the target month from the parsed arguments."""
    try:
        builder = MonthGridBuilder(args.first_day, args.locale)
        if args.year is None:
            year, month = builder.year, builder.month
        else:
            # Months are 1-12 on the command line
            year, month = args.year, args.month - 1
        validate_year_month(year, month)
    except CalendarError as e:
        return Err(e)
    return Ok((builder, year, month))


def render(
    builder: MonthGridBuilder, year: int, month: int, output_format: OutputFormat
) -> str:
    match output_format:
        case OutputFormat.TEXT:
            return builder.render_text(year, month)
        case OutputFormat.MONTH:
            return builder.render_month(year, month)
        case OutputFormat.DAYS:
            return json.dumps(builder.day_numbers_grid(year, month))
        case OutputFormat.JSON:
            return build_calendar_month(builder, year, month).model_dump_json(indent=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calgrid", description="Print a month calendar."
    )
    parser.add_argument("year", type=int, nargs="?", help="Year (default: today)")
    parser.add_argument("month", type=int, nargs="?", help="Month, 1-12")
    parser.add_argument(
        "-d",
        "--first-day",
        type=int,
        default=settings.FIRST_DAY_OF_WEEK,
        help="First day of the week, 0 (Sunday) to 6 (Saturday)",
    )
    parser.add_argument(
        "-l",
        "--locale",
        type=str,
        default=settings.LOCALE,
        help=f"Locale for names ({', '.join(SupportedLocale)})",
    )
    parser.add_argument(
        "-f",
        "--format",
        type=parse_format,
        default=OutputFormat.MONTH,
        help="Output format: text, month, days or json (default: month)",
    )
    parser.add_argument("--log-level", type=str, default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.year is not None and args.month is None:
        parser.error("month is required when year is given")

    setup_logging(args.log_level)
    logger.debug("Arguments: %s", vars(args))

    match resolve_calendar(args):
        case Ok((builder, year, month)):
            print(render(builder, year, month, args.format))
            return 0
        case Err(error):
            print(f"error: {error}", file=sys.stderr)
            return 2


if __name__ == "__main__":
    sys.exit(main())
