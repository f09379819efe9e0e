import functools
import json
from datetime import date

import pytest

from calgrid.cli.main import build_parser, main, resolve_calendar
from calgrid.enums import OutputFormat
from calgrid.exceptions import InvalidDayError
from calgrid.grid import MonthGridBuilder
from calgrid.result import Err, Ok


def test_main_text(capsys: pytest.CaptureFixture) -> None:
    assert main(["2016", "2", "-d", "0", "-f", "text"]) == 0
    out = capsys.readouterr().out
    assert out == MonthGridBuilder().render_text(2016, 1) + "\n"


def test_main_month(capsys: pytest.CaptureFixture) -> None:
    assert main(["2016", "3", "-d", "1", "-l", "fr"]) == 0
    out = capsys.readouterr().out
    assert out == MonthGridBuilder(1, "fr").render_month(2016, 2) + "\n"


def test_main_days(capsys: pytest.CaptureFixture) -> None:
    assert main(["2016", "2", "--first-day", "1", "--format", "days"]) == 0
    weeks = json.loads(capsys.readouterr().out)
    assert weeks[0] == [1, 2, 3, 4, 5, 6, 7]
    assert weeks[-1] == [29, 0, 0, 0, 0, 0, 0]


def test_main_json(capsys: pytest.CaptureFixture) -> None:
    assert main(["2016", "2", "-d", "0", "-f", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["year"] == 2016
    assert data["month"] == 1
    assert data["last_day"] == "2016-02-29"
    assert len(data["weeks"]) == 5


def test_main_defaults_to_today(
    capsys: pytest.CaptureFixture, monkeypatch: pytest.MonkeyPatch, today: date
) -> None:
    monkeypatch.setattr(
        "calgrid.cli.main.MonthGridBuilder",
        functools.partial(MonthGridBuilder, clock=lambda: today),
    )
    assert main(["-d", "0", "-f", "text"]) == 0
    assert capsys.readouterr().out == MonthGridBuilder().render_text(2016, 2) + "\n"


@pytest.mark.parametrize(
    ("argv", "kind"),
    [
        (["1969", "1"], "invalid_year"),
        (["9999", "12"], "invalid_year"),
        (["10000", "1"], "invalid_year"),
        (["2016", "13"], "invalid_month"),
        (["2016", "1", "-d", "8"], "invalid_day"),
        (["2016", "1", "-l", "xx"], "invalid_locale"),
    ],
)
def test_main_invalid(
    capsys: pytest.CaptureFixture, argv: list[str], kind: str
) -> None:
    assert main(argv) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith(f"error: {kind}: ")


def test_main_year_without_month() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["2016"])
    assert exc_info.value.code == 2


def test_main_invalid_format() -> None:
    with pytest.raises(SystemExit):
        main(["2016", "1", "-f", "xml"])


def test_parser_format() -> None:
    args = build_parser().parse_args(["2016", "1", "-f", "JSON"])
    assert args.format == OutputFormat.JSON


def test_resolve_calendar() -> None:
    args = build_parser().parse_args(["2016", "3", "-d", "1"])
    match resolve_calendar(args):
        case Ok((builder, year, month)):
            assert builder.first_day_of_week == 1
            assert (year, month) == (2016, 2)
        case Err(error):
            pytest.fail(f"Unexpected error {error}")


def test_resolve_calendar_error() -> None:
    args = build_parser().parse_args(["2016", "3", "-d", "7"])
    result = resolve_calendar(args)
    assert isinstance(result, Err)
    assert isinstance(result.error, InvalidDayError)
    with pytest.raises(InvalidDayError):
        result.unwrap()
