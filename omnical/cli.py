"""Command-line interface: print calendars, list days and query dates."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass

from omnical.chinese import BEIJING_TZ, ChineseDay
from omnical.date import Date, Weekday, unix_time_now
from omnical.gregorian import GregorianCalendar, GregorianDay, GregorianMonth, GregorianYear

_VERSION = "0.11.0"
_COMMANDS = ("print", "list", "query")
_TOP_LEVEL_FLAGS = ("-h", "--help", "-V", "--version")
_WIDTH = 28


@dataclass(frozen=True)
class DisplayOptions:
    """Which details to show for each day."""

    chinese: bool = False
    weekday: bool = False
    lunar_phase: bool = False
    lunar_phase_emoji: bool = False
    solar_term: bool = False


def _now() -> Date:
    return Date.from_unix_time(unix_time_now(), BEIJING_TZ)


def _today() -> GregorianDay:
    return GregorianDay.from_date(_now())


def month_lines(month: GregorianMonth, today: GregorianDay | None = None) -> list[str]:
    """The grid of a month, Monday first, with today's date bracketed."""
    lines = ["".join(f" {weekday:3}" for weekday in Weekday)]
    row = "    " * (month.first_day().weekday().ord() - 1)
    for day in month.days():
        if day == today:
            row += f"[{day.ord():>2}]"
        else:
            row += f" {day.ord():>2} "
        if day.weekday() is Weekday.last():
            lines.append(row)
            row = ""
    if row:
        lines.append(row)
    return lines


def year_lines(year: GregorianYear, today: GregorianDay | None = None) -> list[str]:
    """The grids of all months of a year, each under its centred name."""
    lines: list[str] = []
    for month in year.months():
        lines.append(f"{str(month.name()):^{_WIDTH}}")
        lines.extend(month_lines(month, today))
    return lines


def list_lines(months: Iterable[GregorianMonth], options: DisplayOptions) -> list[str]:
    """One line per day of the given months, with the requested details."""
    lines: list[str] = []
    chinese_day: ChineseDay | None = None
    for month in months:
        for day in month.days():
            date = day.to_date()
            parts = [f"{day:#}"]
            if options.chinese:
                if chinese_day is None:
                    chinese_day = ChineseDay.from_date(date)
                else:
                    chinese_day = chinese_day.succ()
                parts.append(str(chinese_day))
            if options.weekday:
                parts.append(f"{day.weekday():#}")
            if options.lunar_phase or options.lunar_phase_emoji:
                phase = date.lunar_phase(BEIJING_TZ)
                if options.lunar_phase:
                    parts.append(phase.chinese())
                if options.lunar_phase_emoji:
                    parts.append(phase.emoji())
            if options.solar_term:
                term = date.solar_term(BEIJING_TZ)
                if term is not None:
                    parts.append(term.chinese())
            lines.append(" ".join(parts))
    return lines


def query_lines(date: Date, options: DisplayOptions) -> list[str]:
    """The requested details of a date; the Chinese date when none is requested."""
    lines: list[str] = []
    if options.chinese:
        lines.append(str(ChineseDay.from_date(date)))
    if options.weekday:
        lines.append(str(date.weekday()))
    if options.lunar_phase:
        lines.append(date.lunar_phase(BEIJING_TZ).chinese())
    if options.lunar_phase_emoji:
        lines.append(date.lunar_phase(BEIJING_TZ).emoji())
    if options.solar_term:
        term = date.solar_term(BEIJING_TZ)
        if term is not None:
            lines.append(term.chinese())
    if not any(
        (
            options.chinese,
            options.weekday,
            options.lunar_phase,
            options.lunar_phase_emoji,
            options.solar_term,
        )
    ):
        lines.append(str(ChineseDay.from_date(date)))
    return lines


def _parse_date(text: str) -> Date:
    """A Gregorian date written as YYYYMMDD."""
    if len(text) < 8:
        raise ValueError(f"invalid date: {text!r}")
    try:
        y, m, d = int(text[0:4]), int(text[4:6]), int(text[6:8])
    except ValueError as exc:
        raise ValueError(f"invalid date: {text!r}") from exc
    day = GregorianCalendar.from_ymd(y, m, d)
    if day is None:
        raise ValueError(f"invalid date: {text!r}")
    return day.to_date()


def _add_range_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("year", nargs="?", type=int, help="The year.")
    parser.add_argument("month", nargs="?", type=int, help="The month.")


def _add_option_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c", "--chinese", action="store_true", help="Display the date in Chinese calendar."
    )
    parser.add_argument("-w", "--weekday", action="store_true", help="Display the weekday.")
    parser.add_argument(
        "-l", "--lunar-phase", action="store_true", help="Display the lunar phase."
    )
    parser.add_argument(
        "-e",
        "--lunar-phase-emoji",
        action="store_true",
        help="Display the lunar phase emoji.",
    )
    parser.add_argument(
        "-s",
        "--solar-term",
        action="store_true",
        help="Display the solar term if applicable.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="omnical", description="Print calendars, convert dates, and more."
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    commands = parser.add_subparsers(dest="command", required=True)
    _add_range_args(commands.add_parser("print", help="Print a calendar."))
    list_parser = commands.add_parser("list", help="List the days of a calendar in details.")
    _add_range_args(list_parser)
    _add_option_args(list_parser)
    query_parser = commands.add_parser("query", help="Query the information of a date.")
    query_parser.add_argument("date", nargs="?", help="The date to query, as YYYYMMDD.")
    _add_option_args(query_parser)
    return parser


def _options(args: argparse.Namespace) -> DisplayOptions:
    return DisplayOptions(
        chinese=args.chinese,
        weekday=args.weekday,
        lunar_phase=args.lunar_phase,
        lunar_phase_emoji=args.lunar_phase_emoji,
        solar_term=args.solar_term,
    )


def _range(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> GregorianYear | GregorianMonth:
    if args.year is None:
        today = _today()
        year_num, month_num = today.the_year().ord(), today.the_month().ord()
    else:
        year_num, month_num = args.year, args.month
    year = GregorianCalendar.from_y(year_num)
    if year is None:
        parser.error(f"year out of range: {year_num}")
    if month_num is None:
        return year
    month = year.month(month_num)
    if month is None:
        parser.error(f"invalid month: {month_num}")
    return month


def main(argv: list[str] | None = None) -> int:
    """Run the command line and print its output."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    if not arguments or arguments[0] not in (*_COMMANDS, *_TOP_LEVEL_FLAGS):
        arguments.insert(0, "print")
    parser = _build_parser()
    args = parser.parse_args(arguments)

    if args.command == "query":
        if args.date is None:
            date = _now()
        else:
            try:
                date = _parse_date(args.date)
            except ValueError as exc:
                parser.error(str(exc))
        lines = query_lines(date, _options(args))
    elif args.command == "list":
        span = _range(parser, args)
        months = [span] if isinstance(span, GregorianMonth) else list(span.months())
        lines = list_lines(months, _options(args))
    else:
        span = _range(parser, args)
        today = _today()
        if isinstance(span, GregorianMonth):
            lines = [f"{format(span, '-'):^{_WIDTH}}", *month_lines(span, today)]
        else:
            lines = [f"{'Year ' + str(span):^{_WIDTH}}", *year_lines(span, today)]

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())