"""The proleptic Gregorian calendar."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from omnical.calendar import Calendar, Day, Month, Year
from omnical.date import Date

_MIN_YEAR = -5_000_000
_MAX_YEAR = 5_000_000


def _div_euclid(a: float, b: float) -> float:
    q = float(math.trunc(a / b))
    if math.fmod(a, b) < 0.0:
        return q - 1.0 if b > 0.0 else q + 1.0
    return q


def proleptic_gregorian_to_julian_day(y: int, m: int, d: float) -> float:
    """Convert a proleptic Gregorian date, with a fractional day, to a Julian day."""
    if m <= 2:
        y, m = y - 1, m + 12
    a = y // 100
    b = 2 - a + a // 4
    return (
        math.floor(365.25 * (y + 4716))
        + math.floor(30.6001 * (m + 1))
        + d
        + b
        - 1524.5
    )


def julian_day_to_proleptic_gregorian(jd: float) -> tuple[int, int, float]:
    """Convert a Julian day to a proleptic Gregorian (year, month, fractional day)."""
    jd = jd + 0.5
    z = float(math.trunc(jd))
    f = jd - z
    alpha = _div_euclid(z - 1867216.25, 36524.25)
    a = z + 1.0 + alpha - _div_euclid(alpha, 4.0)
    b = a + 1524.0
    c = _div_euclid(b - 122.1, 365.25)
    d = math.floor(365.25 * c)
    e = _div_euclid(b - d, 30.6001)
    dom = b - d - math.floor(30.6001 * e) + f
    if e < 14.0:
        y, m = c - 4716.0, e - 1.0
    else:
        y, m = c - 4715.0, e - 13.0
    return int(y), int(m), dom


class MonthName(Enum):
    """The twelve months of the Gregorian year."""

    JANUARY = "January"
    FEBRUARY = "February"
    MARCH = "March"
    APRIL = "April"
    MAY = "May"
    JUNE = "June"
    JULY = "July"
    AUGUST = "August"
    SEPTEMBER = "September"
    OCTOBER = "October"
    NOVEMBER = "November"
    DECEMBER = "December"

    def __str__(self) -> str:
        return self.value

    def ord(self) -> int:
        """The 1-based position, January being 1."""
        return _MONTH_INDEX[self] + 1

    @classmethod
    def from_ord(cls, ord: int) -> MonthName | None:
        """The month name at a 1-based position, or None when out of range."""
        if 1 <= ord <= len(_MONTH_NAMES):
            return _MONTH_NAMES[ord - 1]
        return None

    @classmethod
    def first(cls) -> MonthName:
        return cls.JANUARY

    @classmethod
    def last(cls) -> MonthName:
        return cls.DECEMBER

    def succ(self) -> MonthName | None:
        """The next month name, or None after December."""
        return MonthName.from_ord(self.ord() + 1)

    def pred(self) -> MonthName | None:
        """The previous month name, or None before January."""
        return MonthName.from_ord(self.ord() - 1)


_MONTH_NAMES = tuple(MonthName)
_MONTH_INDEX = {name: i for i, name in enumerate(_MONTH_NAMES)}
_LONG_MONTHS = frozenset(
    {
        MonthName.JANUARY,
        MonthName.MARCH,
        MonthName.MAY,
        MonthName.JULY,
        MonthName.AUGUST,
        MonthName.OCTOBER,
        MonthName.DECEMBER,
    }
)


class GregorianCalendar(Calendar):
    """The proleptic Gregorian calendar."""

    @classmethod
    def from_y(cls, year: int) -> GregorianYear | None:
        if _MIN_YEAR <= year <= _MAX_YEAR:
            return GregorianYear(year)
        return None

    @classmethod
    def from_yn(cls, year: int, month: MonthName) -> GregorianMonth | None:
        y = cls.from_y(year)
        return None if y is None else y.month_by_name(month)

    @classmethod
    def from_ynd(cls, year: int, month: MonthName, day: int) -> GregorianDay | None:
        m = cls.from_yn(year, month)
        return None if m is None else m.day(day)


@dataclass(frozen=True, order=True)
class GregorianYear(Year):
    """A Gregorian year."""

    year: int

    def ord(self) -> int:
        return self.year

    def succ(self) -> GregorianYear:
        return GregorianYear(self.year + 1)

    def pred(self) -> GregorianYear:
        return GregorianYear(self.year - 1)

    def num_months(self) -> int:
        return len(_MONTH_NAMES)

    def month(self, ord: int) -> GregorianMonth | None:
        name = MonthName.from_ord(ord)
        return None if name is None else self.month_by_name(name)

    def month_by_name(self, month_name: MonthName) -> GregorianMonth:
        return GregorianMonth(self, month_name)

    def months(self) -> Iterator[GregorianMonth]:
        return (self.month_by_name(name) for name in _MONTH_NAMES)

    def num_days(self) -> int:
        return 366 if self.is_leap() else 365

    def day(self, ord: int) -> GregorianDay | None:
        for month in self.months():
            num_days = month.num_days()
            if ord <= num_days:
                return month.day(ord)
            ord -= num_days
        return None

    def is_leap(self) -> bool:
        return self.year % 400 == 0 or (self.year % 4 == 0 and self.year % 100 != 0)

    def __format__(self, spec: str) -> str:
        """'#' gives the Chinese form, '-' the bare number, otherwise four digits."""
        if spec == "#":
            return f"{self.year}年"
        if spec == "-":
            return str(self.year)
        return format(f"{self.year:04d}", spec)

    def __str__(self) -> str:
        return format(self, "")


@dataclass(frozen=True)
class GregorianMonth(Month):
    """A month of a Gregorian year."""

    year: GregorianYear
    month: MonthName

    def name(self) -> MonthName:
        return self.month

    def ord(self) -> int:
        return self.month.ord()

    def succ(self) -> GregorianMonth:
        following = self.month.succ()
        if following is None:
            return self.year.succ().first_month()
        return self.year.month_by_name(following)

    def pred(self) -> GregorianMonth:
        preceding = self.month.pred()
        if preceding is None:
            return self.year.pred().last_month()
        return self.year.month_by_name(preceding)

    def the_year(self) -> GregorianYear:
        return self.year

    def num_days(self) -> int:
        if self.month in _LONG_MONTHS:
            return 31
        if self.month is MonthName.FEBRUARY:
            return 29 if self.year.is_leap() else 28
        return 30

    def day(self, ord: int) -> GregorianDay | None:
        if 1 <= ord <= self.num_days():
            return GregorianDay(self, ord)
        return None

    def is_leap(self) -> bool:
        return self.month is MonthName.FEBRUARY and self.year.is_leap()

    def __format__(self, spec: str) -> str:
        """'#' gives the Chinese form, '-' the English name, otherwise YYYY-MM."""
        if spec == "#":
            return f"{self.year:#}{self.ord()}月"
        if spec == "-":
            return f"{self.month} {self.year:-}"
        return format(f"{self.year}-{self.ord():02d}", spec)

    def __str__(self) -> str:
        return format(self, "")


@dataclass(frozen=True)
class GregorianDay(Day):
    """A day of a Gregorian month."""

    month: GregorianMonth
    day: int

    @classmethod
    def from_date(cls, date: Date, tz: float = 0.0) -> GregorianDay:
        """The Gregorian day containing the local midnight of a date."""
        y, m, d = julian_day_to_proleptic_gregorian(date.midnight_jd(tz))
        day = GregorianCalendar.from_ymd(y, m, int(d))
        if day is None:
            raise ValueError(f"date out of range: {date}")
        return day

    def ord(self) -> int:
        return self.day

    def succ(self) -> GregorianDay:
        if self.day == self.month.num_days():
            return self.month.succ().first_day()
        return GregorianDay(self.month, self.day + 1)

    def pred(self) -> GregorianDay:
        if self.day == 1:
            return self.month.pred().last_day()
        return GregorianDay(self.month, self.day - 1)

    def the_year(self) -> GregorianYear:
        return self.month.year

    def the_month(self) -> GregorianMonth:
        return self.month

    def to_date(self) -> Date:
        return Date.from_jd(
            proleptic_gregorian_to_julian_day(
                self.the_year().ord(), self.month.ord(), float(self.day)
            )
        )

    def __format__(self, spec: str) -> str:
        """'#' gives the Chinese form, '-' the English form, otherwise YYYY-MM-DD."""
        if spec == "#":
            return f"{self.month:#}{self.day}日"
        if spec == "-":
            return f"{self.day} {self.month:-}"
        return format(f"{self.month}-{self.day:02d}", spec)

    def __str__(self) -> str:
        return format(self, "")