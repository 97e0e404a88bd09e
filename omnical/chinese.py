"""The Chinese lunisolar calendar, computed from solar terms and new moons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from omnical.astronomy import LunarPhase, SolarTerm
from omnical.calendar import Calendar, Day, Month, Year
from omnical.date import Date
from omnical.gregorian import GregorianCalendar, GregorianDay

BEIJING_TZ = 8.0

_MIN_YEAR = -5_000_000
_MAX_YEAR = 5_000_000
_NO_LEAP = 13

_LEAP_PREFIX = "闰"
_MONTH_NAMES = (
    "正月", "二月", "三月", "四月", "五月", "六月",
    "七月", "八月", "九月", "十月", "十一月", "十二月",
)
_DAY_NAMES = (
    "初一", "初二", "初三", "初四", "初五", "初六", "初七", "初八", "初九", "初十",
    "十一", "十二", "十三", "十四", "十五", "十六", "十七", "十八", "十九", "二十",
    "廿一", "廿二", "廿三", "廿四", "廿五", "廿六", "廿七", "廿八", "廿九", "三十",
)


def _winter_solstice(year: int, tz: float) -> Date:
    """The local date of the winter solstice in a Gregorian year."""
    start = GregorianCalendar.from_ymd(year, 12, 21)
    if start is None:
        raise ValueError(f"year out of range: {year}")
    d = start.to_date()
    while d.solar_term(tz) is not SolarTerm.WINTER_SOLSTICE:
        d = d.succ()
    return d


def _prev_new_moon(date: Date, tz: float) -> Date:
    """The latest new-moon date on or before a date."""
    d = date
    while d.lunar_phase(tz) is not LunarPhase.NEW_MOON:
        d = d.pred()
    return d


@lru_cache(maxsize=64)
def _period_data(year: int) -> tuple[Date, tuple[int, ...], int | None]:
    """Months between the winter solstices ending in year-1 and year.

    Returns the new moon before the first solstice, the lengths of the
    lunar months that follow, and the index of the leap month if any.
    """
    last_ws = _winter_solstice(year - 1, BEIJING_TZ)
    end = _winter_solstice(year, BEIJING_TZ).succ()
    start = _prev_new_moon(last_ws, BEIJING_TZ)

    months: list[tuple[int, bool]] = []
    last_new_moon: Date | None = None
    has_mid_term = False
    d = start
    while d != end:
        phase = d.lunar_phase(BEIJING_TZ)
        term = d.solar_term(BEIJING_TZ)
        if phase is LunarPhase.NEW_MOON:
            if last_new_moon is not None:
                months.append((d - last_new_moon, has_mid_term))
            last_new_moon = d
            has_mid_term = False
        if term is not None and term.is_mid_term():
            has_mid_term = True
        d = d.succ()

    leap_month = None
    if len(months) > 12:
        leap_month = next((i for i, (_, mid) in enumerate(months) if not mid), None)
    return start, tuple(length for length, _ in months), leap_month


@lru_cache(maxsize=64)
def calc_chinese_year_data(year: int) -> tuple[Date, tuple[int, ...], int]:
    """First day, the 13 month lengths (0 for a missing 13th) and leap month index.

    A leap month index of 13 means the year has no leap month.
    """
    first1, data1, lm1 = _period_data(year)
    _, data2, lm2 = _period_data(year + 1)

    if lm1 is None:
        off1, leap1 = 2, None
    elif lm1 <= 2:
        off1, leap1 = 3, None
    else:
        off1, leap1 = 2, lm1 - 2

    if lm2 is not None and lm2 <= 2:
        off2, leap2 = 3, lm2 + 10
    else:
        off2, leap2 = 2, None

    lengths = list(data1[off1:]) + list(data2[:off2])
    if len(lengths) == 12:
        lengths.append(0)
    if len(lengths) != 13:
        raise ValueError(f"cannot determine the months of Chinese year {year}")

    leap = leap1 if leap1 is not None else leap2
    first_day = first1 + sum(data1[:off1])
    return first_day, tuple(lengths), _NO_LEAP if leap is None else leap


class Stem(Enum):
    """The ten heavenly stems."""

    def __new__(cls, name: str, chinese: str) -> Stem:
        member = object.__new__(cls)
        member._value_ = name
        member._index = len(cls.__members__)
        member._chinese = chinese
        return member

    JIA = ("Jia", "甲")
    YI = ("Yi", "乙")
    BING = ("Bing", "丙")
    DING = ("Ding", "丁")
    WU = ("Wu", "戊")
    JI = ("Ji", "己")
    GENG = ("Geng", "庚")
    XIN = ("Xin", "辛")
    REN = ("Ren", "壬")
    GUI = ("Gui", "癸")

    def __str__(self) -> str:
        return self.value

    def ord(self) -> int:
        """The 1-based position, Jia being 1."""
        return self._index + 1

    @classmethod
    def from_ord(cls, ord: int) -> Stem | None:
        if 1 <= ord <= len(_STEMS):
            return _STEMS[ord - 1]
        return None

    @classmethod
    def from_year(cls, year: int) -> Stem:
        return _STEMS[(year - 4) % len(_STEMS)]

    def chinese(self) -> str:
        return self._chinese


_STEMS = tuple(Stem)


class Branch(Enum):
    """The twelve earthly branches."""

    def __new__(cls, name: str, chinese: str) -> Branch:
        member = object.__new__(cls)
        member._value_ = name
        member._index = len(cls.__members__)
        member._chinese = chinese
        return member

    ZI = ("Zi", "子")
    CHOU = ("Chou", "丑")
    YIN = ("Yin", "寅")
    MAO = ("Mao", "卯")
    CHEN = ("Chen", "辰")
    SI = ("Si", "巳")
    WU = ("Wu", "午")
    WEI = ("Wei", "未")
    SHEN = ("Shen", "申")
    YOU = ("You", "酉")
    XU = ("Xu", "戌")
    HAI = ("Hai", "亥")

    def __str__(self) -> str:
        return self.value

    def ord(self) -> int:
        """The 1-based position, Zi being 1."""
        return self._index + 1

    @classmethod
    def from_ord(cls, ord: int) -> Branch | None:
        if 1 <= ord <= len(_BRANCHES):
            return _BRANCHES[ord - 1]
        return None

    @classmethod
    def from_year(cls, year: int) -> Branch:
        return _BRANCHES[(year - 4) % len(_BRANCHES)]

    def chinese(self) -> str:
        return self._chinese


_BRANCHES = tuple(Branch)


@dataclass(frozen=True)
class StemBranch:
    """A pair in the sexagenary cycle."""

    stem: Stem
    branch: Branch

    @classmethod
    def from_repr(cls, repr: int) -> StemBranch:
        """The pair at a 0-based position in the cycle."""
        return cls(_STEMS[repr % len(_STEMS)], _BRANCHES[repr % len(_BRANCHES)])

    def ord(self) -> int:
        """The 1-based position in the cycle of sixty."""
        m = self.stem.ord() - 1
        n = self.branch.ord() - 1
        return (m * 6 - n * 5) % 60 + 1

    @classmethod
    def from_ord(cls, ord: int) -> StemBranch | None:
        if not 1 <= ord <= 60:
            return None
        return cls.from_repr(ord - 1)

    @classmethod
    def from_stem_branch(cls, stem: Stem, branch: Branch) -> StemBranch | None:
        """The pair, or None if the stem and branch never occur together."""
        if stem.ord() % 2 != branch.ord() % 2:
            return None
        return cls(stem, branch)

    @classmethod
    def from_year(cls, year: int) -> StemBranch:
        return cls(Stem.from_year(year), Branch.from_year(year))

    def chinese(self) -> str:
        return self.stem.chinese() + self.branch.chinese()


class ChineseCalendar(Calendar):
    """The Chinese lunisolar calendar."""

    @classmethod
    def from_y(cls, year: int) -> ChineseYear | None:
        if _MIN_YEAR <= year <= _MAX_YEAR:
            return ChineseYear(year)
        return None

    @classmethod
    def from_ylm(cls, year: int, leap: bool, month: int) -> ChineseMonth | None:
        """The month with a number 1-12, leap or not; None if there is no such month."""
        y = cls.from_y(year)
        if y is None:
            return None
        leap_index = y._leap_index
        if leap and month != leap_index:
            return None
        if month < leap_index or (not leap and month == leap_index):
            return y.month(month)
        return y.month(month + 1)

    @classmethod
    def from_ylmd(cls, year: int, leap: bool, month: int, day: int) -> ChineseDay | None:
        m = cls.from_ylm(year, leap, month)
        return None if m is None else m.day(day)


@dataclass(frozen=True)
class ChineseYear(Year):
    """A Chinese year, numbered like the Gregorian year it mostly overlaps."""

    year: int

    @property
    def _start_date(self) -> Date:
        return calc_chinese_year_data(self.year)[0]

    @property
    def _month_lengths(self) -> tuple[int, ...]:
        return calc_chinese_year_data(self.year)[1]

    @property
    def _leap_index(self) -> int:
        return calc_chinese_year_data(self.year)[2]

    def stem(self) -> Stem:
        return Stem.from_year(self.year)

    def branch(self) -> Branch:
        return Branch.from_year(self.year)

    def stem_branch(self) -> StemBranch:
        return StemBranch.from_year(self.year)

    def ord(self) -> int:
        return self.year

    def succ(self) -> ChineseYear:
        return ChineseYear(self.year + 1)

    def pred(self) -> ChineseYear:
        return ChineseYear(self.year - 1)

    def num_months(self) -> int:
        return 13 if self.is_leap() else 12

    def month(self, ord: int) -> ChineseMonth | None:
        if 1 <= ord <= self.num_months():
            return ChineseMonth(self, ord - 1)
        return None

    def is_leap(self) -> bool:
        return self._leap_index < _NO_LEAP

    def __format__(self, spec: str) -> str:
        """'#' gives the full form with the Gregorian year, otherwise the cyclic name."""
        name = f"{self.stem().chinese()}{self.branch().chinese()}年"
        if spec == "#":
            return f"公元{self.year}年农历{name}"
        return format(name, spec)

    def __str__(self) -> str:
        return format(self, "")


@dataclass(frozen=True)
class ChineseMonth(Month):
    """A month of a Chinese year; index counts from 0, leap months included."""

    year: ChineseYear
    index: int

    def ord_no_leap(self) -> int:
        """The month number with the leap month sharing the number before it."""
        if self.index < self.year._leap_index:
            return self.index + 1
        return self.index

    def ord(self) -> int:
        return self.index + 1

    def succ(self) -> ChineseMonth:
        if self.index < self.year.num_months() - 1:
            return ChineseMonth(self.year, self.index + 1)
        return self.year.succ().first_month()

    def pred(self) -> ChineseMonth:
        if self.index > 0:
            return ChineseMonth(self.year, self.index - 1)
        return self.year.pred().last_month()

    def the_year(self) -> ChineseYear:
        return self.year

    def num_days(self) -> int:
        return self.year._month_lengths[self.index]

    def day(self, ord: int) -> ChineseDay | None:
        if 1 <= ord <= self.num_days():
            return ChineseDay(self, ord - 1)
        return None

    def is_leap(self) -> bool:
        return self.year._leap_index == self.index

    def __format__(self, spec: str) -> str:
        leap_index = self.year._leap_index
        prefix = _LEAP_PREFIX if self.is_leap() else ""
        name_index = self.index if self.index < leap_index else self.index - 1
        month_name = f"{prefix}{_MONTH_NAMES[name_index]}"
        if spec == "#":
            return f"{self.year:#}{month_name}"
        return format(f"{self.year}{month_name}", spec)

    def __str__(self) -> str:
        return format(self, "")


@dataclass(frozen=True)
class ChineseDay(Day):
    """A day of a Chinese month; index counts from 0."""

    month: ChineseMonth
    index: int

    @classmethod
    def from_date(cls, date: Date, tz: float = BEIJING_TZ) -> ChineseDay:
        """The Chinese day of a date."""
        gregorian = GregorianDay.from_date(date, tz)
        year = ChineseCalendar.from_y(gregorian.the_year().ord())
        if year is None:
            raise ValueError(f"date out of range: {date}")
        start = year.first_day().to_date()
        if date < start:
            year = year.pred()
            start = year.first_day().to_date()
        day = year.day(date - start + 1)
        if day is None:
            raise ValueError(f"date out of range: {date}")
        return day

    def stem_branch(self) -> StemBranch:
        return StemBranch.from_repr((self.to_date().jdn + 18) % 60)

    def ord(self) -> int:
        return self.index + 1

    def succ(self) -> ChineseDay:
        if self.index < self.month.num_days() - 1:
            return ChineseDay(self.month, self.index + 1)
        return self.month.succ().first_day()

    def pred(self) -> ChineseDay:
        if self.index > 0:
            return ChineseDay(self.month, self.index - 1)
        return self.month.pred().last_day()

    def the_year(self) -> ChineseYear:
        return self.month.year

    def the_month(self) -> ChineseMonth:
        return self.month

    def to_date(self) -> Date:
        year = self.month.year
        return (
            year._start_date
            + sum(year._month_lengths[: self.month.index])
            + self.index
        )

    def __format__(self, spec: str) -> str:
        name = _DAY_NAMES[self.index]
        if spec == "#":
            return f"{self.month:#}{name}"
        return format(f"{self.month}{name}", spec)

    def __str__(self) -> str:
        return format(self, "")