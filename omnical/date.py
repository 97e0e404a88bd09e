"""Weekdays and a calendar-independent date based on the Julian day number."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from enum import Enum

from omnical.astronomy import (
    LunarPhase,
    SolarTerm,
    moon_ecl_long_to_sun,
    sun_ecl_long,
)

_UNIX_EPOCH_JD = 2440587.5
_SECONDS_PER_DAY = 86400.0


class Weekday(Enum):
    """The seven days of the week, Monday first."""

    def __new__(cls, name: str, long_zh: str, short_zh: str, single_zh: str) -> Weekday:
        member = object.__new__(cls)
        member._value_ = name
        member._index = len(cls.__members__)
        member._names_zh = {1: single_zh, 2: short_zh}
        member._long_zh = long_zh
        return member

    MONDAY = ("Monday", "星期一", "周一", "一")
    TUESDAY = ("Tuesday", "星期二", "周二", "二")
    WEDNESDAY = ("Wednesday", "星期三", "周三", "三")
    THURSDAY = ("Thursday", "星期四", "周四", "四")
    FRIDAY = ("Friday", "星期五", "周五", "五")
    SATURDAY = ("Saturday", "星期六", "周六", "六")
    SUNDAY = ("Sunday", "星期日", "周日", "日")

    def __str__(self) -> str:
        return self.value

    def ord(self) -> int:
        """The 1-based position, Monday being 1."""
        return self._index + 1

    @classmethod
    def from_ord(cls, ord: int) -> Weekday | None:
        """The weekday at a 1-based position, or None when out of range."""
        if 1 <= ord <= len(_WEEKDAYS):
            return _WEEKDAYS[ord - 1]
        return None

    @classmethod
    def first(cls) -> Weekday:
        return cls.MONDAY

    @classmethod
    def last(cls) -> Weekday:
        return cls.SUNDAY

    def succ(self) -> Weekday:
        return _WEEKDAYS[(self._index + 1) % len(_WEEKDAYS)]

    def pred(self) -> Weekday:
        return _WEEKDAYS[(self._index - 1) % len(_WEEKDAYS)]

    def chinese(self, length: int = 0) -> str:
        """Chinese name: 1 and 2 give short forms, anything else the full one."""
        return self._names_zh.get(length, self._long_zh)

    def __format__(self, spec: str) -> str:
        """'#n' gives the Chinese name of length n; a plain width truncates or pads."""
        if spec.startswith("#"):
            rest = spec[1:]
            return self.chinese(int(rest) if rest else 0)
        if spec.isdigit():
            width = int(spec)
            return self.value[:width].ljust(width)
        return format(self.value, spec)


_WEEKDAYS = tuple(Weekday)


@dataclass(frozen=True, order=True)
class Date:
    """A date represented by its Julian day number."""

    jdn: int

    @classmethod
    def from_jdn(cls, jdn: int) -> Date:
        return cls(jdn)

    @classmethod
    def from_jd(cls, jd: float) -> Date:
        return cls(math.floor(jd + 0.5))

    @classmethod
    def from_jd_with_tz(cls, jd: float, tz: float) -> Date:
        """The local date at a Julian day in a time zone given in hours."""
        return cls(math.floor(jd + 0.5 + tz / 24.0))

    @classmethod
    def from_unix_time(cls, unix_time: float, tz: float = 0.0) -> Date:
        """The local date at a Unix time in a time zone given in hours."""
        return cls.from_jd_with_tz(unix_time / _SECONDS_PER_DAY + _UNIX_EPOCH_JD, tz)

    def midnight_jd(self, tz: float = 0.0) -> float:
        """The Julian day at local midnight starting this date."""
        return self.jdn - 0.5 - tz / 24.0

    def noon_jd(self, tz: float = 0.0) -> float:
        """The Julian day at local noon of this date."""
        return self.jdn - tz / 24.0

    def jd(self) -> float:
        return self.midnight_jd(0.0)

    def succ(self) -> Date:
        return Date(self.jdn + 1)

    def pred(self) -> Date:
        return Date(self.jdn - 1)

    def weekday(self) -> Weekday:
        return _WEEKDAYS[self.jdn % len(_WEEKDAYS)]

    def solar_term(self, tz: float) -> SolarTerm | None:
        """The solar term beginning during this local date, if any."""
        curr = sun_ecl_long(self.midnight_jd(tz))
        nxt = sun_ecl_long(self.succ().midnight_jd(tz))
        if nxt < curr:
            curr -= 360.0
        return SolarTerm.from_degree_range(curr, nxt)

    def lunar_phase(self, tz: float) -> LunarPhase:
        """The phase of the Moon over this local date."""
        curr = moon_ecl_long_to_sun(self.midnight_jd(tz))
        nxt = moon_ecl_long_to_sun(self.succ().midnight_jd(tz))
        if nxt < curr:
            curr -= 360.0
        return LunarPhase.from_degree_range(curr, nxt)

    def __add__(self, other: int) -> Date:
        if isinstance(other, int):
            return Date(self.jdn + other)
        return NotImplemented

    def __radd__(self, other: int) -> Date:
        return self.__add__(other)

    def __sub__(self, other: Date) -> int:
        if isinstance(other, Date):
            return self.jdn - other.jdn
        return NotImplemented


def unix_time_now() -> int:
    """The current Unix time in whole seconds."""
    return int(time.time())