"""Solar terms, lunar phases and low-precision positions of the Sun and the Moon."""

from __future__ import annotations

import math
from enum import Enum

_J2000 = 2451545.0
_DAYS_PER_CENTURY = 36525.0


class SolarTerm(Enum):
    """The 24 solar terms, counted from the winter solstice."""

    def __new__(cls, name: str, chinese: str) -> SolarTerm:
        member = object.__new__(cls)
        member._value_ = name
        member._index = len(cls.__members__)
        member._chinese = chinese
        return member

    WINTER_SOLSTICE = ("WinterSolstice", "冬至")
    MINOR_COLD = ("MinorCold", "小寒")
    MAJOR_COLD = ("MajorCold", "大寒")
    BEGINNING_OF_SPRING = ("BeginningOfSpring", "立春")
    RAIN_WATER = ("RainWater", "雨水")
    AWAKENING_OF_INSECTS = ("AwakeningOfInsects", "惊蛰")
    SPRING_EQUINOX = ("SpringEquinox", "春分")
    PURE_BRIGHTNESS = ("PureBrightness", "清明")
    GRAIN_RAIN = ("GrainRain", "谷雨")
    BEGINNING_OF_SUMMER = ("BeginningOfSummer", "立夏")
    GRAIN_BUDS = ("GrainBuds", "小满")
    GRAIN_IN_EAR = ("GrainInEar", "芒种")
    SUMMER_SOLSTICE = ("SummerSolstice", "夏至")
    MINOR_HEAT = ("MinorHeat", "小暑")
    MAJOR_HEAT = ("MajorHeat", "大暑")
    BEGINNING_OF_AUTUMN = ("BeginningOfAutumn", "立秋")
    END_OF_HEAT = ("EndOfHeat", "处暑")
    WHITE_DEW = ("WhiteDew", "白露")
    AUTUMN_EQUINOX = ("AutumnEquinox", "秋分")
    COLD_DEW = ("ColdDew", "寒露")
    FROSTS_DESCENT = ("FrostsDescent", "霜降")
    BEGINNING_OF_WINTER = ("BeginningOfWinter", "立冬")
    MINOR_SNOW = ("MinorSnow", "小雪")
    MAJOR_SNOW = ("MajorSnow", "大雪")

    def __str__(self) -> str:
        return self.value

    def ord(self) -> int:
        """The 1-based position, the winter solstice being 1."""
        return self._index + 1

    @classmethod
    def from_ord(cls, ord: int) -> SolarTerm | None:
        """The term at a 1-based position, or None when out of range."""
        if 1 <= ord <= len(_SOLAR_TERMS):
            return _SOLAR_TERMS[ord - 1]
        return None

    def is_mid_term(self) -> bool:
        """Whether this is a principal (mid) term."""
        return self._index % 2 == 0

    def succ(self) -> SolarTerm:
        return _SOLAR_TERMS[(self._index + 1) % len(_SOLAR_TERMS)]

    def pred(self) -> SolarTerm:
        return _SOLAR_TERMS[(self._index - 1) % len(_SOLAR_TERMS)]

    def degrees(self) -> float:
        """The ecliptic longitude of the Sun at which the term begins."""
        return ((self._index + 270 // 15) % len(_SOLAR_TERMS)) * 15.0

    @classmethod
    def from_degree_range(cls, begin_deg: float, end_deg: float) -> SolarTerm | None:
        """The term whose longitude lies in the range, or None if there is none."""
        begin_ord = int(-((-begin_deg) // 15.0))
        end_ord = int(-((-end_deg) // 15.0))
        if begin_ord < end_ord:
            return _SOLAR_TERMS[(begin_ord - 270 // 15) % len(_SOLAR_TERMS)]
        return None

    def chinese(self) -> str:
        return self._chinese


_SOLAR_TERMS = tuple(SolarTerm)


class LunarPhase(Enum):
    """The eight phases of the Moon."""

    def __new__(cls, name: str, chinese: str, emoji: str) -> LunarPhase:
        member = object.__new__(cls)
        member._value_ = name
        member._index = len(cls.__members__)
        member._chinese = chinese
        member._emoji = emoji
        return member

    NEW_MOON = ("NewMoon", "新月", "🌑")
    WAXING_CRESCENT = ("WaxingCrescent", "眉月", "🌒")
    FIRST_QUARTER = ("FirstQuarter", "上弦月", "🌓")
    WAXING_GIBBOUS = ("WaxingGibbous", "上凸月", "🌔")
    FULL_MOON = ("FullMoon", "满月", "🌕")
    WANING_GIBBOUS = ("WaningGibbous", "下凸月", "🌖")
    LAST_QUARTER = ("LastQuarter", "下弦月", "🌗")
    WANING_CRESCENT = ("WaningCrescent", "残月", "🌘")

    def __str__(self) -> str:
        return self.value

    def succ(self) -> LunarPhase:
        return _LUNAR_PHASES[(self._index + 1) % len(_LUNAR_PHASES)]

    def pred(self) -> LunarPhase:
        return _LUNAR_PHASES[(self._index - 1) % len(_LUNAR_PHASES)]

    def degrees(self) -> float:
        """The elongation of the Moon from the Sun at this phase."""
        return self._index * 45.0

    @classmethod
    def from_degree_range(cls, begin_deg: float, end_deg: float) -> LunarPhase:
        """The phase for a day over which the elongation spans the range."""
        begin_ord = int(-((-begin_deg) // 90.0))
        end_ord = int(-((-end_deg) // 90.0))
        count = len(_LUNAR_PHASES)
        if begin_ord < end_ord:
            return _LUNAR_PHASES[(begin_ord * 2) % count]
        return _LUNAR_PHASES[(begin_ord * 2 - 1) % count]

    def chinese(self) -> str:
        return self._chinese

    def emoji(self) -> str:
        return self._emoji


_LUNAR_PHASES = tuple(LunarPhase)


# Periodic terms for the Moon's longitude: multiples of D, M, M', F and the
# coefficient in millionths of a degree.
_MOON_LONGITUDE_TERMS = (
    (0, 0, 1, 0, 6288774),
    (2, 0, -1, 0, 1274027),
    (2, 0, 0, 0, 658314),
    (0, 0, 2, 0, 213618),
    (0, 1, 0, 0, -185116),
    (0, 0, 0, 2, -114332),
    (2, 0, -2, 0, 58793),
    (2, -1, -1, 0, 57066),
    (2, 0, 1, 0, 53322),
    (2, -1, 0, 0, 45758),
    (0, 1, -1, 0, -40923),
    (1, 0, 0, 0, -34720),
    (0, 1, 1, 0, -30383),
    (2, 0, 0, -2, 15327),
    (0, 0, 1, 2, -12528),
    (0, 0, 1, -2, 10980),
    (4, 0, -1, 0, 10675),
    (0, 0, 3, 0, 10034),
    (4, 0, -2, 0, 8548),
    (2, 1, -1, 0, -7888),
    (2, 1, 0, 0, -6766),
    (1, 0, -1, 0, -5163),
    (1, 1, 0, 0, 4987),
    (2, -1, 1, 0, 4036),
    (2, 0, 2, 0, 3994),
    (4, 0, 0, 0, 3861),
    (2, 0, -3, 0, 3665),
    (0, 1, -2, 0, -2689),
    (2, 0, -1, 2, -2602),
    (2, -1, -2, 0, 2390),
    (1, 0, 1, 0, -2348),
    (2, -2, 0, 0, 2236),
    (0, 1, 2, 0, -2120),
    (0, 2, 0, 0, -2069),
    (2, -2, -1, 0, 2048),
    (2, 0, 1, -2, -1773),
    (2, 0, 0, 2, -1595),
    (4, -1, -1, 0, 1215),
    (0, 0, 2, 2, -1110),
    (3, 0, -1, 0, -892),
    (2, 1, 1, 0, -810),
    (4, -1, -2, 0, 759),
    (0, 2, -1, 0, -713),
    (2, 2, -1, 0, -700),
    (2, 1, -2, 0, 691),
    (2, -1, 0, -2, 596),
    (4, 0, 1, 0, 549),
    (0, 0, 4, 0, 537),
    (4, -1, 0, 0, 520),
    (1, 0, -2, 0, -487),
    (2, 1, 0, -2, -399),
    (0, 0, 2, -2, -381),
    (1, 1, 1, 0, 351),
    (3, 0, -2, 0, -340),
    (4, 0, -3, 0, 330),
    (2, -1, 2, 0, 327),
    (0, 2, 1, 0, -323),
    (1, 1, -1, 0, 299),
    (2, 0, 3, 0, 294),
)


def _julian_centuries(jd: float) -> float:
    return (jd - _J2000) / _DAYS_PER_CENTURY


def sun_ecl_long(jd: float) -> float:
    """Geocentric ecliptic longitude of the Sun in degrees at a Julian day."""
    t = _julian_centuries(jd)
    mean_long = (280.46646 + t * (36000.76983 + t * 0.0003032)) % 360.0
    anomaly = math.radians((357.52911 + t * (35999.05029 - t * 0.0001537)) % 360.0)
    center = (
        (1.914602 - t * (0.004817 + t * 0.000014)) * math.sin(anomaly)
        + (0.019993 - t * 0.000101) * math.sin(2.0 * anomaly)
        + 0.000289 * math.sin(3.0 * anomaly)
    )
    return mean_long + center


def moon_ecl_long(jd: float) -> float:
    """Geocentric ecliptic longitude of the Moon in degrees at a Julian day."""
    t = _julian_centuries(jd)
    mean_long = (
        218.3164477
        + t * (481267.88123421 + t * (-0.0015786 + t * (1.0 / 538841.0 - t / 65194000.0)))
    ) % 360.0
    elongation = 297.8501921 + t * (
        445267.1114034 + t * (-0.0018819 + t * (1.0 / 545868.0 - t / 113065000.0))
    )
    sun_anomaly = 357.5291092 + t * (35999.0502909 + t * (-0.0001536 + t / 24490000.0))
    moon_anomaly = 134.9633964 + t * (
        477198.8675055 + t * (0.0087414 + t * (1.0 / 69699.0 - t / 14712000.0))
    )
    latitude_arg = 93.2720950 + t * (
        483202.0175233 + t * (-0.0036539 + t * (-1.0 / 3526000.0 + t / 863310000.0))
    )
    a1 = math.radians((119.75 + 131.849 * t) % 360.0)
    a2 = math.radians((53.09 + 479264.290 * t) % 360.0)
    ecc = 1.0 - t * (0.002516 + t * 0.0000074)

    l_rad = math.radians(mean_long)
    d, m, mp, f = (
        math.radians(x % 360.0)
        for x in (elongation, sun_anomaly, moon_anomaly, latitude_arg)
    )
    total = sum(
        coeff * ecc ** abs(cm) * math.sin(cd * d + cm * m + cmp * mp + cf * f)
        for cd, cm, cmp, cf, coeff in _MOON_LONGITUDE_TERMS
    )
    total += 3958.0 * math.sin(a1) + 1962.0 * math.sin(l_rad - f) + 318.0 * math.sin(a2)
    return mean_long + total / 1_000_000.0


def moon_ecl_long_to_sun(jd: float) -> float:
    """Elongation of the Moon from the Sun in ecliptic longitude, in [0, 360)."""
    return (moon_ecl_long(jd) - sun_ecl_long(jd)) % 360.0