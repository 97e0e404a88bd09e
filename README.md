# omnical

Print calendars, convert dates between the Gregorian and Chinese calendars,
and look up lunar phases and solar terms.

Every date is represented by its Julian day number (`omnical.date.Date`).
Calendar systems convert to and from it:

* the proleptic Gregorian calendar, in `omnical.gregorian`
  (`GregorianCalendar`, `GregorianYear`, `GregorianMonth`, `GregorianDay`,
  `MonthName`);
* the Chinese lunisolar calendar, in `omnical.chinese`
  (`ChineseCalendar`, `ChineseYear`, `ChineseMonth`, `ChineseDay`, and the
  sexagenary cycle as `Stem`, `Branch` and `StemBranch`). Its months are
  computed from new moons and solar terms as seen from Beijing (UTC+8).

The positions of the Sun and the Moon (`omnical.astronomy.sun_ecl_long`,
`moon_ecl_long`, `moon_ecl_long_to_sun`) come from low-precision series, and
`SolarTerm` and `LunarPhase` are derived from them day by day.

## Installation

```
pip install .
```

No third-party libraries are required. To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

With no arguments, `omnical` prints the current month (today is taken in
UTC+8 and shown in brackets):

```
omnical
```

Print a whole year or a single month:

```
omnical print 2024
omnical print 2024 2
```

List the days of a year or a month, one per line, with details: Chinese date
(`-c`), weekday (`-w`), lunar phase (`-l`), lunar phase emoji (`-e`) and
solar term (`-s`, shown only on days a term begins):

```
omnical list 2024 2 -c -w -s
```

Query a single date, given as `YYYYMMDD` (today if omitted). The same
options select what is printed; with none, the Chinese date is printed:

```
omnical query 20240210
omnical query 20240210 -w -l -e
```

`omnical --version` prints the version.

## Library

```python
from omnical.date import Date
from omnical.gregorian import GregorianCalendar
from omnical.chinese import ChineseCalendar, ChineseDay

day = GregorianCalendar.from_ymd(2024, 2, 10)
date = day.to_date()
print(date.jdn)                     # Julian day number
print(format(date.weekday(), "#"))  # 星期六

chinese = ChineseDay.from_date(date, 8.0)
print(chinese)                      # 甲辰年正月初一

year = ChineseCalendar.from_y(2023)
print(year.is_leap())               # True: 2023 has a leap month
print(date.lunar_phase(8.0).emoji())
print(date.solar_term(8.0))         # None unless a term begins that day
```

Lookups such as `from_y`, `from_ym` and `from_ymd` return `None` for dates
that do not exist, for example `GregorianCalendar.from_ymd(2022, 2, 29)`.
`ChineseCalendar.from_ylm` and `from_ylmd` address months by number and a
leap flag. Years, months and days all offer `succ()`, `pred()`, `ord()` and,
for years and months, iteration with `months()` and `days()`.

Formatting follows format specs: for Gregorian values `"#"` gives the Chinese
form (`2024年2月10日`), `"-"` the English form (`10 February 2024`), and the
default ISO-like form (`2024-02-10`). Weekdays take `"#"`, `"#1"` and `"#2"`
for Chinese names of different lengths.

## Limitations

* There is no command for converting a date into a chosen calendar; `query`
  accepts only Gregorian dates in `YYYYMMDD` form and prints Chinese details.
* Chinese years are computed on demand by stepping through days, so the first
  lookup of a year takes noticeable time.