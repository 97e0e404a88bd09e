import pytest

from omnical.date import Date, Weekday
from omnical.gregorian import (
    GregorianCalendar,
    GregorianDay,
    GregorianYear,
    MonthName,
    julian_day_to_proleptic_gregorian,
    proleptic_gregorian_to_julian_day,
)

JULIAN_DAY_CASES = [
    (2000, 1, 1.5, 2451545.0),
    (1999, 1, 1.0, 2451179.5),
    (1987, 1, 27.0, 2446822.5),
    (1987, 6, 19.5, 2446966.0),
    (1988, 1, 27.0, 2447187.5),
    (1988, 6, 19.5, 2447332.0),
    (1900, 1, 1.0, 2415020.5),
    (1600, 1, 1.0, 2305447.5),
    (1600, 12, 31.0, 2305812.5),
    (1582, 10, 4.0, 2299149.5),
    (1582, 10, 15.0, 2299160.5),
    (1, 1, 1.0, 1721425.5),
    (0, 1, 1.0, 1721059.5),
    (-4713, 11, 24.5, 0.0),
]


@pytest.mark.parametrize("y, m, d, jd", JULIAN_DAY_CASES)
def test_proleptic_gregorian_to_julian_day(y, m, d, jd):
    assert proleptic_gregorian_to_julian_day(y, m, d) == jd


@pytest.mark.parametrize("y, m, d, jd", JULIAN_DAY_CASES)
def test_julian_day_to_proleptic_gregorian(y, m, d, jd):
    assert julian_day_to_proleptic_gregorian(jd) == (y, m, d)


def test_year():
    year = GregorianCalendar.from_y(1985)
    assert year.ord() == 1985
    assert not year.is_leap()
    assert year.num_months() == 12
    assert year.num_days() == 365

    assert GregorianCalendar.from_y(2024).is_leap()
    assert GregorianCalendar.from_y(2000).is_leap()
    assert not GregorianCalendar.from_y(1900).is_leap()

    assert year.succ() == GregorianCalendar.from_y(1986)
    assert year.pred() == GregorianCalendar.from_y(1984)

    assert year.month(1) == year.month_by_name(MonthName.JANUARY)
    assert year.day(1) == GregorianCalendar.from_ymd(1985, 1, 1)
    assert year.day(365) == GregorianCalendar.from_ymd(1985, 12, 31)
    assert year.day(366) is None


def test_year_out_of_range():
    assert GregorianCalendar.from_y(5_000_001) is None
    assert GregorianCalendar.from_y(-5_000_001) is None
    assert GregorianCalendar.from_y(5_000_000) == GregorianYear(5_000_000)


def test_year_days_iteration():
    days = list(GregorianCalendar.from_y(2024).days())
    assert len(days) == 366
    assert days[0] == GregorianCalendar.from_ymd(2024, 1, 1)
    assert days[-1] == GregorianCalendar.from_ymd(2024, 12, 31)
    assert [m.ord() for m in GregorianCalendar.from_y(2024).months()] == list(range(1, 13))


def test_month_name():
    assert len(MonthName) == 12
    assert list(MonthName) == [
        MonthName.JANUARY,
        MonthName.FEBRUARY,
        MonthName.MARCH,
        MonthName.APRIL,
        MonthName.MAY,
        MonthName.JUNE,
        MonthName.JULY,
        MonthName.AUGUST,
        MonthName.SEPTEMBER,
        MonthName.OCTOBER,
        MonthName.NOVEMBER,
        MonthName.DECEMBER,
    ]

    jan = MonthName("January")
    assert jan.ord() == 1
    assert str(jan) == "January"

    dec = list(MonthName)[11]
    assert dec.ord() == 12
    assert str(dec) == "December"

    with pytest.raises(ValueError):
        MonthName("Invalid")
    assert MonthName.from_ord(13) is None
    assert MonthName.from_ord(0) is None
    assert MonthName.from_ord(9) == MonthName.SEPTEMBER
    assert MonthName.first() == MonthName.JANUARY
    assert MonthName.last() == MonthName.DECEMBER

    assert MonthName.JANUARY.succ() == MonthName.FEBRUARY
    assert MonthName.JANUARY.pred() is None
    assert MonthName.DECEMBER.pred() == MonthName.NOVEMBER
    assert MonthName.DECEMBER.succ() is None


def test_month():
    month = GregorianCalendar.from_yn(1985, MonthName.SEPTEMBER)
    assert month.the_year().ord() == 1985
    assert month.ord() == 9
    assert month.name() == MonthName.SEPTEMBER
    assert not month.is_leap()
    assert month.num_days() == 30

    assert not GregorianCalendar.from_yn(1985, MonthName.FEBRUARY).is_leap()
    assert GregorianCalendar.from_yn(2024, MonthName.FEBRUARY).is_leap()
    assert GregorianCalendar.from_yn(2000, MonthName.FEBRUARY).is_leap()
    assert not GregorianCalendar.from_yn(1900, MonthName.FEBRUARY).is_leap()

    assert GregorianCalendar.from_yn(1986, MonthName.JANUARY).num_days() == 31

    assert GregorianCalendar.from_ym(2024, 0) is None
    assert GregorianCalendar.from_ym(2024, 13) is None
    assert GregorianCalendar.from_ym(2024, 2) == GregorianCalendar.from_yn(
        2024, MonthName.FEBRUARY
    )

    assert month.succ() == GregorianCalendar.from_yn(1985, MonthName.OCTOBER)
    assert month.pred() == GregorianCalendar.from_yn(1985, MonthName.AUGUST)
    assert GregorianCalendar.from_yn(2024, MonthName.JANUARY).pred() == (
        GregorianCalendar.from_yn(2023, MonthName.DECEMBER)
    )
    assert GregorianCalendar.from_yn(2023, MonthName.DECEMBER).succ() == (
        GregorianCalendar.from_yn(2024, MonthName.JANUARY)
    )


def test_day():
    assert GregorianCalendar.from_ymd(-4713, 11, 24).jdn() == 0
    assert GregorianCalendar.from_ymd(2000, 1, 1).jdn() == 2451545

    assert GregorianCalendar.from_ymd(1582, 10, 15).weekday() == Weekday.FRIDAY
    assert GregorianCalendar.from_ymd(1985, 9, 15).weekday() == Weekday.SUNDAY
    assert GregorianCalendar.from_ymd(2024, 2, 11).weekday() == Weekday.SUNDAY

    assert GregorianCalendar.from_ymd(2024, 2, 29) == GregorianCalendar.from_ynd(
        2024, MonthName.FEBRUARY, 29
    )
    assert GregorianCalendar.from_ymd(2024, 2, 29).ord() == 29
    assert GregorianCalendar.from_ymd(2022, 2, 29) is None

    last_day_of_2023 = GregorianCalendar.from_ymd(2023, 12, 31)
    first_day_of_2024 = GregorianCalendar.from_ymd(2024, 1, 1)
    assert last_day_of_2023.succ() == first_day_of_2024
    assert first_day_of_2024.pred() == last_day_of_2023


def test_day_within_month_succ_pred():
    day = GregorianCalendar.from_ymd(2024, 2, 28)
    assert day.succ() == GregorianCalendar.from_ymd(2024, 2, 29)
    assert day.succ().succ() == GregorianCalendar.from_ymd(2024, 3, 1)
    assert GregorianCalendar.from_ymd(2023, 3, 1).pred() == GregorianCalendar.from_ymd(
        2023, 2, 28
    )


def test_from_yo():
    assert GregorianCalendar.from_yo(2024, 60) == GregorianCalendar.from_ymd(2024, 2, 29)
    assert GregorianCalendar.from_yo(2023, 60) == GregorianCalendar.from_ymd(2023, 3, 1)


def test_from_date():
    assert GregorianDay.from_date(Date.from_jdn(2451545)) == GregorianCalendar.from_ymd(
        2000, 1, 1
    )
    assert GregorianDay.from_date(Date.from_jdn(0)) == GregorianCalendar.from_ymd(
        -4713, 11, 24
    )


@pytest.mark.parametrize("jdn", [0, 1721426, 2299160, 2415021, 2451545, 2460351, 2470000])
def test_date_round_trip(jdn):
    day = GregorianDay.from_date(Date.from_jdn(jdn))
    assert day.to_date() == Date.from_jdn(jdn)
    assert day.jdn() == jdn


def test_formatting():
    year = GregorianCalendar.from_y(1985)
    month = GregorianCalendar.from_ym(1985, 9)
    day = GregorianCalendar.from_ymd(1985, 9, 5)

    assert format(year, "") == "1985"
    assert format(year, "#") == "1985年"
    assert format(year, "-") == "1985"
    assert str(GregorianCalendar.from_y(7)) == "0007"
    assert format(GregorianCalendar.from_y(7), "-") == "7"

    assert str(month) == "1985-09"
    assert format(month, "#") == "1985年9月"
    assert format(month, "-") == "September 1985"

    assert str(day) == "1985-09-05"
    assert format(day, "#") == "1985年9月5日"
    assert format(day, "-") == "5 September 1985"
    assert f"{day:-}" == "5 September 1985"