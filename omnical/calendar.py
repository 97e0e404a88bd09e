"""Abstract interfaces shared by all calendar systems."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from omnical.date import Date, Weekday


class Calendar(ABC):
    """A calendar system: a way to look up its years, months and days."""

    @classmethod
    @abstractmethod
    def from_y(cls, year: int) -> Year | None:
        """The year with the given number, or None if it is not supported."""

    @classmethod
    def from_ym(cls, year: int, month: int) -> Month | None:
        y = cls.from_y(year)
        return None if y is None else y.month(month)

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> Day | None:
        m = cls.from_ym(year, month)
        return None if m is None else m.day(day)

    @classmethod
    def from_yo(cls, year: int, day_ord: int) -> Day | None:
        """The day at a 1-based position within a year."""
        y = cls.from_y(year)
        return None if y is None else y.day(day_ord)


class Year(ABC):
    """A year of some calendar."""

    @abstractmethod
    def ord(self) -> int: ...

    @abstractmethod
    def succ(self) -> Year: ...

    @abstractmethod
    def pred(self) -> Year: ...

    @abstractmethod
    def num_months(self) -> int: ...

    @abstractmethod
    def month(self, ord: int) -> Month | None:
        """The month at a 1-based position, or None when out of range."""

    def first_month(self) -> Month:
        return self.month(1)

    def last_month(self) -> Month:
        return self.month(self.num_months())

    def months(self) -> Iterator[Month]:
        months = (self.month(i) for i in range(1, self.num_months() + 1))
        return (m for m in months if m is not None)

    def num_days(self) -> int:
        return sum(m.num_days() for m in self.months())

    def day(self, ord: int) -> Day | None:
        """The day at a 1-based position within the year, or None."""
        for month in self.months():
            num_days = month.num_days()
            if ord <= num_days:
                return month.day(ord)
            ord -= num_days
        return None

    def first_day(self) -> Day:
        return self.day(1)

    def last_day(self) -> Day:
        return self.day(self.num_days())

    def days(self) -> Iterator[Day]:
        days = (self.day(i) for i in range(1, self.num_days() + 1))
        return (d for d in days if d is not None)

    def is_leap(self) -> bool:
        return False


class Month(ABC):
    """A month of some calendar."""

    @abstractmethod
    def ord(self) -> int: ...

    @abstractmethod
    def succ(self) -> Month: ...

    @abstractmethod
    def pred(self) -> Month: ...

    @abstractmethod
    def the_year(self) -> Year: ...

    @abstractmethod
    def num_days(self) -> int: ...

    @abstractmethod
    def day(self, ord: int) -> Day | None:
        """The day at a 1-based position within the month, or None."""

    def first_day(self) -> Day:
        return self.day(1)

    def last_day(self) -> Day:
        return self.day(self.num_days())

    def days(self) -> Iterator[Day]:
        days = (self.day(i) for i in range(1, self.num_days() + 1))
        return (d for d in days if d is not None)

    def is_leap(self) -> bool:
        return False


class Day(ABC):
    """A day of some calendar, convertible to a Date."""

    @abstractmethod
    def ord(self) -> int: ...

    def ord_in_year(self) -> int:
        year = self.the_year()
        preceding = sum(
            year.month(m).num_days() for m in range(1, self.the_month().ord())
        )
        return preceding + self.ord() + 1

    @abstractmethod
    def succ(self) -> Day: ...

    @abstractmethod
    def pred(self) -> Day: ...

    @abstractmethod
    def the_year(self) -> Year: ...

    @abstractmethod
    def the_month(self) -> Month: ...

    def is_leap(self) -> bool:
        return False

    @abstractmethod
    def to_date(self) -> Date:
        """The calendar-independent date of this day."""

    def jdn(self) -> int:
        return self.to_date().jdn

    def weekday(self) -> Weekday:
        return self.to_date().weekday()