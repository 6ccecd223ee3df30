"""
GroupCal — Data Models.

Rows handed to the engine by the data layer, plus the CalendarDate value
type used for every date the engine touches. Months are 0-based throughout,
matching the MM-YYYY selector used by clients.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum

from groupcal.core.errors import FormatError


class ChoiceCategory(Enum):
    """The three mutually exclusive answers a user can give for a day."""

    AVAILABLE = "available"
    MAYBE_AVAILABLE = "maybe_available"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class CalendarDate:
    """A UTC calendar day with a 0-based month.

    Always valid: construction rejects days that do not exist in the month.
    """

    year: int
    month: int   # 0 = January
    day: int

    def __post_init__(self) -> None:
        if not 0 <= self.month <= 11:
            raise FormatError(f"Month out of range (0-11): {self.month}")
        if not 1 <= self.year <= 9999:
            raise FormatError(f"Year out of range: {self.year}")
        last_day = calendar.monthrange(self.year, self.month + 1)[1]
        if not 1 <= self.day <= last_day:
            raise FormatError(
                f"Day {self.day} not valid for {self.month:02d}-{self.year}"
            )

    @classmethod
    def normalized(cls, year: int, month: int, day: int = 1) -> CalendarDate:
        """Build a date, carrying month overflow/underflow into the year."""
        carry, month = divmod(month, 12)
        return cls(year=year + carry, month=month, day=day)

    @classmethod
    def from_date(cls, value: date | datetime) -> CalendarDate:
        if isinstance(value, datetime):
            value = value.date()
        return cls(year=value.year, month=value.month - 1, day=value.day)

    def to_date(self) -> date:
        return date(self.year, self.month + 1, self.day)

    def plus_days(self, days: int) -> CalendarDate:
        return CalendarDate.from_date(self.to_date() + timedelta(days=days))

    def first_of_month(self) -> CalendarDate:
        return CalendarDate(year=self.year, month=self.month, day=1)

    def isoweekday(self) -> int:
        """Monday=1 to Sunday=7."""
        return self.to_date().isoweekday()

    def same_month(self, other: CalendarDate) -> bool:
        return (self.year, self.month) == (other.year, other.month)

    @property
    def label(self) -> str:
        """MM-YYYY with the 0-based month, as used by the month selector."""
        return f"{self.month:02d}-{self.year}"


@dataclass(frozen=True)
class EventInfo:
    """The event whose availability is being resolved."""

    id: str
    name: str


@dataclass(frozen=True)
class DayChoice:
    """A manual answer for one day of the requested month."""

    username: str
    day: int
    category: ChoiceCategory


@dataclass(frozen=True)
class RecurrenceRule:
    """A stored recurring answer, e.g. available every 2 weeks on TU,TH.

    start_date is the day the rule was created; its interval cadence is
    counted from there.
    """

    id: int | str
    category: ChoiceCategory
    raw_rule: str                # e.g. "FREQ=WEEKLY;INTERVAL=2;BYDAY=TU,TH"
    start_date: CalendarDate
    username: str
