"""Tests for groupcal.data.models — CalendarDate and row types."""

from dataclasses import FrozenInstanceError, asdict
from datetime import date, datetime

import pytest

from groupcal.core.errors import FormatError
from groupcal.data.models import CalendarDate, ChoiceCategory, DayChoice, RecurrenceRule


class TestCalendarDate:
    def test_month_is_zero_based(self):
        assert CalendarDate(year=2024, month=1, day=29).to_date() == date(2024, 2, 29)

    def test_from_date(self):
        assert CalendarDate.from_date(date(2024, 1, 2)) == CalendarDate(2024, 0, 2)

    def test_from_datetime_drops_time(self):
        assert CalendarDate.from_date(datetime(2024, 1, 2, 23, 30)) == CalendarDate(2024, 0, 2)

    def test_invalid_day_rejected(self):
        with pytest.raises(FormatError):
            CalendarDate(year=2023, month=1, day=29)

    @pytest.mark.parametrize("month", [-1, 12])
    def test_invalid_month_rejected(self, month):
        with pytest.raises(FormatError):
            CalendarDate(year=2024, month=month, day=1)

    def test_normalized_carries_overflow(self):
        assert CalendarDate.normalized(2023, 12) == CalendarDate(2024, 0, 1)
        assert CalendarDate.normalized(2023, 25, 3) == CalendarDate(2025, 1, 3)

    def test_normalized_carries_underflow(self):
        assert CalendarDate.normalized(2024, -1) == CalendarDate(2023, 11, 1)

    def test_plus_days_crosses_year(self):
        assert CalendarDate(2023, 11, 30).plus_days(3) == CalendarDate(2024, 0, 2)

    def test_plus_days_returns_new_value(self):
        original = CalendarDate(2024, 1, 1)
        original.plus_days(1)
        assert original == CalendarDate(2024, 1, 1)

    def test_is_immutable(self):
        with pytest.raises(FrozenInstanceError):
            CalendarDate(2024, 1, 1).day = 2

    def test_first_of_month(self):
        assert CalendarDate(2024, 1, 20).first_of_month() == CalendarDate(2024, 1, 1)

    def test_isoweekday(self):
        assert CalendarDate(2024, 0, 1).isoweekday() == 1   # Monday
        assert CalendarDate(2024, 1, 4).isoweekday() == 7   # Sunday

    def test_same_month(self):
        assert CalendarDate(2024, 1, 1).same_month(CalendarDate(2024, 1, 29))
        assert not CalendarDate(2024, 1, 1).same_month(CalendarDate(2023, 1, 1))

    def test_label(self):
        assert CalendarDate(2024, 1, 13).label == "01-2024"
        assert CalendarDate(2024, 11, 1).label == "11-2024"


class TestRows:
    def test_category_values_are_wire_names(self):
        assert [c.value for c in ChoiceCategory] == [
            "available", "maybe_available", "unavailable",
        ]

    def test_day_choice_serializable(self):
        row = DayChoice(username="alice", day=3, category=ChoiceCategory.AVAILABLE)
        assert asdict(row)["day"] == 3

    def test_recurrence_rule_fields(self):
        rule = RecurrenceRule(
            id=1,
            category=ChoiceCategory.UNAVAILABLE,
            raw_rule="FREQ=WEEKLY;INTERVAL=1;BYDAY=SA",
            start_date=CalendarDate(2024, 0, 6),
            username="bob",
        )
        assert rule.start_date.isoweekday() == 6
