"""Occurrence generator — days of a month on which a weekly rule fires.

No I/O: this module only transforms data.

A rule "every N weeks on BYDAY" created on start_date fires on a cadence of
N*7 days counted from start_date. For a target month we:

1. anchor: first cadence date on/after the 1st of the month (or start_date
   itself when the rule starts inside the month);
2. align: for each BYDAY weekday, the first date on/after the anchor with
   that weekday;
3. expand: step N*7 days from each aligned date until leaving the month.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

from groupcal.core.rule_parser import ParsedRule, ensure_supported
from groupcal.core.weekdays import DAYS_IN_WEEK, code_to_index
from groupcal.data.models import CalendarDate

logger = logging.getLogger(__name__)


def find_anchor(interval_weeks: int, rule_start: date, month_start: date) -> date:
    """First date >= month_start that is a whole number of periods after rule_start.

    A rule starting on or after month_start is anchored on its start date.
    """
    if rule_start >= month_start:
        return rule_start
    period = interval_weeks * DAYS_IN_WEEK
    elapsed = (month_start - rule_start).days
    periods = -(-elapsed // period)  # ceil
    return rule_start + timedelta(days=periods * period)


def align_to_weekday(anchor: date, weekday: int) -> date:
    """First date on/after anchor falling on weekday (Monday=1 to Sunday=7)."""
    current = anchor.isoweekday()
    if weekday == current:
        return anchor
    if weekday > current:
        return anchor + timedelta(days=weekday - current)
    return anchor + timedelta(days=DAYS_IN_WEEK - current + weekday)


def expand_interval(first: date, step_days: int) -> list[int]:
    """Day numbers from first, every step_days, while still in first's month."""
    days: list[int] = []
    current = first
    while current.month == first.month and current.year == first.year:
        days.append(current.day)
        current += timedelta(days=step_days)
    return days


def occurrences_in_month(
    rule: ParsedRule,
    rule_start: CalendarDate,
    target_month: CalendarDate,
) -> list[int]:
    """Return the day numbers in target_month on which the rule fires.

    Days are grouped by BYDAY order (not sorted). Empty when the rule starts
    after the month or its cadence skips the month entirely.

    Raises:
        UnsupportedRuleError: the rule's frequency is not WEEKLY.
    """
    ensure_supported(rule)

    month_start = target_month.first_of_month().to_date()
    anchor = find_anchor(rule.interval, rule_start.to_date(), month_start)
    if not CalendarDate.from_date(anchor).same_month(target_month):
        logger.debug(
            "Rule %s from %s has no occurrence in %s (next cadence %s)",
            rule.weekdays, rule_start.to_date(), target_month.label, anchor,
        )
        return []

    step_days = rule.interval * DAYS_IN_WEEK
    days: list[int] = []
    for code in rule.weekdays:
        first = align_to_weekday(anchor, code_to_index(code))
        if first.month != month_start.month:
            continue
        days.extend(expand_interval(first, step_days))
    return days
