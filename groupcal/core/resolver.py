"""
GroupCal — Availability Resolver.

The pure pipeline behind an event month view:

    roster + day rows -> manual baseline
    rule rows         -> parse -> occurrences in month -> contributions
    baseline + contributions -> resolved availability -> response

No I/O and no state between calls: the result depends only on the rows and
the target month, so concurrent requests never interact.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from groupcal.core.aggregator import ManualChoiceSet, aggregate_choices
from groupcal.core.errors import AvailabilityError
from groupcal.core.merger import RuleContribution, merge_rule_days
from groupcal.core.month_param import parse_month_param
from groupcal.core.occurrences import occurrences_in_month
from groupcal.core.response import EventAvailabilityResponse, assemble_response
from groupcal.core.rule_parser import parse_rule
from groupcal.data.models import CalendarDate, DayChoice, RecurrenceRule

logger = logging.getLogger(__name__)


def rule_contribution(
    rule: RecurrenceRule,
    target_month: CalendarDate,
    max_interval: int | None = None,
) -> RuleContribution:
    """Compute the days one stored rule contributes to target_month.

    Parse and frequency failures are re-raised with the rule's id attached.
    """
    try:
        parsed = parse_rule(rule.raw_rule, max_interval=max_interval)
        days = occurrences_in_month(parsed, rule.start_date, target_month)
    except AvailabilityError as exc:
        raise type(exc)(
            f"Rule {rule.id} of {rule.username!r}: {exc}",
            rule_id=rule.id,
            username=rule.username,
        ) from exc

    logger.debug(
        "Rule %s (%s, %s) fires on %s in %s",
        rule.id, rule.raw_rule, rule.category.value, days, target_month.label,
    )
    return RuleContribution(
        username=rule.username,
        category=rule.category,
        days=tuple(days),
        rule_id=rule.id,
    )


def resolve_availability(
    users: Iterable[str],
    day_choices: Iterable[DayChoice],
    rules: Iterable[RecurrenceRule],
    target_month: CalendarDate,
    max_interval: int | None = None,
) -> dict[str, ManualChoiceSet]:
    """Resolve every user's availability for target_month.

    Manual choices always win over rule-derived days.

    Raises:
        FormatError: a rule string is malformed.
        UnsupportedRuleError: a rule uses a non-WEEKLY frequency.
        IntegrityError: a row references a user missing from the roster.
    """
    manual = aggregate_choices(users, day_choices)
    contributions = [
        rule_contribution(rule, target_month, max_interval=max_interval)
        for rule in rules
    ]
    return merge_rule_days(manual, contributions)


def build_event_availability(
    event_name: str,
    month_param: str,
    users: Iterable[str],
    day_choices: Iterable[DayChoice],
    rules: Iterable[RecurrenceRule],
    max_interval: int | None = None,
) -> EventAvailabilityResponse:
    """Full engine entry point: decode the MM-YYYY selector, resolve, assemble."""
    target_month = parse_month_param(month_param)
    resolved = resolve_availability(
        users, day_choices, rules, target_month, max_interval=max_interval,
    )
    logger.info(
        "Resolved availability of %d users for '%s' in %s",
        len(resolved), event_name, target_month.label,
    )
    return assemble_response(event_name, target_month, resolved)
