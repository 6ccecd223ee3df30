"""
GroupCal — Availability Merger.

Folds the days produced by recurring rules into the users' manual choices.

Precedence: a day the user already answered, in any category, is never
overwritten by a rule. That lets a user mark a normally-available recurring
day as unavailable once. Rules are applied in order, so when two rules of the
same user land on one day, the first keeps it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from groupcal.core.aggregator import ManualChoiceSet
from groupcal.core.errors import IntegrityError
from groupcal.data.models import ChoiceCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleContribution:
    """Days one recurring rule fires on in the requested month."""

    username: str
    category: ChoiceCategory
    days: tuple[int, ...]
    rule_id: int | str | None = None


def merge_contribution(
    resolved: Mapping[str, ManualChoiceSet],
    contribution: RuleContribution,
) -> dict[str, ManualChoiceSet]:
    """Return a new mapping with one rule's unclaimed days added."""
    current = resolved.get(contribution.username)
    if current is None:
        raise IntegrityError(
            f"Rule {contribution.rule_id} belongs to unknown user {contribution.username!r}",
            rule_id=contribution.rule_id,
            username=contribution.username,
        )

    claimed = current.claimed_days()
    new_days = [day for day in contribution.days if day not in claimed]
    if len(new_days) < len(contribution.days):
        logger.debug(
            "Rule %s: %d day(s) already answered by %s",
            contribution.rule_id, len(contribution.days) - len(new_days), contribution.username,
        )

    merged = dict(resolved)
    merged[contribution.username] = current.with_days(contribution.category, new_days)
    return merged


def merge_rule_days(
    manual: Mapping[str, ManualChoiceSet],
    contributions: Iterable[RuleContribution],
) -> dict[str, ManualChoiceSet]:
    """Merge every rule contribution into the manual baseline.

    The input mapping is left untouched.

    Raises:
        IntegrityError: a contribution names a user absent from manual.
    """
    resolved = dict(manual)
    for contribution in contributions:
        resolved = merge_contribution(resolved, contribution)
    return resolved
