"""
GroupCal — Choice Aggregator.

Groups the manual per-day answers of a month by user into the three choice
buckets. Every roster user gets an entry, even without any answer, so later
lookups never miss a key.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from groupcal.core.errors import IntegrityError
from groupcal.data.models import ChoiceCategory, DayChoice

logger = logging.getLogger(__name__)

_FIELD_BY_CATEGORY = {
    ChoiceCategory.AVAILABLE: "available",
    ChoiceCategory.MAYBE_AVAILABLE: "maybe_available",
    ChoiceCategory.UNAVAILABLE: "unavailable",
}


def _dedupe(days: Iterable[int]) -> tuple[int, ...]:
    """Drop repeated days, keeping first-seen order."""
    return tuple(dict.fromkeys(days))


@dataclass(frozen=True)
class ManualChoiceSet:
    """One user's days per choice category, deduplicated."""

    available: tuple[int, ...] = ()
    maybe_available: tuple[int, ...] = ()
    unavailable: tuple[int, ...] = ()

    def days_for(self, category: ChoiceCategory) -> tuple[int, ...]:
        return getattr(self, _FIELD_BY_CATEGORY[category])

    def claimed_days(self) -> frozenset[int]:
        """Every day this user has an answer for, whatever the category."""
        return frozenset(self.available + self.maybe_available + self.unavailable)

    def with_days(self, category: ChoiceCategory, days: Iterable[int]) -> ManualChoiceSet:
        """Return a copy with days appended to category (deduplicated)."""
        field_name = _FIELD_BY_CATEGORY[category]
        merged = _dedupe(getattr(self, field_name) + tuple(days))
        return ManualChoiceSet(**{
            "available": self.available,
            "maybe_available": self.maybe_available,
            "unavailable": self.unavailable,
            field_name: merged,
        })

    def to_dict(self) -> dict[str, list[int]]:
        return {
            "available": list(self.available),
            "maybe_available": list(self.maybe_available),
            "unavailable": list(self.unavailable),
        }


def aggregate_choices(
    users: Iterable[str],
    rows: Iterable[DayChoice],
) -> dict[str, ManualChoiceSet]:
    """Build each roster user's manual choices from the month's day rows.

    Repeated rows with the same category collapse into one.

    Raises:
        IntegrityError: a row names a user missing from the roster, or gives
            a day a second category for the same user. No partial result is
            returned.
    """
    grouped: dict[str, dict[ChoiceCategory, list[int]]] = {
        username: {category: [] for category in ChoiceCategory} for username in users
    }
    seen: dict[tuple[str, int], ChoiceCategory] = {}

    for row in rows:
        buckets = grouped.get(row.username)
        if buckets is None:
            raise IntegrityError(
                f"Day choice for unknown user {row.username!r} (day {row.day})",
                username=row.username,
            )
        previous = seen.setdefault((row.username, row.day), row.category)
        if previous is not row.category:
            raise IntegrityError(
                f"Day {row.day} is both {previous.value} and {row.category.value} "
                f"for user {row.username!r}",
                username=row.username,
            )
        buckets[row.category].append(row.day)

    logger.debug("Aggregated manual choices for %d users", len(grouped))
    return {
        username: ManualChoiceSet(
            available=_dedupe(buckets[ChoiceCategory.AVAILABLE]),
            maybe_available=_dedupe(buckets[ChoiceCategory.MAYBE_AVAILABLE]),
            unavailable=_dedupe(buckets[ChoiceCategory.UNAVAILABLE]),
        )
        for username, buckets in grouped.items()
    }
