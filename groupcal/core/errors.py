"""
GroupCal — Resolution Errors.

Every failure the availability engine can raise. All of them are caller or
upstream-data problems: nothing here is retried, the request is rejected and
the context (rule id, username) is kept so the bad row can be found.
"""

from __future__ import annotations


class AvailabilityError(Exception):
    """Base class for availability resolution failures."""

    def __init__(
        self,
        message: str,
        *,
        rule_id: int | str | None = None,
        username: str | None = None,
    ) -> None:
        super().__init__(message)
        self.rule_id = rule_id
        self.username = username


class FormatError(AvailabilityError):
    """Malformed recurrence string, weekday code, date or month selector."""


class UnsupportedRuleError(AvailabilityError):
    """Well-formed rule using a frequency the engine cannot resolve."""


class IntegrityError(AvailabilityError):
    """Rows contradict the roster or each other (unknown user, day in two categories)."""
