"""
GroupCal — Recurrence Rule Parser.

Turns the compact rule strings stored with each recurring answer into a
structured ParsedRule:

    FREQ=WEEKLY;INTERVAL=2;BYDAY=TU,TH  ->  every 2 weeks on Tuesday and Thursday

The RFC 5545 grammar itself is handled by dateutil's rrulestr. Only WEEKLY
rules can be resolved into days. Other frequencies parse structurally but are
rejected by ensure_supported() with UnsupportedRuleError, so callers can tell
"bad data" from "feature gap".
"""

from __future__ import annotations

import logging
from enum import Enum

from dateutil.rrule import (
    DAILY,
    HOURLY,
    MINUTELY,
    MONTHLY,
    SECONDLY,
    WEEKLY,
    YEARLY,
    rrulestr,
)
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from groupcal.core.errors import FormatError, UnsupportedRuleError
from groupcal.core.weekdays import split_codes

logger = logging.getLogger(__name__)

_RRULE_PREFIX = "RRULE:"
_REQUIRED_KEYS = ("FREQ", "INTERVAL", "BYDAY")


class Frequency(Enum):
    YEARLY = "YEARLY"
    MONTHLY = "MONTHLY"
    WEEKLY = "WEEKLY"
    DAILY = "DAILY"
    HOURLY = "HOURLY"
    MINUTELY = "MINUTELY"
    SECONDLY = "SECONDLY"


_FREQUENCY_BY_RRULE = {
    YEARLY: Frequency.YEARLY,
    MONTHLY: Frequency.MONTHLY,
    WEEKLY: Frequency.WEEKLY,
    DAILY: Frequency.DAILY,
    HOURLY: Frequency.HOURLY,
    MINUTELY: Frequency.MINUTELY,
    SECONDLY: Frequency.SECONDLY,
}

SUPPORTED_FREQUENCIES = frozenset({Frequency.WEEKLY})


class ParsedRule(BaseModel):
    """Structured recurrence rule.

    JSON example:
    {
        "frequency": "WEEKLY",
        "interval": 2,
        "weekdays": ["TU", "TH"]
    }
    """

    model_config = ConfigDict(frozen=True)

    frequency: Frequency
    interval: int          # in units of the frequency, e.g. weeks
    weekdays: tuple[str, ...]

    @field_validator("interval")
    @classmethod
    def check_interval(cls, v: int) -> int:
        if v < 1:
            raise ValueError("INTERVAL must be a positive integer")
        return v

    @field_validator("weekdays", mode="before")
    @classmethod
    def check_weekdays(cls, v: str | list[str] | tuple[str, ...]) -> tuple[str, ...]:
        if isinstance(v, str):
            return tuple(split_codes(v))
        return tuple(split_codes(",".join(v)))


def _split_pairs(raw_rule: str) -> dict[str, str]:
    """Split "A=1;B=2" into {"A": "1", "B": "2"}, rejecting malformed pairs.

    rrulestr silently keeps the last of repeated keys and defaults a missing
    INTERVAL, so both are checked here first.
    """
    body = raw_rule.strip()
    if body.upper().startswith(_RRULE_PREFIX):
        body = body[len(_RRULE_PREFIX):]
    if body.endswith(";"):
        body = body[:-1]
    if not body:
        raise FormatError("Empty recurrence rule")

    pairs: dict[str, str] = {}
    for part in body.split(";"):
        key, sep, value = part.partition("=")
        key = key.strip().upper()
        if not sep or not key:
            raise FormatError(f"Malformed rule part {part!r} in {raw_rule!r}")
        if key in pairs:
            raise FormatError(f"Duplicate key {key} in {raw_rule!r}")
        pairs[key] = value.strip()
    return pairs


def parse_rule(raw_rule: str, max_interval: int | None = None) -> ParsedRule:
    """Parse a recurrence string into a ParsedRule.

    Args:
        raw_rule: Semicolon-separated KEY=VALUE pairs; FREQ, INTERVAL and
            BYDAY are required. A leading "RRULE:" is accepted.
        max_interval: Largest accepted INTERVAL. Defaults to the
            MAX_RULE_INTERVAL setting.

    Raises:
        FormatError: malformed string, missing key, bad interval or weekday.
    """
    if not isinstance(raw_rule, str):
        raise FormatError(f"Recurrence rule must be a string, got {type(raw_rule).__name__}")

    if max_interval is None:
        from groupcal.config import settings
        max_interval = settings.MAX_RULE_INTERVAL

    pairs = _split_pairs(raw_rule)

    missing = [key for key in _REQUIRED_KEYS if key not in pairs]
    if missing:
        raise FormatError(f"Missing {', '.join(missing)} in rule {raw_rule!r}")

    # Plain MO..SU codes only, in the order given: rrulestr sorts byweekday
    # and would also accept ordinal forms such as +1MO.
    weekdays = split_codes(pairs["BYDAY"])

    normalized = ";".join(f"{key}={value}" for key, value in pairs.items())
    try:
        parsed = rrulestr(normalized)
    except ValueError as exc:
        raise FormatError(f"Invalid rule {raw_rule!r}: {exc}") from exc

    extra = sorted(set(pairs) - set(_REQUIRED_KEYS))
    if extra:
        logger.debug("Ignoring rule keys %s in %r", extra, raw_rule)

    # rrule exposes no public accessors for its parsed fields
    frequency = _FREQUENCY_BY_RRULE[parsed._freq]
    interval = parsed._interval
    if interval > max_interval:
        raise FormatError(
            f"INTERVAL {interval} exceeds the maximum of {max_interval} in rule {raw_rule!r}"
        )

    try:
        return ParsedRule(
            frequency=frequency,
            interval=interval,
            weekdays=weekdays,
        )
    except ValidationError as exc:
        raise FormatError(f"Invalid rule {raw_rule!r}: {exc.errors()[0]['msg']}") from exc


def format_rule(rule: ParsedRule) -> str:
    """Render a ParsedRule back to its canonical string form."""
    return (
        f"FREQ={rule.frequency.value};"
        f"INTERVAL={rule.interval};"
        f"BYDAY={','.join(rule.weekdays)}"
    )


def ensure_supported(rule: ParsedRule) -> None:
    """Raise UnsupportedRuleError unless the rule's frequency can be resolved."""
    if rule.frequency not in SUPPORTED_FREQUENCIES:
        raise UnsupportedRuleError(
            f"Unsupported rule frequency {rule.frequency.value}: only WEEKLY is supported"
        )
