"""
GroupCal — Availability Service.

Fetches an event's rows through the EventStore port and runs the pure
resolver on them. This is the only layer that awaits anything; resolution
itself stays synchronous.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from groupcal.core.month_param import current_month_param, parse_month_param
from groupcal.core.resolver import build_event_availability
from groupcal.ports.event_store import EventNotFoundError

if TYPE_CHECKING:
    from groupcal.core.response import EventAvailabilityResponse
    from groupcal.ports.event_store import EventStore

logger = logging.getLogger(__name__)


async def get_event_availability(
    store: EventStore,
    event_id: str,
    date_param: str | None = None,
) -> EventAvailabilityResponse:
    """Resolve the availability of an event for one month.

    Args:
        store: Data-layer port providing the event's rows.
        event_id: Identifier of the event.
        date_param: MM-YYYY selector with a 0-based month. Defaults to the
            current UTC month.

    Raises:
        FormatError: date_param or a stored rule is malformed.
        UnsupportedRuleError: a stored rule uses a non-WEEKLY frequency.
        IntegrityError: rows reference a user outside the event roster.
        EventNotFoundError: no event with this id.
    """
    month_param = date_param if date_param is not None else current_month_param()
    # Validate before touching the store
    target_month = parse_month_param(month_param)

    event = await store.get_event(event_id)
    if event is None:
        raise EventNotFoundError(f"Event not found: {event_id!r}")

    day_choices = await store.get_month_choices(event_id, target_month)
    rules = await store.get_rules(event_id)
    users = await store.get_users(event_id)
    logger.debug(
        "Fetched %d choices, %d rules, %d users for event %s",
        len(day_choices), len(rules), len(users), event_id,
    )

    return build_event_availability(
        event.name, month_param, users, day_choices, rules,
    )
