"""Event store port — abstract interface for fetching event rows.

The availability service depends on this protocol, never on a specific
database or file format.
"""

from __future__ import annotations

from typing import Protocol

from groupcal.data.models import CalendarDate, DayChoice, EventInfo, RecurrenceRule


class EventNotFoundError(Exception):
    """Raised when the requested event does not exist in the store."""


class EventStore(Protocol):
    """Abstract read interface used by the availability service."""

    async def get_event(self, event_id: str) -> EventInfo | None: ...

    async def get_month_choices(
        self, event_id: str, month: CalendarDate
    ) -> list[DayChoice]: ...

    async def get_rules(self, event_id: str) -> list[RecurrenceRule]: ...

    async def get_users(self, event_id: str) -> list[str]: ...
