"""JSON file adapter — implements EventStore over a read-only JSON document.

Document layout (rows use the same column names as the event tables):

{
    "events": [
        {
            "id": "board-games",
            "name": "Board games",
            "users": ["alice", "bob"],
            "months": [
                {"month": 1, "year": 2024,
                 "choices": [{"day": 15, "choice": "unavailable", "username": "alice"}]}
            ],
            "rules": [
                {"id": 1, "choice": "available", "rule": "FREQ=WEEKLY;INTERVAL=2;BYDAY=TU,TH",
                 "start_date": "2024-01-02", "username": "alice"}
            ]
        }
    ]
}
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from pydantic import BaseModel, Field

from groupcal.data.models import (
    CalendarDate,
    ChoiceCategory,
    DayChoice,
    EventInfo,
    RecurrenceRule,
)

logger = logging.getLogger(__name__)


class StoredChoice(BaseModel):
    day: int = Field(ge=1, le=31)
    choice: ChoiceCategory
    username: str


class StoredMonth(BaseModel):
    month: int = Field(ge=0, le=11)   # 0-based
    year: int
    choices: list[StoredChoice] = Field(default_factory=list)


class StoredRule(BaseModel):
    id: int | str
    choice: ChoiceCategory
    rule: str
    start_date: date
    username: str


class StoredEvent(BaseModel):
    id: str
    name: str
    users: list[str] = Field(default_factory=list)
    months: list[StoredMonth] = Field(default_factory=list)
    rules: list[StoredRule] = Field(default_factory=list)


class StoreDocument(BaseModel):
    events: list[StoredEvent] = Field(default_factory=list)


class JsonEventStore:
    """EventStore backed by an in-memory StoreDocument."""

    def __init__(self, document: StoreDocument) -> None:
        self._events = {event.id: event for event in document.events}

    @classmethod
    def from_file(cls, path: str | Path) -> JsonEventStore:
        """Load and validate a JSON document from disk.

        Raises OSError if unreadable and pydantic.ValidationError if invalid.
        """
        raw = Path(path).read_text(encoding="utf-8")
        document = StoreDocument.model_validate_json(raw)
        logger.debug("Loaded %d events from %s", len(document.events), path)
        return cls(document)

    async def get_event(self, event_id: str) -> EventInfo | None:
        event = self._events.get(event_id)
        if event is None:
            return None
        return EventInfo(id=event.id, name=event.name)

    async def get_month_choices(
        self, event_id: str, month: CalendarDate
    ) -> list[DayChoice]:
        event = self._events.get(event_id)
        if event is None:
            return []
        return [
            DayChoice(username=row.username, day=row.day, category=row.choice)
            for stored_month in event.months
            if (stored_month.year, stored_month.month) == (month.year, month.month)
            for row in stored_month.choices
        ]

    async def get_rules(self, event_id: str) -> list[RecurrenceRule]:
        event = self._events.get(event_id)
        if event is None:
            return []
        return [
            RecurrenceRule(
                id=row.id,
                category=row.choice,
                raw_rule=row.rule,
                start_date=CalendarDate.from_date(row.start_date),
                username=row.username,
            )
            for row in event.rules
        ]

    async def get_users(self, event_id: str) -> list[str]:
        event = self._events.get(event_id)
        if event is None:
            return []
        return list(event.users)
