"""
GroupCal — Response Assembler.

Shapes resolved availability into the JSON contract consumed by the calendar
view and any other client:

{
    "eventName": "Board games",
    "time": "01-2024",
    "groupedChoices": {
        "alice": {"available": [13, 27], "maybe_available": [], "unavailable": [15]}
    }
}
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from groupcal.core.aggregator import ManualChoiceSet
from groupcal.core.month_param import format_month_param
from groupcal.data.models import CalendarDate


class UserChoices(BaseModel):
    """Day numbers per category for one user."""

    available: list[int] = Field(default_factory=list)
    maybe_available: list[int] = Field(default_factory=list)
    unavailable: list[int] = Field(default_factory=list)


class EventAvailabilityResponse(BaseModel):
    """Resolved availability of every user for one event month."""

    model_config = ConfigDict(populate_by_name=True)

    event_name: str = Field(alias="eventName")
    time: str                                   # MM-YYYY, 0-based month
    grouped_choices: dict[str, UserChoices] = Field(alias="groupedChoices")

    def to_payload(self) -> dict:
        """JSON-ready dict using the wire field names."""
        return self.model_dump(by_alias=True)


def assemble_response(
    event_name: str,
    target_month: CalendarDate,
    resolved: Mapping[str, ManualChoiceSet],
) -> EventAvailabilityResponse:
    return EventAvailabilityResponse(
        event_name=event_name,
        time=format_month_param(target_month),
        grouped_choices={
            username: UserChoices(**choices.to_dict())
            for username, choices in resolved.items()
        },
    )
