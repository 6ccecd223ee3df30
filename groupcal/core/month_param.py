"""MM-YYYY month selector (0-based month), as sent by clients."""

from __future__ import annotations

import re
from datetime import date, datetime, timezone

from groupcal.core.errors import FormatError
from groupcal.data.models import CalendarDate

_MONTH_PARAM_RE = re.compile(r"^([0-9]{1,2})-([0-9]{4})$")


def parse_month_param(text: str) -> CalendarDate:
    """Decode "01-2024" (February 2024) into the first day of that month.

    Raises FormatError on anything else, including months outside 0-11.
    """
    match = _MONTH_PARAM_RE.match(text.strip()) if isinstance(text, str) else None
    if match is None:
        raise FormatError(f"Wrong month format, expected MM-YYYY: {text!r}")

    month, year = int(match.group(1)), int(match.group(2))
    if month > 11:
        raise FormatError(f"Month out of range (0-11): {text!r}")
    return CalendarDate(year=year, month=month, day=1)


def format_month_param(value: CalendarDate) -> str:
    return value.label


def current_month_param(today: date | None = None) -> str:
    """Selector for the current UTC month, used when none is requested."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    return format_month_param(CalendarDate.from_date(today).first_of_month())
