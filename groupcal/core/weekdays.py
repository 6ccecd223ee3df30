"""Weekday codes used in BYDAY — MO..SU mapped to ISO weekday numbers."""

from __future__ import annotations

from dateutil.rrule import FR, MO, SA, SU, TH, TU, WE, weekday

from groupcal.core.errors import FormatError

DAYS_IN_WEEK = 7

RRULE_WEEKDAYS: dict[str, weekday] = {
    "MO": MO,
    "TU": TU,
    "WE": WE,
    "TH": TH,
    "FR": FR,
    "SA": SA,
    "SU": SU,
}

# ISO numbering: Monday=1 to Sunday=7, same as date.isoweekday().
# dateutil counts Monday=0.
WEEKDAY_CODES: dict[str, int] = {
    code: day.weekday + 1 for code, day in RRULE_WEEKDAYS.items()
}

_INDEX_TO_CODE = {index: code for code, index in WEEKDAY_CODES.items()}


def code_to_index(code: str) -> int:
    """Map a two-letter weekday code to 1..7. Raises FormatError if unknown."""
    try:
        return WEEKDAY_CODES[code]
    except (KeyError, TypeError):
        raise FormatError(f"Unknown weekday code: {code!r}") from None


def index_to_code(index: int) -> str:
    try:
        return _INDEX_TO_CODE[index]
    except (KeyError, TypeError):
        raise FormatError(f"Weekday index out of range (1-7): {index!r}") from None


def split_codes(byday: str) -> list[str]:
    """Split a BYDAY value into validated codes.

    "TU,TH" -> ["TU", "TH"]. Repeated codes are kept once, first-seen order.
    """
    if not byday:
        raise FormatError("BYDAY must list at least one weekday")

    codes: list[str] = []
    for code in byday.split(","):
        code_to_index(code)
        if code not in codes:
            codes.append(code)
    return codes
