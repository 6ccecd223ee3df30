"""
GroupCal — Command line.

Prints the resolved availability of one event month as JSON:

    python main.py board-games --date 01-2024 --data data/events.json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from pydantic import ValidationError

from groupcal.adapters.json_store import JsonEventStore
from groupcal.core.availability_service import get_event_availability
from groupcal.core.errors import FormatError, IntegrityError, UnsupportedRuleError
from groupcal.ports.event_store import EventNotFoundError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DATA_ERROR = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="groupcal",
        description="Resolve per-user availability of an event for one month.",
    )
    parser.add_argument("event_id", help="Event identifier")
    parser.add_argument(
        "--date",
        dest="date_param",
        default=None,
        help="Month as MM-YYYY with a 0-based month (default: current month)",
    )
    parser.add_argument(
        "--data",
        default=None,
        help="JSON event data file (default: DATA_PATH setting)",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    return parser


def main(argv: list[str] | None = None) -> int:
    from groupcal.config import settings

    args = build_parser().parse_args(argv)
    data_path = args.data or settings.DATA_PATH

    try:
        store = JsonEventStore.from_file(data_path)
    except OSError as exc:
        logger.error("Cannot read event data %s: %s", data_path, exc)
        return EXIT_DATA_ERROR
    except ValidationError as exc:
        logger.error("Invalid event data in %s: %s", data_path, exc)
        return EXIT_DATA_ERROR

    try:
        response = asyncio.run(
            get_event_availability(store, args.event_id, args.date_param)
        )
    except (FormatError, UnsupportedRuleError) as exc:
        logger.error("Rejected request: %s", exc)
        return EXIT_INPUT_ERROR
    except (IntegrityError, EventNotFoundError) as exc:
        logger.error("Cannot resolve event %s: %s", args.event_id, exc)
        return EXIT_DATA_ERROR

    json.dump(response.to_payload(), sys.stdout, indent=args.indent)
    sys.stdout.write("\n")
    return EXIT_OK
