"""
GroupCal — Entry Point.

`python main.py EVENT_ID [--date MM-YYYY]` prints an event's resolved
availability for one month.
"""

import logging
import sys

from groupcal.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

from groupcal.cli import main

if __name__ == "__main__":
    sys.exit(main())
