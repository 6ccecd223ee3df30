"""
GroupCal — Centralized configuration.

Loads settings from .env and validates them. Nothing here is required: every
key has a default suitable for running the resolver locally.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

# Load .env from project root (two levels up from groupcal/config.py)
_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_ENV_PATH)


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # Logging
    LOG_LEVEL: str = "INFO"

    # Recurrence rules: upper bound for INTERVAL, in weeks
    MAX_RULE_INTERVAL: int = 52

    # JSON event data read by the command line
    DATA_PATH: str = "data/events.json"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def parse_log_level(cls, v: str) -> str:
        level = str(v).strip().upper() or "INFO"
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v!r}")
        return level

    @field_validator("MAX_RULE_INTERVAL", mode="before")
    @classmethod
    def parse_max_interval(cls, v: str | int) -> int:
        value = int(v)
        if value < 1:
            raise ValueError("MAX_RULE_INTERVAL must be at least 1")
        return value


def _load_settings() -> Settings:
    """Load settings from environment."""
    return Settings(
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        MAX_RULE_INTERVAL=os.getenv("MAX_RULE_INTERVAL", "52"),
        DATA_PATH=os.getenv("DATA_PATH", "data/events.json"),
    )


# Singleton — imported by other modules as:
#   from groupcal.config import settings
settings = _load_settings()
