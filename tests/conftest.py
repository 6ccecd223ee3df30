"""Shared test fixtures and configuration.

Sets up environment variables before any groupcal import so the settings
singleton is predictable, and provides sample event data.
"""

import os

# Patch env vars BEFORE any groupcal imports
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("MAX_RULE_INTERVAL", "52")
os.environ.setdefault("DATA_PATH", "data/events.json")

import json

import pytest


@pytest.fixture
def sample_document():
    """Event data for February 2024 (selector "01-2024")."""
    return {
        "events": [
            {
                "id": "board-games",
                "name": "Board games",
                "users": ["alice", "bob", "carol"],
                "months": [
                    {
                        "month": 1,
                        "year": 2024,
                        "choices": [
                            {"day": 15, "choice": "unavailable", "username": "alice"},
                            {"day": 3, "choice": "available", "username": "bob"},
                            {"day": 10, "choice": "maybe_available", "username": "bob"},
                        ],
                    },
                    {
                        "month": 2,
                        "year": 2024,
                        "choices": [
                            {"day": 1, "choice": "available", "username": "carol"},
                        ],
                    },
                ],
                "rules": [
                    {
                        "id": 1,
                        "choice": "available",
                        "rule": "FREQ=WEEKLY;INTERVAL=2;BYDAY=TU,TH",
                        "start_date": "2024-01-02",
                        "username": "alice",
                    },
                    {
                        "id": 2,
                        "choice": "unavailable",
                        "rule": "FREQ=WEEKLY;INTERVAL=1;BYDAY=SA",
                        "start_date": "2024-01-06",
                        "username": "bob",
                    },
                ],
            }
        ]
    }


@pytest.fixture
def data_file(tmp_path, sample_document):
    """Write the sample document to a temp JSON file and return its path."""
    path = tmp_path / "events.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return str(path)
