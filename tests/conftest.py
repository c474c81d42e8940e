"""
Shared fixtures: Launch Library 1.4 payloads and decoded launches.
"""
import copy
from datetime import datetime, timezone

import pytest

from vacuum.etl import LaunchETL


SAMPLE_LAUNCH = {
    "id": 1815,
    "name": "Falcon 9 Full Thrust | Starlink 3",
    "net": "January 1, 2020 12:00:00 UTC",
    "isostart": "20200101T120000Z",
    "isoend": "20200101T120000Z",
    "isonet": "20200101T120000Z",
    "tbddate": 0,
    "tbdtime": 0,
    "vidURLs": [
        "https://www.youtube.com/watch?v=abc123",
        "https://www.spacex.com/webcast",
    ],
    "rocket": {
        "id": 188,
        "name": "Falcon 9 Full Thrust",
        "configuration": "Full Thrust",
    },
    "missions": [
        {
            "id": 1118,
            "name": "Starlink 3",
            "description": "A batch of 60 satellites for the Starlink constellation.",
            "typeName": "Communications",
        },
        {
            "id": 1119,
            "name": "Rideshare",
            "description": "Secondary payload riding along.",
            "typeName": "Dedicated Rideshare",
        },
    ],
    # Extra fields sent by the API are ignored
    "status": 1,
}


@pytest.fixture
def launch_dict():
    """Factory for a single raw launch record with field overrides."""
    def _make(**overrides):
        raw = copy.deepcopy(SAMPLE_LAUNCH)
        raw.update(overrides)
        return raw

    return _make


@pytest.fixture
def payload(launch_dict):
    """Factory for a full response payload."""
    def _make(*launches):
        launches = list(launches) or [launch_dict()]
        return {
            "offset": 0,
            "count": len(launches),
            "total": 241,
            "launches": launches,
        }

    return _make


@pytest.fixture
def etl():
    return LaunchETL()


@pytest.fixture
def make_launch(etl, payload, launch_dict):
    """Decode a single launch through the real transformation."""
    def _make(**overrides):
        return etl.transform(payload(launch_dict(**overrides))).launches[0]

    return _make


@pytest.fixture
def now():
    return datetime(2020, 1, 1, 11, 0, 0, tzinfo=timezone.utc)
