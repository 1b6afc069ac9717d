"""
Shared fixtures: point payloads as the remote service returns them, and
records parsed from them.
"""

import pytest

from h2ok.schemas.partner import PointRecord


def point_payload(**overrides):
    payload = {
        "id": "p1",
        "name": "Coffee Point",
        "address": "Respubliki 1",
        "latitude": 57.15,
        "longitude": 65.53,
        "open_hours": "9:00-21:00",
        "has_hot": False,
        "has_cold": True,
        "access_type": "free",
        "is_new": False,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_payload():
    """Factory for raw point dictionaries."""
    return point_payload


@pytest.fixture
def make_point():
    """Factory for parsed point records."""
    def _make(**overrides):
        return PointRecord.model_validate(point_payload(**overrides))
    return _make
