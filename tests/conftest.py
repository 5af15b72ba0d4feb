"""
Pytest configuration and shared fixtures.

Fixtures defined here are available to all tests.
"""

import copy
import json

import httpx
import pytest

from mealviewer.config import get_settings


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from MEALVIEWER_* variables in the environment."""
    for name in ("BASE_URL", "TIMEOUT", "USER_AGENT", "DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(f"MEALVIEWER_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Sample Data Fixtures
# =============================================================================


SAMPLE_PAYLOAD = {
    "physicalLocation": {
        "name": "Elmwood Elementary",
        "address": "123 Main St",
        "city": "Springfield",
        "state": "IL",
        "latitude": 39.7817,
        "longitude": -89.6501,
    },
    "menuSchedules": [
        {
            "dateInformation": {"dateFull": "2025-01-15T00:00:00"},
            "menuBlocks": [
                {
                    "blockName": "Lunch",
                    "cafeteriaLineList": {
                        "data": [
                            {
                                "name": "Main Line",
                                "foodItemList": {
                                    "data": [
                                        {
                                            "item_Name": "Pizza",
                                            "item_Type": "Entree",
                                            "serving_Size": "2 slices",
                                            "description": "Cheese pizza",
                                            "nutritionals": [{"name": "Calories", "value": "290"}],
                                            "allergens": [{"name": "Milk"}],
                                        },
                                        {
                                            "item_Name": "Apple",
                                            "item_AltName": "",
                                            "item_Type": "Fruit",
                                            "serving_Size": "1 each",
                                        },
                                    ]
                                },
                            }
                        ]
                    },
                }
            ],
        }
    ],
}


@pytest.fixture
def sample_payload():
    """Raw MealViewer payload: one day, one Lunch block, one line, two items."""
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def empty_payload():
    """Raw payload with no menu schedules."""
    return {
        "physicalLocation": {
            "name": "Test School",
            "address": "123 Main St",
            "city": "Test City",
        },
        "menuSchedules": [],
    }


@pytest.fixture
def make_block():
    """Factory for a raw menu block with the given name."""
    def _factory(name, lines=None):
        return {"blockName": name, "cafeteriaLineList": {"data": lines or []}}
    return _factory


# =============================================================================
# HTTP Fixtures
# =============================================================================


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def _record(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def json_transport():
    """Factory for a transport that answers every request with a JSON body."""
    def _factory(payload, status_code=200):
        return RecordingTransport(
            lambda request: httpx.Response(status_code, content=json.dumps(payload).encode(),
                                           headers={"Content-Type": "application/json"})
        )
    return _factory


@pytest.fixture
def failing_transport():
    """Factory for a transport whose handler raises the given exception."""
    def _factory(make_exc):
        def _handler(request):
            raise make_exc(request)
        return RecordingTransport(_handler)
    return _factory
