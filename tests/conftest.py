# ABOUTME: Shared test fixtures for the ShoreSquad test suite.
# ABOUTME: Provides the landing page DOM, a virtual clock, in-memory storage and mocked HTTP clients.

from unittest.mock import AsyncMock

import httpx
import pytest

from shoresquad.config import Settings
from shoresquad.deps import PageDeps
from shoresquad.dom import Window
from shoresquad.page import build_landing_page
from shoresquad.preferences import MemoryStorage
from shoresquad.scheduling import VirtualScheduler

SAMPLE_PAYLOAD = {
    "items": [
        {
            "update_timestamp": "2024-01-15T05:36:28+08:00",
            "timestamp": "2024-01-15T05:30:00+08:00",
            "valid_period": {"start": "2024-01-15T06:00:00+08:00", "end": "2024-01-16T06:00:00+08:00"},
            "general": {
                "forecast": "Thundery Showers",
                "relative_humidity": {"low": 65, "high": 95},
                "temperature": {"low": 24, "high": 32},
                "wind": {"speed": {"low": 10, "high": 20}, "direction": "NNE"},
            },
            "periods": [
                {
                    "time": {"start": "2024-01-15T06:00:00+08:00", "end": "2024-01-15T12:00:00+08:00"},
                    "regions": {
                        "west": "Partly Cloudy (Day)",
                        "east": "Cloudy",
                        "central": "Partly Cloudy (Day)",
                        "south": "Fair (Day)",
                        "north": "Light Rain",
                    },
                },
                {
                    "time": {"start": "2024-01-15T12:00:00+08:00", "end": "2024-01-15T18:00:00+08:00"},
                    "regions": {
                        "west": "Thundery Showers",
                        "east": "Showers",
                        "central": "Thundery Showers",
                        "south": "Thundery Showers",
                        "north": "Thundery Showers",
                    },
                },
                {
                    "time": {"start": "2024-01-15T18:00:00+08:00", "end": "2024-01-16T06:00:00+08:00"},
                    "regions": {
                        "west": "Partly Cloudy (Night)",
                        "east": "Partly Cloudy (Night)",
                        "central": "Partly Cloudy (Night)",
                        "south": "Partly Cloudy (Night)",
                        "north": "Partly Cloudy (Night)",
                    },
                },
                {
                    "time": {"start": "2024-01-16T06:00:00+08:00", "end": "2024-01-16T12:00:00+08:00"},
                    "regions": {"west": "Fair (Day)"},
                },
            ],
        }
    ],
    "api_info": {"status": "healthy"},
}


def mock_client(json_data=None, status_code: int = 200, content: bytes | None = None) -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient whose get() returns one canned response."""
    mock = AsyncMock(spec=httpx.AsyncClient)
    request = httpx.Request("GET", "https://test")
    if content is not None:
        response = httpx.Response(status_code=status_code, content=content, request=request)
    else:
        response = httpx.Response(status_code=status_code, json=json_data, request=request)
    mock.get.return_value = response
    return mock


@pytest.fixture
def scheduler() -> VirtualScheduler:
    return VirtualScheduler()


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def make_deps(scheduler, storage):
    """Factory for PageDeps over a fresh landing page, with an optional HTTP client override."""

    def _make(client: httpx.AsyncClient | None = None) -> PageDeps:
        document = build_landing_page()
        return PageDeps(
            document=document,
            window=Window(document),
            storage=storage,
            scheduler=scheduler,
            http_client=client or mock_client(SAMPLE_PAYLOAD),
            settings=Settings(),
        )

    return _make


@pytest.fixture
def deps(make_deps) -> PageDeps:
    return make_deps()
