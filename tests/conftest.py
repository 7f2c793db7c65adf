"""Shared test fixtures."""

from __future__ import annotations

import httpx
import pytest

from weather_now.common.http import HttpClient
from weather_now.storage.preferences import Preferences
from weather_now.storage.store import MemoryStore
from weather_now.weather.models import Place


class FakeOpenMeteo:
    """Serves canned geocoding and forecast responses through httpx.MockTransport."""

    def __init__(self) -> None:
        self.geocoding: object = {"results": []}
        self.geocoding_status = 200
        self.forecast: object = {}
        self.forecast_status = 200
        self.raise_error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error is not None:
            raise self.raise_error
        if request.url.path.endswith("/search"):
            return _response(self.geocoding_status, self.geocoding)
        return _response(self.forecast_status, self.forecast)

    def client(self) -> HttpClient:
        return HttpClient(transport=httpx.MockTransport(self.handler))

    @property
    def geocoding_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/search")]

    @property
    def forecast_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/forecast")]


def _response(status: int, body: object) -> httpx.Response:
    if isinstance(body, bytes):
        return httpx.Response(status, content=body)
    return httpx.Response(status, json=body)


def forecast_payload(temperature: float = 15.0, weathercode: int = 3) -> dict:
    return {
        "latitude": 51.5,
        "longitude": -0.12,
        "timezone": "Europe/London",
        "current_weather": {
            "temperature": temperature,
            "windspeed": 11.2,
            "winddirection": 247.6,
            "weathercode": weathercode,
            "time": "2026-10-19T14:00",
        },
    }


@pytest.fixture
def api():
    return FakeOpenMeteo()


@pytest.fixture
def make_forecast():
    return forecast_payload


@pytest.fixture
def london_result():
    return {
        "id": 2643743,
        "name": "London",
        "latitude": 51.51,
        "longitude": -0.13,
        "country": "United Kingdom",
        "country_code": "GB",
        "admin1": "England",
        "population": 7556900,
    }


@pytest.fixture
def springfield_results():
    return [
        {
            "name": "Springfield",
            "latitude": 39.80172,
            "longitude": -89.64371,
            "country": "United States",
            "admin1": "Illinois",
            "population": 116250,
        },
        {
            "name": "Springfield",
            "latitude": 37.21533,
            "longitude": -93.29824,
            "country": "United States",
            "admin1": "Missouri",
            "population": 166810,
        },
        {
            "name": "Springfield",
            "latitude": 44.04624,
            "longitude": -123.02203,
            "country": "United States",
            "admin1": "Oregon",
        },
    ]


@pytest.fixture
def london_api(api, london_result):
    """Geocoder returns London only; forecast is 15C overcast."""
    api.geocoding = {"results": [london_result], "generationtime_ms": 0.5}
    api.forecast = forecast_payload()
    return api


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def prefs(store):
    return Preferences(store)


@pytest.fixture
def london():
    return Place(
        name="London",
        country="United Kingdom",
        admin1="England",
        latitude=51.51,
        longitude=-0.13,
        population=7556900,
    )
