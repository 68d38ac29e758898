# src/weatherapp/tests/conftest.py
import json
from typing import Any, Callable, Dict

import httpx
import pytest

from weatherapp.weather.openweather import OpenWeatherClient

TEST_KEY = "testkey"

WARSAW_CURRENT: Dict[str, Any] = {
    "name": "Warsaw",
    "main": {"temp": 20.5, "humidity": 65},
    "weather": [{"description": "Słonecznie", "icon": "01d"}],
}

WARSAW_FORECAST: Dict[str, Any] = {
    "list": [
        {
            "dt_txt": "2023-11-01 09:00:00",
            "main": {"temp": 8.4, "humidity": 80},
            "weather": [{"description": "pochmurno", "icon": "04d"}],
        },
        {
            "dt_txt": "2023-11-01 12:00:00",
            "main": {"temp": 10.5, "humidity": 70},
            "weather": [{"description": "zachmurzenie", "icon": "03d"}],
        },
        {
            "dt_txt": "2023-11-02 09:00:00",
            "main": {"temp": -2.5, "humidity": 90},
            "weather": [{"description": "śnieg"}],
        },
    ],
    "city": {"name": "Warsaw", "country": "PL"},
}


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"),
                          headers={"content-type": "application/json"})


def route_by_endpoint(current: Any, forecast: Any, *, current_status: int = 200,
                      forecast_status: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """/weather 와 /forecast 요청에 각각 정해진 응답."""
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/forecast"):
            return json_response(forecast, forecast_status)
        return json_response(current, current_status)
    return handler


@pytest.fixture
def make_client():
    def _make(handler) -> OpenWeatherClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return OpenWeatherClient(TEST_KEY, client=http)
    return _make
