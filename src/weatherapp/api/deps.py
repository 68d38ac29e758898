# src/weatherapp/api/deps.py
from __future__ import annotations
from typing import AsyncIterator

import httpx

from weatherapp.weather.openweather import OpenWeatherClient


async def get_weather_client() -> AsyncIterator[OpenWeatherClient]:
    """요청마다 새 클라이언트. 요청 간 공유 상태 없음."""
    async with httpx.AsyncClient() as http:
        yield OpenWeatherClient(client=http)
