# src/weatherapp/weather/openweather.py
from __future__ import annotations
import asyncio
import logging
from typing import Any, Callable, TypeVar

import httpx

from weatherapp.core.logging_config import mask_appid
from weatherapp.core.settings import OPENWEATHER_API_KEY, OPENWEATHER_LANG, OPENWEATHER_UNITS
from weatherapp.core.urls import ow_url
from weatherapp.weather.types import CurrentWeather, Forecast, NotFound, WeatherAndForecast

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OpenWeatherClient:
    """
    OpenWeather 현재 날씨 + 5일/3시간 예보. URL은 core.urls 모듈에서 주입.

    - 2xx가 아니면 NotFound (재시도/캐시 없음)
    - 네트워크 오류(httpx.TransportError)는 그대로 올려보낸다
    """
    def __init__(
        self,
        api_key: str | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
    ) -> None:
        self.api_key = api_key or OPENWEATHER_API_KEY
        if not self.api_key:
            raise RuntimeError("OPENWEATHER_API_KEY missing")
        self._client = client
        self.base_url = base_url

    def build_url(self, path_key: str, city: str) -> str:
        # city는 인코딩 없이 그대로 치환 (필요한 인코딩은 httpx가 처리)
        url = ow_url(path_key, base=self.base_url)
        return f"{url}?q={city}&appid={self.api_key}&units={OPENWEATHER_UNITS}&lang={OPENWEATHER_LANG}"

    async def _send(self, url: str) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url)
        async with httpx.AsyncClient() as client:
            return await client.get(url)

    async def _get(self, path_key: str, city: str, parse: Callable[[Any], T]) -> T | NotFound:
        url = self.build_url(path_key, city)
        logger.debug("GET %s", mask_appid(url))

        try:
            r = await self._send(url)
        except httpx.InvalidURL as e:
            # 제어 문자/너무 긴 city -> 요청 자체를 만들 수 없음. 그런 도시는 없음으로 처리
            logger.info("OpenWeather %s for %r -> invalid URL: %s", path_key, city, e)
            return NotFound()
        if not r.is_success:
            logger.info("OpenWeather %s for %r -> %s", path_key, city, r.status_code)
            return NotFound(status_code=r.status_code)

        return parse(r.json())

    async def fetch_current(self, city: str) -> CurrentWeather | NotFound:
        return await self._get("current", city, CurrentWeather.from_json)

    async def fetch_forecast(self, city: str) -> Forecast | NotFound:
        return await self._get("forecast3h", city, Forecast.from_json)

    async def fetch_weather_and_forecast(self, city: str) -> WeatherAndForecast | NotFound:
        """
        두 요청을 동시에 보내고 둘 다 끝난 뒤 합친다. 하나라도 NotFound면 전체가 NotFound.
        한쪽이 예외로 끝나면 나머지 요청은 취소하고 정리가 끝난 뒤 예외를 올린다.
        """
        tasks = [
            asyncio.ensure_future(self.fetch_current(city)),
            asyncio.ensure_future(self.fetch_forecast(city)),
        ]
        try:
            current, forecast = await asyncio.gather(*tasks)
        except BaseException:
            for t in tasks:
                t.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        if isinstance(current, NotFound):
            return current
        if isinstance(forecast, NotFound):
            return forecast
        return WeatherAndForecast(current=current, forecast=forecast)
