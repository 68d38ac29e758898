# src/weatherapp/api/weather.py
from __future__ import annotations
import logging
from pathlib import Path

import httpx
from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from weatherapp.api.deps import get_weather_client
from weatherapp.models.schemas import CityQuery, WeatherResponse, build_weather_response
from weatherapp.weather.openweather import OpenWeatherClient
from weatherapp.weather.presenter import present_current, present_forecast
from weatherapp.weather.types import NotFound

logger = logging.getLogger(__name__)

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

EMPTY_CITY_MESSAGE = "Wpisz nazwę miasta."
PROVIDER_ERROR_MESSAGE = "Serwis pogodowy jest chwilowo niedostępny."


def not_found_message(city: str) -> str:
    return f'Nie znaleziono miasta "{city}".'


def _render(request: Request, *, status_code: int = status.HTTP_200_OK, **context) -> HTMLResponse:
    ctx = {"city": "", "error": None, "current": None, "days": []}
    ctx.update(context)
    return templates.TemplateResponse(request, "index.html", ctx, status_code=status_code)


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return _render(request)


@router.post("/", response_class=HTMLResponse)
async def search(
    request: Request,
    city: str = Form(""),
    weather: OpenWeatherClient = Depends(get_weather_client),
):
    """
    검색 폼 처리
    - 현재 날씨/예보 둘 다 있어야 화면 구성 (하나라도 없으면 에러 메시지만)
    """
    try:
        CityQuery(city=city)
    except ValidationError:
        return _render(request, status_code=422, error=EMPTY_CITY_MESSAGE)

    try:
        result = await weather.fetch_weather_and_forecast(city)
    except (httpx.HTTPError, ValueError) as e:
        logger.error("OpenWeather 요청 실패 city=%r: %s", city, e)
        return _render(request, status_code=status.HTTP_502_BAD_GATEWAY, city=city, error=PROVIDER_ERROR_MESSAGE)

    if isinstance(result, NotFound):
        return _render(request, city=city, error=not_found_message(city))

    return _render(
        request,
        city=city,
        current=present_current(result.current),
        days=present_forecast(result.forecast),
    )


@router.get("/api/weather", response_model=WeatherResponse)
async def weather_json(
    city: str = Query(""),
    weather: OpenWeatherClient = Depends(get_weather_client),
):
    """HTML 화면과 같은 데이터를 JSON으로."""
    try:
        query = CityQuery(city=city)
    except ValidationError:
        raise HTTPException(status_code=422, detail=EMPTY_CITY_MESSAGE)

    try:
        result = await weather.fetch_weather_and_forecast(query.city)
    except (httpx.HTTPError, ValueError) as e:
        logger.error("OpenWeather 요청 실패 city=%r: %s", query.city, e)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=PROVIDER_ERROR_MESSAGE)

    if isinstance(result, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found_message(query.city))

    return build_weather_response(result, present_forecast(result.forecast))
