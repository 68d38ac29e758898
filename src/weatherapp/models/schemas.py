# src/weatherapp/models/schemas.py
from __future__ import annotations
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from weatherapp.weather.presenter import DayView
from weatherapp.weather.types import WeatherAndForecast


# ===== Request =====
class CityQuery(BaseModel):
    city: str = Field(..., description="도시 이름 (그대로 q= 에 들어감)")

    @field_validator("city")
    @classmethod
    def _not_empty(cls, v: str) -> str:
        # 빈 문자열만 거른다. 공백뿐인 값은 그대로 프로바이더로
        if not v:
            raise ValueError("city must not be empty")
        return v


# ===== Response =====
# weather.types / presenter 의 dataclass 를 속성으로 그대로 읽는다
class _Out(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class MainOut(_Out):
    temp: Optional[float] = None
    humidity: Optional[int] = None


class WeatherOut(_Out):
    description: Optional[str] = None
    icon: Optional[str] = None


class CurrentOut(_Out):
    name: Optional[str] = None
    main: Optional[MainOut] = None
    weather: Optional[List[WeatherOut]] = None


class EntryOut(_Out):
    timestamp: Optional[datetime] = Field(None, serialization_alias="dt_txt")
    main: Optional[MainOut] = None
    weather: Optional[List[WeatherOut]] = None


class CityOut(_Out):
    name: Optional[str] = None
    country: Optional[str] = None


class ForecastOut(_Out):
    entries: Optional[List[EntryOut]] = Field(None, serialization_alias="list")
    city: Optional[CityOut] = None


class DayEntryOut(_Out):
    time: str
    temperature: str
    description: Optional[str] = None
    icon_url: Optional[str] = None


class DayOut(_Out):
    day: date
    heading: str
    entries: List[DayEntryOut]


class WeatherResponse(_Out):
    current: CurrentOut
    forecast: ForecastOut
    days: List[DayOut]


def build_weather_response(result: WeatherAndForecast, days: List[DayView]) -> WeatherResponse:
    return WeatherResponse.model_validate(
        {"current": result.current, "forecast": result.forecast, "days": days},
        from_attributes=True,
    )
