# src/weatherapp/weather/types.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Tuple

DT_TXT_FORMAT = "%Y-%m-%d %H:%M:%S"


# ===== JSON 필드 리더 (타입이 안 맞으면 None) =====
def _as_dict(value: Any) -> Dict[str, Any] | None:
    return value if isinstance(value, dict) else None


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _as_float(value: Any) -> float | None:
    # bool은 int의 하위 타입이라 따로 걸러야 함
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _as_timestamp(value: Any) -> datetime | None:
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value, DT_TXT_FORMAT)
    except ValueError:
        return None


@dataclass(frozen=True)
class Main:
    temp: float | None = None
    humidity: int | None = None

    @classmethod
    def from_json(cls, raw: Any) -> Main | None:
        d = _as_dict(raw)
        if d is None:
            return None
        return cls(temp=_as_float(d.get("temp")), humidity=_as_int(d.get("humidity")))


@dataclass(frozen=True)
class WeatherDescriptor:
    description: str | None = None
    icon: str | None = None

    @classmethod
    def from_json(cls, raw: Any) -> WeatherDescriptor | None:
        d = _as_dict(raw)
        if d is None:
            return None
        return cls(description=_as_str(d.get("description")), icon=_as_str(d.get("icon")))


def _descriptors(raw: Any) -> Tuple[WeatherDescriptor, ...] | None:
    """`weather` 배열. 배열이 아니면 None, 원소 중 객체가 아닌 것은 버린다."""
    if not isinstance(raw, list):
        return None
    items = (WeatherDescriptor.from_json(x) for x in raw)
    return tuple(x for x in items if x is not None)


@dataclass(frozen=True)
class CurrentWeather:
    """`/data/2.5/weather` 응답."""
    name: str | None = None
    main: Main | None = None
    weather: Tuple[WeatherDescriptor, ...] | None = None

    @property
    def primary(self) -> WeatherDescriptor | None:
        return self.weather[0] if self.weather else None

    @classmethod
    def from_json(cls, raw: Any) -> CurrentWeather:
        d = _as_dict(raw) or {}
        return cls(
            name=_as_str(d.get("name")),
            main=Main.from_json(d.get("main")),
            weather=_descriptors(d.get("weather")),
        )


@dataclass(frozen=True)
class ForecastEntry:
    """3시간 단위 예보 슬롯 하나. timestamp는 `dt_txt` 그대로 (naive)."""
    timestamp: datetime | None = None
    main: Main | None = None
    weather: Tuple[WeatherDescriptor, ...] | None = None

    @property
    def primary(self) -> WeatherDescriptor | None:
        return self.weather[0] if self.weather else None

    @classmethod
    def from_json(cls, raw: Any) -> ForecastEntry | None:
        d = _as_dict(raw)
        if d is None:
            return None
        return cls(
            timestamp=_as_timestamp(d.get("dt_txt")),
            main=Main.from_json(d.get("main")),
            weather=_descriptors(d.get("weather")),
        )


@dataclass(frozen=True)
class CityInfo:
    name: str | None = None
    country: str | None = None

    @classmethod
    def from_json(cls, raw: Any) -> CityInfo | None:
        d = _as_dict(raw)
        if d is None:
            return None
        return cls(name=_as_str(d.get("name")), country=_as_str(d.get("country")))


@dataclass(frozen=True)
class Forecast:
    """`/data/2.5/forecast` 응답. entries는 JSON `list` (시간 오름차순)."""
    entries: Tuple[ForecastEntry, ...] | None = None
    city: CityInfo | None = None

    @classmethod
    def from_json(cls, raw: Any) -> Forecast:
        d = _as_dict(raw) or {}
        items = d.get("list")
        entries = None
        if isinstance(items, list):
            parsed = (ForecastEntry.from_json(x) for x in items)
            entries = tuple(x for x in parsed if x is not None)
        return cls(entries=entries, city=CityInfo.from_json(d.get("city")))


@dataclass(frozen=True)
class DayGroup:
    day: date
    entries: Tuple[ForecastEntry, ...]


@dataclass(frozen=True)
class NotFound:
    """프로바이더가 2xx가 아닌 응답을 준 경우. status_code는 로그용."""
    status_code: int | None = None


@dataclass(frozen=True)
class WeatherAndForecast:
    current: CurrentWeather
    forecast: Forecast
