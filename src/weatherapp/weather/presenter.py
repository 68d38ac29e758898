# src/weatherapp/weather/presenter.py
from __future__ import annotations
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Tuple

from weatherapp.core.urls import ow_icon_url
from weatherapp.weather.types import CurrentWeather, DayGroup, Forecast, ForecastEntry

# date.weekday() 순서 (월=0)
PL_WEEKDAYS = (
    "poniedziałek", "wtorek", "środa", "czwartek", "piątek", "sobota", "niedziela",
)


def group_by_day(entries: Optional[Iterable[ForecastEntry]]) -> List[DayGroup]:
    """
    예보 슬롯을 날짜별로 묶는다.
      - 키: timestamp의 날짜 부분 (시각은 버림)
      - 그룹 순서: 날짜 오름차순
      - 그룹 내부: 입력 순서 유지 (재정렬하지 않음)
    timestamp가 없는 슬롯은 어느 날에도 넣을 수 없어 제외.
    """
    if not entries:
        return []

    buckets: Dict[date, List[ForecastEntry]] = {}
    for entry in entries:
        if entry.timestamp is None:
            continue
        buckets.setdefault(entry.timestamp.date(), []).append(entry)

    return [DayGroup(day=day, entries=tuple(buckets[day])) for day in sorted(buckets)]


# ===== 표시용 포맷 =====
def format_day(day: date) -> str:
    """ex) 2023-11-01 -> 'środa, 01.11.2023'"""
    return f"{PL_WEEKDAYS[day.weekday()]}, {day:%d.%m.%Y}"


def format_time(ts: datetime) -> str:
    return ts.strftime("%H:%M")


def format_temperature(temp: float | None) -> str:
    """가장 가까운 정수로. .5는 0에서 먼 쪽으로 (20.5 -> 21, -2.5 -> -3)."""
    if temp is None:
        return ""
    rounded = int(math.floor(abs(temp) + 0.5))
    if rounded == 0:
        return "0"
    return f"-{rounded}" if temp < 0 else str(rounded)


@dataclass(frozen=True)
class CurrentView:
    name: str | None
    temperature: str
    humidity: int | None
    description: str | None
    icon_url: str | None


@dataclass(frozen=True)
class EntryView:
    time: str
    temperature: str
    description: str | None
    icon_url: str | None


@dataclass(frozen=True)
class DayView:
    day: date
    heading: str
    entries: Tuple[EntryView, ...]


def present_current(current: CurrentWeather) -> CurrentView | None:
    """main 블록과 weather 설명이 모두 있어야 카드를 보여준다."""
    primary = current.primary
    if current.main is None or primary is None:
        return None
    return CurrentView(
        name=current.name,
        temperature=format_temperature(current.main.temp),
        humidity=current.main.humidity,
        description=primary.description,
        icon_url=ow_icon_url(primary.icon),
    )


def _present_entry(entry: ForecastEntry) -> EntryView:
    primary = entry.primary
    return EntryView(
        time=format_time(entry.timestamp) if entry.timestamp else "",
        temperature=format_temperature(entry.main.temp if entry.main else None),
        description=primary.description if primary else None,
        icon_url=ow_icon_url(primary.icon) if primary else None,
    )


def present_forecast(forecast: Forecast) -> List[DayView]:
    """예보 목록이 없으면 빈 리스트 -> 화면에 예보 섹션 없음."""
    return [
        DayView(
            day=group.day,
            heading=format_day(group.day),
            entries=tuple(_present_entry(e) for e in group.entries),
        )
        for group in group_by_day(forecast.entries)
    ]
