# src/weatherapp/core/urls.py
from __future__ import annotations

from weatherapp.core.settings import OPENWEATHER_BASE, OPENWEATHER_ICON_BASE

# 경로 상수 (도메인과 분리)
OPENWEATHER_PATHS = {
    # 현재 날씨
    "current": "/data/2.5/weather",
    # 무료 5일/3시간 예보
    "forecast3h": "/data/2.5/forecast",
}


def ow_url(path_key: str, *, base: str | None = None) -> str:
    """
    OpenWeather endpoint 빌더.
    ex) ow_url("forecast3h") -> "https://api.openweathermap.org/data/2.5/forecast"
        ow_url("current", base="http://localhost:8080") -> "http://localhost:8080/data/2.5/weather"
    """
    root = (base or OPENWEATHER_BASE).rstrip("/")
    return f"{root}{OPENWEATHER_PATHS[path_key]}"


def ow_icon_url(icon: str | None) -> str | None:
    """아이콘 코드가 없으면 이미지도 없음."""
    if not icon:
        return None
    return f"{OPENWEATHER_ICON_BASE}/{icon}@2x.png"
