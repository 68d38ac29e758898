# src/weatherapp/core/settings.py
from __future__ import annotations
import os
from typing import Final

from dotenv import load_dotenv

# .env 파일에서 환경 변수 로드
load_dotenv()

OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY", "")

# 베이스 도메인은 .env로 덮어쓸 수 있게
OPENWEATHER_BASE: Final[str] = os.getenv("OPENWEATHER_BASE", "https://api.openweathermap.org")
OPENWEATHER_ICON_BASE: Final[str] = os.getenv("OPENWEATHER_ICON_BASE", "http://openweathermap.org/img/wn")

# 응답 단위/언어는 고정값
OPENWEATHER_UNITS: Final[str] = "metric"
OPENWEATHER_LANG: Final[str] = "pl"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
