# src/weatherapp/core/logging_config.py
from __future__ import annotations
import logging
import re

from weatherapp.core.settings import LOG_LEVEL

_APPID_RE = re.compile(r"(appid=)[^&]*")


def setup_logging(log_level: str | None = None) -> None:
    """루트 로거 설정. 여러 번 호출돼도 핸들러는 한 번만 붙인다."""
    level = getattr(logging, (log_level or LOG_LEVEL).upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # httpx 요청 로그에 API 키가 그대로 찍히므로 낮춘다
    logging.getLogger("httpx").setLevel(logging.WARNING)


def mask_appid(url: str) -> str:
    """로그용 URL에서 appid 값을 가린다."""
    return _APPID_RE.sub(r"\1***", url)
