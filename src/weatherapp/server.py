# src/weatherapp/server.py
import os

import uvicorn
from fastapi import FastAPI

from weatherapp import __version__
from weatherapp.api import health, weather
from weatherapp.core.logging_config import setup_logging


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(title="Pogoda", version=__version__)

    # ============================================================
    # 📦 라우터 등록
    # ============================================================
    app.include_router(weather.router)
    app.include_router(health.router)

    return app


# ✅ 앱 인스턴스 생성
app = create_app()


def main() -> None:
    uvicorn.run(
        "weatherapp.server:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )
