"""Character Sheet Service Main Entry Point.

분산 트레이싱 통합 (CHARACTER_OTEL_ENABLED=true):
- FastAPI 자동 계측 (HTTP 요청/응답)
- SQLAlchemy 자동 계측 (쿼리)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.character.infrastructure.observability import (
    instrument_fastapi,
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)
from apps.character.infrastructure.persistence_postgres import start_mappers
from apps.character.presentation.http.controllers import api_v1_router, health_router
from apps.character.presentation.http.errors import register_exception_handlers
from apps.character.setup.config import Settings, get_settings
from apps.character.setup.database import dispose_engine, get_engine
from apps.character.setup.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    logger.info("Starting Character API service")

    # ORM 매퍼 초기화 (Imperative Mapping)
    start_mappers()
    instrument_sqlalchemy(get_engine())

    yield

    # Cleanup
    logger.info("Shutting down Character API service")
    await dispose_engine()
    shutdown_tracing()


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 앱을 생성합니다."""
    settings = settings or get_settings()

    configure_logging(
        service_name=settings.service_name,
        service_version=settings.service_version,
        environment=settings.environment,
        log_level=settings.log_level,
        json_format=settings.log_format == "json",
    )

    app = FastAPI(
        title="Character API",
        description="RPG 캐릭터 시트 관리 서비스 (캐릭터, 장비, 스킬, 레벨업, JWT 인증)",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # OpenTelemetry FastAPI instrumentation
    if setup_tracing(settings):
        instrument_fastapi(app)

    register_exception_handlers(app)

    # Routers
    app.include_router(health_router)
    app.include_router(api_v1_router, prefix="/api/v1")

    return app


app = create_app()
