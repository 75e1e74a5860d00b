"""OpenTelemetry Tracing - Character Sheet Service.

패키지가 설치되어 있지 않으면 경고만 남기고 비활성화됩니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

    from apps.character.setup.config import Settings

logger = logging.getLogger(__name__)

_tracer_provider: Any = None


def setup_tracing(settings: "Settings") -> bool:
    """OpenTelemetry 트레이싱 설정.

    Args:
        settings: 서비스 설정 (otel_* 필드 사용)

    Returns:
        설정 성공 여부
    """
    global _tracer_provider

    if not settings.otel_enabled:
        logger.info("OpenTelemetry tracing disabled (CHARACTER_OTEL_ENABLED=false)")
        return False

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
        from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
    except ImportError as e:
        logger.warning(f"OpenTelemetry not available: {e}")
        return False

    resource = Resource.create(
        {
            "service.name": settings.service_name,
            "service.version": settings.service_version,
            "deployment.environment": settings.environment,
        }
    )
    provider = TracerProvider(
        resource=resource,
        sampler=TraceIdRatioBased(settings.otel_sampling_rate),
    )
    provider.add_span_processor(
        BatchSpanProcessor(
            OTLPSpanExporter(endpoint=settings.otel_exporter_endpoint, insecure=True),
            max_queue_size=2048,
            max_export_batch_size=512,
            schedule_delay_millis=1000,
        )
    )
    trace.set_tracer_provider(provider)
    _tracer_provider = provider

    logger.info(
        "OpenTelemetry tracing configured",
        extra={
            "service": settings.service_name,
            "endpoint": settings.otel_exporter_endpoint,
            "sampling_rate": settings.otel_sampling_rate,
        },
    )
    return True


def instrument_fastapi(app: "FastAPI") -> None:
    """FastAPI 자동 계측."""
    if _tracer_provider is None:
        return

    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
    except ImportError:
        logger.warning("FastAPIInstrumentor not available")
        return

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ready")
    logger.info("FastAPI instrumentation enabled")


def instrument_sqlalchemy(engine: "AsyncEngine") -> None:
    """SQLAlchemy 자동 계측 (쿼리 추적)."""
    if _tracer_provider is None:
        return

    try:
        from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
    except ImportError:
        logger.warning("SQLAlchemyInstrumentor not available")
        return

    SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
    logger.info("SQLAlchemy instrumentation enabled")


def shutdown_tracing() -> None:
    """남은 span을 내보내고 TracerProvider를 종료합니다."""
    global _tracer_provider

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
