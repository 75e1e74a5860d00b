"""Observability - OpenTelemetry Tracing."""

from apps.character.infrastructure.observability.tracing import (
    instrument_fastapi,
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)

__all__ = [
    "instrument_fastapi",
    "instrument_sqlalchemy",
    "setup_tracing",
    "shutdown_tracing",
]
