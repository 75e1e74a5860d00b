"""Schema bootstrap job.

Alembic 없이 로컬/테스트 환경에서 스키마와 테이블을 생성합니다.

Usage:
    python -m apps.character.jobs.init_db
"""

import asyncio
import logging

from sqlalchemy import text

from apps.character.infrastructure.persistence_postgres import mapper_registry
from apps.character.setup.config import get_settings
from apps.character.setup.database import dispose_engine, get_engine
from apps.character.setup.logging import configure_logging

logger = logging.getLogger(__name__)


async def init_db() -> None:
    """character 스키마와 모든 테이블을 생성합니다 (이미 있으면 유지)."""
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.execute(text("CREATE SCHEMA IF NOT EXISTS character"))
        await conn.run_sync(mapper_registry.metadata.create_all)

    logger.info(
        "Character schema initialized",
        extra={"tables": sorted(mapper_registry.metadata.tables)},
    )


async def main() -> None:
    settings = get_settings()
    configure_logging(
        service_name=f"{settings.service_name}-init-db",
        service_version=settings.service_version,
        environment=settings.environment,
        log_level=settings.log_level,
        json_format=settings.log_format == "json",
    )
    try:
        await init_db()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
