"""Alembic Environment Configuration for Character Domain.

이 파일은 마이그레이션 실행 시 환경을 설정합니다.
- asyncpg 드라이버로 온라인 마이그레이션 실행
- CHARACTER_* 환경변수(Settings)에서 DB URL 로드
- autogenerate 지원 (mapper_registry.metadata 비교)

Usage:
    # 마이그레이션 생성
    cd migrations/character
    alembic revision --autogenerate -m "add new column"

    # 마이그레이션 실행
    alembic upgrade head

    # 롤백
    alembic downgrade -1
"""

import asyncio
import os
import sys
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool, text
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

# 프로젝트 루트를 path에 추가 (apps 패키지 import용)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
sys.path.insert(0, PROJECT_ROOT)

from apps.character.infrastructure.persistence_postgres import mapper_registry  # noqa: E402
from apps.character.setup.config import get_settings  # noqa: E402

# Alembic Config 객체
config = context.config

# 로깅 설정
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = mapper_registry.metadata


def get_url() -> str:
    """DB URL 반환."""
    return get_settings().database_url


def run_migrations_offline() -> None:
    """오프라인 모드에서 마이그레이션 실행.

    DB 연결 없이 SQL만 생성합니다.
    """
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        # character 스키마만 관리
        include_schemas=True,
        version_table_schema="character",
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        # character 스키마만 관리
        include_schemas=True,
        version_table_schema="character",
        # autogenerate 설정
        compare_type=True,
        compare_server_default=True,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """온라인 모드에서 마이그레이션 실행.

    실제 DB에 연결하여 마이그레이션을 실행합니다.
    """
    connectable = create_async_engine(get_url(), poolclass=pool.NullPool)

    async with connectable.connect() as connection:
        # version_table_schema 가 존재해야 alembic_version 테이블을 만들 수 있음
        await connection.execute(text("CREATE SCHEMA IF NOT EXISTS character"))
        await connection.commit()
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
