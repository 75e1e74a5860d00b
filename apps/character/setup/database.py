"""Database Setup."""

from functools import lru_cache
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from apps.character.setup.config import get_settings


@lru_cache
def get_engine() -> AsyncEngine:
    """SQLAlchemy 엔진 (프로세스당 1개)."""
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
    )


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """세션 팩토리."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """요청 단위 SQLAlchemy 세션.

    커밋은 TransactionManager가 담당하며, 여기서는 세션 종료만 보장합니다.
    """
    async with get_session_factory()() as session:
        yield session


async def dispose_engine() -> None:
    """커넥션 풀을 정리합니다."""
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
