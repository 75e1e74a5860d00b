"""SQLAlchemy implementation of transaction manager."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.character.application.common.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class SqlaTransactionManager:
    """트랜잭션 관리자 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[None]:
        """블록 종료 시 커밋, 예외 발생 시 롤백 후 재전파합니다."""
        try:
            yield
        except Exception:
            await self.rollback()
            raise
        await self.commit()

    async def commit(self) -> None:
        """트랜잭션을 커밋합니다."""
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            logger.error("Commit failed", extra={"error": str(e)})
            await self._session.rollback()
            raise PersistenceError("commit", str(e)) from e

    async def rollback(self) -> None:
        """트랜잭션을 롤백합니다."""
        await self._session.rollback()
