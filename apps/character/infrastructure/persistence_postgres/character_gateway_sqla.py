"""SQLAlchemy Character Gateway Implementation."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from apps.character.application.character.dto import CharacterQuery
from apps.character.application.character.ports import CharacterGateway
from apps.character.application.common.exceptions import PersistenceError
from apps.character.domain.entities import Character
from apps.character.domain.exceptions import ConcurrentUpdateError, DuplicateIdentifierError
from apps.character.infrastructure.persistence_postgres.tables import characters_table

logger = logging.getLogger(__name__)


def _apply_filters(stmt: Select, query: CharacterQuery) -> Select:
    if query.name is not None:
        stmt = stmt.where(characters_table.c.name == query.name)
    if query.min_level is not None:
        stmt = stmt.where(characters_table.c.level >= query.min_level)
    return stmt


class SqlaCharacterGateway(CharacterGateway):
    """SQLAlchemy 기반 캐릭터 게이트웨이.

    드라이버 오류는 PersistenceError로 감싸서 전파합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
        """
        self._session = session

    async def exists(self, character_id: str) -> bool:
        try:
            result = await self._session.execute(
                select(characters_table.c.id).where(characters_table.c.id == character_id)
            )
        except SQLAlchemyError as e:
            raise PersistenceError("exists", str(e)) from e
        return result.scalar_one_or_none() is not None

    async def add(self, character: Character) -> None:
        self._session.add(character)
        try:
            await self._session.flush()
        except IntegrityError as e:
            # 동시 생성으로 exists 검사를 통과한 경우 PK 충돌로 감지
            raise DuplicateIdentifierError(character.id) from e
        except SQLAlchemyError as e:
            raise PersistenceError("add", str(e)) from e

    async def get_by_id(self, character_id: str) -> Character | None:
        try:
            result = await self._session.execute(
                select(Character).where(characters_table.c.id == character_id)
            )
        except SQLAlchemyError as e:
            raise PersistenceError("get_by_id", str(e)) from e
        return result.scalar_one_or_none()

    async def list(self, query: CharacterQuery) -> Sequence[Character]:
        stmt = _apply_filters(select(Character), query).order_by(characters_table.c.id)
        if query.offset:
            stmt = stmt.offset(query.offset)
        if query.limit is not None:
            stmt = stmt.limit(query.limit)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError("list", str(e)) from e
        return result.scalars().all()

    async def count(self, query: CharacterQuery) -> int:
        stmt = _apply_filters(select(func.count()).select_from(characters_table), query)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError("count", str(e)) from e
        return result.scalar_one()

    async def save(self, character: Character) -> None:
        """변경 사항을 flush합니다.

        매퍼의 version_id_col 설정으로 버전 조건부 UPDATE가 실행됩니다.
        """
        expected = character.version
        try:
            await self._session.flush()
        except StaleDataError as e:
            logger.warning(
                "Concurrent character update detected",
                extra={"character_id": character.id, "expected_version": expected},
            )
            raise ConcurrentUpdateError(character.id, expected) from e
        except SQLAlchemyError as e:
            raise PersistenceError("save", str(e)) from e

    async def update_matching(self, query: CharacterQuery, changes: dict[str, Any]) -> int:
        stmt = _apply_filters(
            update(characters_table).values(
                **changes,
                version=characters_table.c.version + 1,
                updated_at=func.now(),
            ),
            query,
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError("update_matching", str(e)) from e
        return result.rowcount

    async def delete(self, character_id: str) -> bool:
        try:
            result = await self._session.execute(
                delete(characters_table).where(characters_table.c.id == character_id)
            )
        except SQLAlchemyError as e:
            raise PersistenceError("delete", str(e)) from e
        return result.rowcount > 0
