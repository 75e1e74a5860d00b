"""SQLAlchemy Equipment Gateway Implementations.

무기/방어구/스킬 테이블은 같은 구조(character_id UNIQUE)를 가지므로
하나의 제네릭 구현을 슬롯별로 특수화합니다.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy import Table, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.character.application.character.ports import EquipmentGateway
from apps.character.application.common.exceptions import PersistenceError
from apps.character.domain.entities import Armor, Skill, Weapon
from apps.character.infrastructure.persistence_postgres.tables import (
    armors_table,
    skills_table,
    weapons_table,
)

T = TypeVar("T", Weapon, Armor, Skill)


class SqlaEquipmentGateway(EquipmentGateway[T], Generic[T]):
    """슬롯 테이블 하나에 대한 게이트웨이."""

    entity: type[T]
    table: Table

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, character_id: str) -> T | None:
        try:
            result = await self._session.execute(
                select(self.entity).where(self.table.c.character_id == character_id)
            )
        except SQLAlchemyError as e:
            raise PersistenceError(f"get_{self.table.name}", str(e)) from e
        return result.scalar_one_or_none()

    async def add(self, item: T) -> None:
        self._session.add(item)
        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(f"add_{self.table.name}", str(e)) from e

    async def delete(self, character_id: str) -> bool:
        # 세션에 로드된 객체도 함께 제거되도록 ORM DELETE를 사용
        stmt = (
            delete(self.entity)
            .where(self.table.c.character_id == character_id)
            .execution_options(synchronize_session="fetch")
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(f"delete_{self.table.name}", str(e)) from e
        return result.rowcount > 0


class SqlaWeaponGateway(SqlaEquipmentGateway[Weapon]):
    entity = Weapon
    table = weapons_table


class SqlaArmorGateway(SqlaEquipmentGateway[Armor]):
    entity = Armor
    table = armors_table


class SqlaSkillGateway(SqlaEquipmentGateway[Skill]):
    entity = Skill
    table = skills_table
