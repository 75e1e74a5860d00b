"""Equipment Gateway Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from apps.character.domain.entities import Armor, Skill, Weapon

T = TypeVar("T", Weapon, Armor, Skill)


class EquipmentGateway(ABC, Generic[T]):
    """슬롯(무기/방어구/스킬)별 영속성 포트.

    캐릭터 ID를 외래 키로 사용하며 슬롯당 최대 1건입니다.
    """

    @abstractmethod
    async def get(self, character_id: str) -> T | None:
        """캐릭터의 현재 장비를 조회합니다."""
        ...

    @abstractmethod
    async def add(self, item: T) -> None:
        """장비 레코드를 추가합니다."""
        ...

    @abstractmethod
    async def delete(self, character_id: str) -> bool:
        """캐릭터의 장비를 삭제합니다. 없으면 아무 것도 하지 않고 False."""
        ...


WeaponGateway = EquipmentGateway[Weapon]
ArmorGateway = EquipmentGateway[Armor]
SkillGateway = EquipmentGateway[Skill]
