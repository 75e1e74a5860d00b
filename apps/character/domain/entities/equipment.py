"""Equipment Entities.

캐릭터에 장착되는 무기/방어구/스킬 엔티티입니다.
캐릭터당 슬롯별로 최대 1개만 존재합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(eq=False)
class Equipment:
    """스탯 보정치를 가진 장비 (무기/방어구 공통).

    Attributes:
        id: 장비 레코드 ID
        character_id: 소유 캐릭터 ID
        name: 장비 이름
        attack: 공격력 보정치 (음수 가능)
        defence: 방어력 보정치 (음수 가능)
    """

    id: UUID
    character_id: str
    name: str
    attack: int = 0
    defence: int = 0
    created_at: datetime | None = None

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.id == other.id


@dataclass(eq=False)
class Weapon(Equipment):
    """무기."""


@dataclass(eq=False)
class Armor(Equipment):
    """방어구."""


@dataclass(eq=False)
class Skill:
    """스킬.

    스탯에 영향을 주지 않으며, 갱신 시 통째로 교체됩니다.
    """

    id: UUID
    character_id: str
    name: str
    description: str | None = None
    mana_cost: int = 0
    created_at: datetime | None = None

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Skill):
            return False
        return self.id == other.id
