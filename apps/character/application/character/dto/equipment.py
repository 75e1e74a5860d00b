"""Equipment DTOs."""

from __future__ import annotations

from dataclasses import dataclass

from apps.character.domain.entities import Armor, Skill, Weapon


@dataclass(frozen=True, slots=True)
class EquipmentSpec:
    """장착할 무기/방어구 정보."""

    name: str
    attack: int = 0
    defence: int = 0


@dataclass(frozen=True, slots=True)
class SkillSpec:
    """교체할 스킬 정보."""

    name: str
    description: str | None = None
    mana_cost: int = 0


@dataclass(frozen=True, slots=True)
class Loadout:
    """캐릭터 장비 현황. 비어 있는 슬롯은 None입니다."""

    weapon: Weapon | None = None
    armor: Armor | None = None
    skill: Skill | None = None
