"""Character Domain Enums."""

from enum import Enum


class EquipmentSlot(str, Enum):
    """캐릭터 장비 슬롯."""

    WEAPON = "weapon"
    ARMOR = "armor"
    SKILL = "skill"
