"""Character Ports."""

from apps.character.application.character.ports.character_gateway import CharacterGateway
from apps.character.application.character.ports.equipment_gateway import (
    ArmorGateway,
    EquipmentGateway,
    SkillGateway,
    WeaponGateway,
)

__all__ = [
    "ArmorGateway",
    "CharacterGateway",
    "EquipmentGateway",
    "SkillGateway",
    "WeaponGateway",
]
