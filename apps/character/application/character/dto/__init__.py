"""Character DTOs."""

from apps.character.application.character.dto.character import (
    CharacterChanges,
    CharacterQuery,
    CharacterReplacement,
    CharacterView,
    NewCharacter,
)
from apps.character.application.character.dto.equipment import (
    EquipmentSpec,
    Loadout,
    SkillSpec,
)

__all__ = [
    "CharacterChanges",
    "CharacterQuery",
    "CharacterReplacement",
    "CharacterView",
    "EquipmentSpec",
    "Loadout",
    "NewCharacter",
    "SkillSpec",
]
