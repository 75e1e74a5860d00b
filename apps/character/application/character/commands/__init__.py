"""Character commands."""

from apps.character.application.character.commands.create_character import (
    CreateCharacterCommand,
)
from apps.character.application.character.commands.delete_character import (
    DeleteCharacterCommand,
)
from apps.character.application.character.commands.equip import (
    EquipArmorCommand,
    EquipWeaponCommand,
    UnequipArmorCommand,
    UnequipWeaponCommand,
)
from apps.character.application.character.commands.level_up import LevelUpCommand
from apps.character.application.character.commands.skill import (
    DeleteSkillCommand,
    UpdateSkillCommand,
)
from apps.character.application.character.commands.update_character import (
    ReplaceCharacterCommand,
    UpdateAllCharactersCommand,
    UpdateCharacterCommand,
)

__all__ = [
    "CreateCharacterCommand",
    "DeleteCharacterCommand",
    "DeleteSkillCommand",
    "EquipArmorCommand",
    "EquipWeaponCommand",
    "LevelUpCommand",
    "ReplaceCharacterCommand",
    "UnequipArmorCommand",
    "UnequipWeaponCommand",
    "UpdateAllCharactersCommand",
    "UpdateCharacterCommand",
    "UpdateSkillCommand",
]
