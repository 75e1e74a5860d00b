"""Domain Entities."""

from apps.character.domain.entities.character import Character
from apps.character.domain.entities.equipment import Armor, Equipment, Skill, Weapon

__all__ = ["Armor", "Character", "Equipment", "Skill", "Weapon"]
