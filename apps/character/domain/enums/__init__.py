"""Domain Enums."""

from apps.character.domain.enums.character import EquipmentSlot
from apps.character.domain.enums.permission import DEFAULT_PERMISSIONS, PermissionKey

__all__ = ["DEFAULT_PERMISSIONS", "EquipmentSlot", "PermissionKey"]
