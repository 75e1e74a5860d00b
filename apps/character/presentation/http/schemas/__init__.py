"""HTTP Schemas."""

from apps.character.presentation.http.schemas.auth import (
    LoginRequest,
    TokenResponse,
    UserProfileResponse,
)
from apps.character.presentation.http.schemas.character import (
    CharacterCreateRequest,
    CharacterPatchRequest,
    CharacterPutRequest,
    CharacterResponse,
    CountResponse,
)
from apps.character.presentation.http.schemas.equipment import (
    ArmorResponse,
    EquipmentRequest,
    LoadoutResponse,
    SkillRequest,
    SkillResponse,
    WeaponResponse,
)

__all__ = [
    "ArmorResponse",
    "CharacterCreateRequest",
    "CharacterPatchRequest",
    "CharacterPutRequest",
    "CharacterResponse",
    "CountResponse",
    "EquipmentRequest",
    "LoadoutResponse",
    "LoginRequest",
    "SkillRequest",
    "SkillResponse",
    "TokenResponse",
    "UserProfileResponse",
    "WeaponResponse",
]
