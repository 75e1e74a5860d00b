"""API v1 Router."""

from fastapi import APIRouter

from apps.character.presentation.http.controllers.auth import router as auth_router
from apps.character.presentation.http.controllers.characters import (
    router as characters_router,
)
from apps.character.presentation.http.controllers.equipment import (
    router as equipment_router,
)

router = APIRouter()

# /characters/login, /characters/me 는 /characters/{character_id} 보다 먼저 등록
router.include_router(auth_router)
router.include_router(characters_router)
router.include_router(equipment_router)
