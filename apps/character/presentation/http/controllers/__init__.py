"""HTTP Controllers."""

from apps.character.presentation.http.controllers.api_v1_router import router as api_v1_router
from apps.character.presentation.http.controllers.health import router as health_router

__all__ = ["api_v1_router", "health_router"]
