"""HTTP auth dependencies."""

from apps.character.presentation.http.auth.dependencies import (
    get_current_user,
    require_permissions,
)

__all__ = ["get_current_user", "require_permissions"]
