"""Auth Services."""

from apps.character.application.auth.services.authentication_strategy import (
    BearerAuthenticationStrategy,
)
from apps.character.application.auth.services.permission_gate import PermissionGate

__all__ = ["BearerAuthenticationStrategy", "PermissionGate"]
