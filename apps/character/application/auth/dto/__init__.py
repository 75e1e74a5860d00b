"""Auth DTOs."""

from apps.character.application.auth.dto.auth import Credential, IssuedToken, UserProfile

__all__ = ["Credential", "IssuedToken", "UserProfile"]
