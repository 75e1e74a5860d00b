"""Security adapters (JWT, bcrypt)."""

from apps.character.infrastructure.security.jwt_token_service import JwtTokenService
from apps.character.infrastructure.security.password_hasher_bcrypt import (
    BcryptPasswordHasher,
)

__all__ = ["BcryptPasswordHasher", "JwtTokenService"]
