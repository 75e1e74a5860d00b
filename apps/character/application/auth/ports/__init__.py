"""Auth Ports."""

from apps.character.application.auth.ports.password_hasher import PasswordHasher
from apps.character.application.auth.ports.token_issuer import TokenIssuer

__all__ = ["PasswordHasher", "TokenIssuer"]
