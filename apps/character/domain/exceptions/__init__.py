"""Domain Exceptions."""

from apps.character.domain.exceptions.auth import InvalidTokenError, TokenExpiredError
from apps.character.domain.exceptions.base import DomainError
from apps.character.domain.exceptions.character import (
    CharacterNotFoundError,
    ConcurrentUpdateError,
    DuplicateIdentifierError,
    NotFoundError,
)

__all__ = [
    "CharacterNotFoundError",
    "ConcurrentUpdateError",
    "DomainError",
    "DuplicateIdentifierError",
    "InvalidTokenError",
    "NotFoundError",
    "TokenExpiredError",
]
