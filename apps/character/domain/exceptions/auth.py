"""Token 도메인 예외."""

from apps.character.domain.exceptions.base import DomainError


class InvalidTokenError(DomainError):
    """서명이 잘못되었거나 형식이 올바르지 않은 토큰."""

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)


class TokenExpiredError(InvalidTokenError):
    """만료된 토큰."""

    def __init__(self) -> None:
        super().__init__("Token has expired")
