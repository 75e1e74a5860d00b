"""Auth DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field

from apps.character.domain.enums import PermissionKey


@dataclass(frozen=True, slots=True)
class Credential:
    """로그인 요청 (저장되지 않음)."""

    id: str
    password: str


@dataclass(frozen=True, slots=True)
class UserProfile:
    """토큰 클레임에서 복원되는 사용자 프로필.

    Attributes:
        id: 캐릭터 ID (토큰 sub)
        permissions: 부여된 권한 집합
        jti: 토큰 ID (검증된 토큰에서만 채워짐)
        expires_at: 만료 시각 Unix timestamp
    """

    id: str
    permissions: frozenset[PermissionKey] = field(default_factory=frozenset)
    jti: str | None = None
    expires_at: int | None = None


@dataclass(frozen=True, slots=True)
class IssuedToken:
    """발급된 액세스 토큰."""

    token: str
    jti: str
    expires_at: int
