"""PermissionGate.

작업에 선언된 필수 권한과 사용자 권한 집합을 비교합니다 (AND 의미론).
"""

from __future__ import annotations

from collections.abc import Iterable

from apps.character.application.auth.dto import UserProfile
from apps.character.application.auth.exceptions import ForbiddenError
from apps.character.domain.enums import PermissionKey


class PermissionGate:
    """권한 검사기. 순수 함수형이며 I/O가 없습니다."""

    def authorize(self, profile: UserProfile, required: Iterable[PermissionKey]) -> bool:
        """사용자 권한이 필수 권한의 상위집합이면 True."""
        return set(required) <= set(profile.permissions)

    def ensure(self, profile: UserProfile, required: Iterable[PermissionKey]) -> None:
        """권한이 부족하면 ForbiddenError를 던집니다."""
        required = set(required)
        if not self.authorize(profile, required):
            missing = required - set(profile.permissions)
            raise ForbiddenError(key.value for key in missing)
