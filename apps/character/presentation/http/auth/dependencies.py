"""Auth Dependencies.

FastAPI Depends용 인증/인가 의존성입니다.
"""

from __future__ import annotations

from typing import Annotated, Callable

from fastapi import Depends, Header

from apps.character.application.auth.dto import UserProfile
from apps.character.application.auth.services import (
    BearerAuthenticationStrategy,
    PermissionGate,
)
from apps.character.domain.enums import PermissionKey
from apps.character.setup.dependencies import (
    get_authentication_strategy,
    get_permission_gate,
)


def get_current_user(
    strategy: Annotated[BearerAuthenticationStrategy, Depends(get_authentication_strategy)],
    authorization: Annotated[str | None, Header()] = None,
) -> UserProfile:
    """현재 인증된 사용자 조회.

    Raises:
        AuthenticationFailure: 헤더 없음, 형식 오류, 토큰 검증 실패
    """
    return strategy.authenticate(authorization)


def require_permissions(*keys: PermissionKey) -> Callable[..., UserProfile]:
    """인증 후 필요한 권한을 모두 가졌는지 확인하는 의존성을 생성합니다.

    Example:
        @router.get("/me")
        async def me(user: Annotated[UserProfile, Depends(require_permissions(PermissionKey.VIEW_OWN_USER))]):
            ...
    """
    required = frozenset(keys)

    def dependency(
        user: Annotated[UserProfile, Depends(get_current_user)],
        gate: Annotated[PermissionGate, Depends(get_permission_gate)],
    ) -> UserProfile:
        gate.ensure(user, required)
        return user

    return dependency
