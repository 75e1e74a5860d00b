"""Auth HTTP Controller.

로그인(토큰 발급)과 현재 사용자 조회 엔드포인트.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from apps.character.application.auth.commands import LoginCommand
from apps.character.application.auth.dto import Credential, UserProfile
from apps.character.domain.enums import PermissionKey
from apps.character.presentation.http.auth import require_permissions
from apps.character.presentation.http.schemas import (
    LoginRequest,
    TokenResponse,
    UserProfileResponse,
)
from apps.character.setup.dependencies import get_login_command

router = APIRouter(prefix="/characters", tags=["auth"])


@router.post("/login", response_model=TokenResponse, summary="로그인")
async def login(
    request: LoginRequest,
    command: Annotated[LoginCommand, Depends(get_login_command)],
) -> TokenResponse:
    """ID/비밀번호로 액세스 토큰을 발급합니다."""
    issued = await command.execute(Credential(id=request.id, password=request.password))
    return TokenResponse(token=issued.token, expires_at=issued.expires_at)


@router.get("/me", response_model=UserProfileResponse, summary="내 정보 조회")
async def me(
    user: Annotated[UserProfile, Depends(require_permissions(PermissionKey.VIEW_OWN_USER))],
) -> UserProfileResponse:
    """인증된 사용자의 프로필을 반환합니다."""
    return UserProfileResponse(id=user.id, permissions=sorted(user.permissions))
