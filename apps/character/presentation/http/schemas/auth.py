"""Auth HTTP Schemas."""

from pydantic import BaseModel, Field

from apps.character.domain.enums import PermissionKey


class LoginRequest(BaseModel):
    """로그인 요청."""

    id: str = Field(..., min_length=1, description="캐릭터 ID")
    password: str = Field(..., min_length=1, description="비밀번호")


class TokenResponse(BaseModel):
    """액세스 토큰 응답."""

    token: str
    token_type: str = "bearer"
    expires_at: int = Field(..., description="만료 시각 (Unix timestamp)")


class UserProfileResponse(BaseModel):
    """인증된 사용자 프로필."""

    id: str
    permissions: list[PermissionKey]
