"""Character HTTP Schemas.

응답 스키마에는 비밀번호 관련 필드가 존재하지 않습니다.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from apps.character.domain.enums import PermissionKey

# PostgreSQL INTEGER 범위
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class CharacterStats(BaseModel):
    """선택 입력 스탯 (생략 시 기본값)."""

    level: int | None = Field(None, ge=1, le=INT32_MAX, description="레벨")
    current_exp: int | None = Field(None, ge=0, le=INT32_MAX, description="현재 경험치")
    next_level_exp: int | None = Field(
        None, ge=1, le=INT32_MAX, description="다음 레벨 필요 경험치"
    )
    max_health: int | None = Field(None, ge=1, le=INT32_MAX, description="최대 체력")
    current_health: int | None = Field(None, ge=0, le=INT32_MAX, description="현재 체력")
    max_mana: int | None = Field(None, ge=0, le=INT32_MAX, description="최대 마나")
    current_mana: int | None = Field(None, ge=0, le=INT32_MAX, description="현재 마나")
    attack: int | None = Field(None, ge=INT32_MIN, le=INT32_MAX, description="공격력")
    defence: int | None = Field(None, ge=INT32_MIN, le=INT32_MAX, description="방어력")


class CharacterCreateRequest(CharacterStats):
    """캐릭터 생성 요청."""

    id: str = Field(..., min_length=1, max_length=320, description="캐릭터 ID (로그인 ID)")
    name: str = Field(..., min_length=1, description="표시 이름")
    password: str = Field(..., min_length=1, description="비밀번호")


class CharacterPatchRequest(CharacterStats):
    """캐릭터 부분 수정 요청. 보낸 필드만 변경됩니다."""

    name: str | None = Field(None, min_length=1)
    password: str | None = Field(None, min_length=1)


class CharacterPutRequest(BaseModel):
    """캐릭터 전체 교체 요청."""

    name: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    level: int = Field(..., ge=1, le=INT32_MAX)
    current_exp: int = Field(..., ge=0, le=INT32_MAX)
    next_level_exp: int = Field(..., ge=1, le=INT32_MAX)
    max_health: int = Field(..., ge=1, le=INT32_MAX)
    current_health: int = Field(..., ge=0, le=INT32_MAX)
    max_mana: int = Field(..., ge=0, le=INT32_MAX)
    current_mana: int = Field(..., ge=0, le=INT32_MAX)
    attack: int = Field(..., ge=INT32_MIN, le=INT32_MAX)
    defence: int = Field(..., ge=INT32_MIN, le=INT32_MAX)


class CharacterResponse(BaseModel):
    """캐릭터 응답."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    level: int
    current_exp: int
    next_level_exp: int
    max_health: int
    current_health: int
    max_mana: int
    current_mana: int
    attack: int
    defence: int
    permissions: list[PermissionKey]
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CountResponse(BaseModel):
    """건수 응답."""

    count: int = Field(..., ge=0)
