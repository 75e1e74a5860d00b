"""Equipment HTTP Schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from apps.character.presentation.http.schemas.character import INT32_MAX, INT32_MIN


class EquipmentRequest(BaseModel):
    """무기/방어구 장착 요청."""

    name: str = Field(..., min_length=1, description="장비 이름")
    attack: int = Field(0, ge=INT32_MIN, le=INT32_MAX, description="공격력 보정치")
    defence: int = Field(0, ge=INT32_MIN, le=INT32_MAX, description="방어력 보정치")


class EquipmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    character_id: str
    name: str
    attack: int
    defence: int
    created_at: datetime | None = None


class WeaponResponse(EquipmentResponse):
    """무기 응답."""


class ArmorResponse(EquipmentResponse):
    """방어구 응답."""


class SkillRequest(BaseModel):
    """스킬 교체 요청."""

    name: str = Field(..., min_length=1, description="스킬 이름")
    description: str | None = Field(None, description="스킬 설명")
    mana_cost: int = Field(0, ge=0, le=INT32_MAX, description="마나 소모량")


class SkillResponse(BaseModel):
    """스킬 응답."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    character_id: str
    name: str
    description: str | None = None
    mana_cost: int
    created_at: datetime | None = None


class LoadoutResponse(BaseModel):
    """장비 현황 응답. 비어 있는 슬롯은 null."""

    model_config = ConfigDict(from_attributes=True)

    weapon: WeaponResponse | None = None
    armor: ArmorResponse | None = None
    skill: SkillResponse | None = None
