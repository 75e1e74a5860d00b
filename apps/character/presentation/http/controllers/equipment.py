"""Equipment HTTP Controller.

무기/방어구 장착·해제, 스킬 교체·삭제 엔드포인트.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from apps.character.application.character.commands import (
    DeleteSkillCommand,
    EquipArmorCommand,
    EquipWeaponCommand,
    UnequipArmorCommand,
    UnequipWeaponCommand,
    UpdateSkillCommand,
)
from apps.character.application.character.dto import EquipmentSpec, SkillSpec
from apps.character.presentation.http.schemas import (
    ArmorResponse,
    EquipmentRequest,
    SkillRequest,
    SkillResponse,
    WeaponResponse,
)
from apps.character.setup.dependencies import (
    get_delete_skill_command,
    get_equip_armor_command,
    get_equip_weapon_command,
    get_unequip_armor_command,
    get_unequip_weapon_command,
    get_update_skill_command,
)

router = APIRouter(prefix="/characters/{character_id}", tags=["equipment"])


@router.patch("/weapon", response_model=WeaponResponse, summary="무기 장착")
async def equip_weapon(
    character_id: str,
    request: EquipmentRequest,
    command: Annotated[EquipWeaponCommand, Depends(get_equip_weapon_command)],
) -> WeaponResponse:
    weapon = await command.execute(character_id, EquipmentSpec(**request.model_dump()))
    return WeaponResponse.model_validate(weapon)


@router.delete(
    "/weapon",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="무기 해제",
)
async def unequip_weapon(
    character_id: str,
    command: Annotated[UnequipWeaponCommand, Depends(get_unequip_weapon_command)],
) -> None:
    await command.execute(character_id)


@router.patch("/armor", response_model=ArmorResponse, summary="방어구 장착")
async def equip_armor(
    character_id: str,
    request: EquipmentRequest,
    command: Annotated[EquipArmorCommand, Depends(get_equip_armor_command)],
) -> ArmorResponse:
    armor = await command.execute(character_id, EquipmentSpec(**request.model_dump()))
    return ArmorResponse.model_validate(armor)


@router.delete(
    "/armor",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="방어구 해제",
)
async def unequip_armor(
    character_id: str,
    command: Annotated[UnequipArmorCommand, Depends(get_unequip_armor_command)],
) -> None:
    await command.execute(character_id)


@router.patch("/skill", response_model=SkillResponse, summary="스킬 교체")
async def update_skill(
    character_id: str,
    request: SkillRequest,
    command: Annotated[UpdateSkillCommand, Depends(get_update_skill_command)],
) -> SkillResponse:
    skill = await command.execute(character_id, SkillSpec(**request.model_dump()))
    return SkillResponse.model_validate(skill)


@router.delete(
    "/skill",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="스킬 삭제",
)
async def delete_skill(
    character_id: str,
    command: Annotated[DeleteSkillCommand, Depends(get_delete_skill_command)],
) -> None:
    await command.execute(character_id)
