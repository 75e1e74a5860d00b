"""GetLoadout query - 캐릭터의 무기/방어구/스킬 조회."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.character.application.character.dto import Loadout
from apps.character.domain.exceptions import CharacterNotFoundError

if TYPE_CHECKING:
    from apps.character.application.character.ports import (
        ArmorGateway,
        CharacterGateway,
        SkillGateway,
        WeaponGateway,
    )


class GetLoadoutQuery:
    """장비 현황 조회.

    비어 있는 슬롯은 None으로 반환됩니다.
    """

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        weapon_gateway: "WeaponGateway",
        armor_gateway: "ArmorGateway",
        skill_gateway: "SkillGateway",
    ) -> None:
        self._characters = character_gateway
        self._weapons = weapon_gateway
        self._armors = armor_gateway
        self._skills = skill_gateway

    async def execute(self, character_id: str) -> Loadout:
        """
        Raises:
            CharacterNotFoundError: 캐릭터 없음
        """
        if not await self._characters.exists(character_id):
            raise CharacterNotFoundError(character_id)

        return Loadout(
            weapon=await self._weapons.get(character_id),
            armor=await self._armors.get(character_id),
            skill=await self._skills.get(character_id),
        )
