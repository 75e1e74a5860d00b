"""DeleteCharacter command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.character.domain.exceptions import CharacterNotFoundError

if TYPE_CHECKING:
    from apps.character.application.character.ports import (
        ArmorGateway,
        CharacterGateway,
        SkillGateway,
        WeaponGateway,
    )
    from apps.character.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class DeleteCharacterCommand:
    """캐릭터 삭제 UseCase.

    무기/방어구/스킬을 먼저 삭제한 뒤 캐릭터를 삭제합니다.
    장비가 없어도 실패하지 않습니다.
    """

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        weapon_gateway: "WeaponGateway",
        armor_gateway: "ArmorGateway",
        skill_gateway: "SkillGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._characters = character_gateway
        self._weapons = weapon_gateway
        self._armors = armor_gateway
        self._skills = skill_gateway
        self._tx = transaction_manager

    async def execute(self, character_id: str) -> None:
        """
        Raises:
            CharacterNotFoundError: 캐릭터 없음
        """
        async with self._tx.begin():
            if not await self._characters.exists(character_id):
                raise CharacterNotFoundError(character_id)

            await self._weapons.delete(character_id)
            await self._armors.delete(character_id)
            await self._skills.delete(character_id)
            await self._characters.delete(character_id)

        logger.info("Character deleted", extra={"character_id": character_id})
