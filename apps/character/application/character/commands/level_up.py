"""LevelUp command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from apps.character.application.character.dto import CharacterView
from apps.character.domain.exceptions import CharacterNotFoundError

if TYPE_CHECKING:
    from apps.character.application.character.ports import CharacterGateway
    from apps.character.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class LevelUpCommand:
    """누적 경험치로 레벨업을 정산하는 UseCase.

    올라갈 레벨이 없어도 체력/마나는 최대치로 회복됩니다.
    """

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._characters = character_gateway
        self._tx = transaction_manager

    async def execute(self, character_id: str) -> CharacterView:
        """
        Raises:
            CharacterNotFoundError: 캐릭터 없음
            ConcurrentUpdateError: 다른 요청이 먼저 캐릭터를 수정함
        """
        async with self._tx.begin():
            character = await self._characters.get_by_id(character_id)
            if character is None:
                raise CharacterNotFoundError(character_id)

            levels = character.level_up()
            character.updated_at = datetime.now(timezone.utc)
            await self._characters.save(character)

        logger.info(
            "Character leveled up",
            extra={
                "character_id": character_id,
                "levels": levels,
                "level": character.level,
            },
        )
        return CharacterView.from_entity(character)
