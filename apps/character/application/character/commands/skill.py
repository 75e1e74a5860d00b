"""UpdateSkill / DeleteSkill commands."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import uuid4

from apps.character.application.character.dto import SkillSpec
from apps.character.domain.entities import Skill
from apps.character.domain.exceptions import CharacterNotFoundError

if TYPE_CHECKING:
    from apps.character.application.character.ports import CharacterGateway, SkillGateway
    from apps.character.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class UpdateSkillCommand:
    """스킬 교체 UseCase.

    기존 스킬은 병합하지 않고 삭제 후 새로 생성합니다.
    스킬은 스탯에 영향을 주지 않습니다.
    """

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        skill_gateway: "SkillGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._characters = character_gateway
        self._skills = skill_gateway
        self._tx = transaction_manager

    async def execute(self, character_id: str, spec: SkillSpec) -> Skill:
        """
        Raises:
            CharacterNotFoundError: 캐릭터 없음
        """
        async with self._tx.begin():
            if not await self._characters.exists(character_id):
                raise CharacterNotFoundError(character_id)

            await self._skills.delete(character_id)
            skill = Skill(
                id=uuid4(),
                character_id=character_id,
                name=spec.name,
                description=spec.description,
                mana_cost=spec.mana_cost,
                created_at=datetime.now(timezone.utc),
            )
            await self._skills.add(skill)

        logger.info("Skill updated", extra={"character_id": character_id, "skill": spec.name})
        return skill


class DeleteSkillCommand:
    """스킬 삭제 UseCase. 스킬이 없어도 성공합니다."""

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        skill_gateway: "SkillGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._characters = character_gateway
        self._skills = skill_gateway
        self._tx = transaction_manager

    async def execute(self, character_id: str) -> None:
        async with self._tx.begin():
            if not await self._characters.exists(character_id):
                raise CharacterNotFoundError(character_id)
            deleted = await self._skills.delete(character_id)

        if deleted:
            logger.info("Skill deleted", extra={"character_id": character_id})
