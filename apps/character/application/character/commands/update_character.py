"""Update / Replace / UpdateAll commands."""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from apps.character.application.character.dto import (
    CharacterChanges,
    CharacterQuery,
    CharacterReplacement,
    CharacterView,
)
from apps.character.domain.entities import Character
from apps.character.domain.exceptions import CharacterNotFoundError

if TYPE_CHECKING:
    from apps.character.application.auth.ports import PasswordHasher
    from apps.character.application.character.ports import CharacterGateway
    from apps.character.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


def _assign(character: Character, values: dict) -> None:
    for key, value in values.items():
        setattr(character, key, value)
    character.updated_at = datetime.now(timezone.utc)


class UpdateCharacterCommand:
    """캐릭터 부분 수정 UseCase."""

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        password_hasher: "PasswordHasher",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._characters = character_gateway
        self._password_hasher = password_hasher
        self._tx = transaction_manager

    async def execute(self, character_id: str, changes: CharacterChanges) -> CharacterView:
        """설정된 필드만 변경합니다. 비밀번호는 다시 해시합니다.

        Raises:
            CharacterNotFoundError: 캐릭터 없음
        """
        async with self._tx.begin():
            character = await self._characters.get_by_id(character_id)
            if character is None:
                raise CharacterNotFoundError(character_id)

            values = changes.as_dict()
            if changes.password is not None:
                values["password_hash"] = self._password_hasher.hash(changes.password)
            _assign(character, values)
            await self._characters.save(character)

        logger.info(
            "Character updated",
            extra={"character_id": character_id, "fields": sorted(values)},
        )
        return CharacterView.from_entity(character)


class ReplaceCharacterCommand:
    """캐릭터 전체 교체 UseCase.

    ID와 권한, 생성 시각은 유지됩니다.
    """

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        password_hasher: "PasswordHasher",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._characters = character_gateway
        self._password_hasher = password_hasher
        self._tx = transaction_manager

    async def execute(self, character_id: str, replacement: CharacterReplacement) -> CharacterView:
        """
        Raises:
            CharacterNotFoundError: 캐릭터 없음
        """
        async with self._tx.begin():
            character = await self._characters.get_by_id(character_id)
            if character is None:
                raise CharacterNotFoundError(character_id)

            values = asdict(replacement)
            values["password_hash"] = self._password_hasher.hash(values.pop("password"))
            _assign(character, values)
            await self._characters.save(character)

        logger.info("Character replaced", extra={"character_id": character_id})
        return CharacterView.from_entity(character)


class UpdateAllCharactersCommand:
    """필터에 맞는 모든 캐릭터 일괄 수정 UseCase."""

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        password_hasher: "PasswordHasher",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._characters = character_gateway
        self._password_hasher = password_hasher
        self._tx = transaction_manager

    async def execute(self, changes: CharacterChanges, query: CharacterQuery) -> int:
        """변경된 캐릭터 수를 반환합니다. 변경할 필드가 없으면 0."""
        values = changes.as_dict()
        if changes.password is not None:
            values["password_hash"] = self._password_hasher.hash(changes.password)
        if not values:
            return 0

        async with self._tx.begin():
            updated = await self._characters.update_matching(query, values)

        logger.info(
            "Characters updated in bulk",
            extra={"count": updated, "fields": sorted(values)},
        )
        return updated
