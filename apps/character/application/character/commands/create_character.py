"""CreateCharacter command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from apps.character.application.character.dto import CharacterView, NewCharacter
from apps.character.domain.entities import Character
from apps.character.domain.enums import DEFAULT_PERMISSIONS
from apps.character.domain.exceptions import DuplicateIdentifierError

if TYPE_CHECKING:
    from apps.character.application.auth.ports import PasswordHasher
    from apps.character.application.character.ports import CharacterGateway
    from apps.character.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class CreateCharacterCommand:
    """캐릭터 생성 UseCase.

    기본 권한을 부여하고 비밀번호는 해시로만 저장합니다.
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

    async def execute(self, request: NewCharacter) -> CharacterView:
        """캐릭터를 생성합니다.

        Args:
            request: 생성 요청

        Returns:
            비밀번호가 제외된 캐릭터 정보

        Raises:
            DuplicateIdentifierError: 같은 ID의 캐릭터가 이미 존재
        """
        async with self._tx.begin():
            if await self._characters.exists(request.id):
                raise DuplicateIdentifierError(request.id)

            now = datetime.now(timezone.utc)
            character = Character(
                id=request.id,
                name=request.name,
                password_hash=self._password_hasher.hash(request.password),
                permissions=list(DEFAULT_PERMISSIONS),
                created_at=now,
                updated_at=now,
                **request.stats,
            )
            await self._characters.add(character)

        logger.info("Character created", extra={"character_id": character.id})
        return CharacterView.from_entity(character)
