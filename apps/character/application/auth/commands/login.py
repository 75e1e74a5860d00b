"""Login command - ID/비밀번호로 액세스 토큰을 발급하는 UseCase."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.character.application.auth.dto import Credential, IssuedToken, UserProfile
from apps.character.application.auth.exceptions import AuthenticationError
from apps.character.domain.enums import PermissionKey

if TYPE_CHECKING:
    from apps.character.application.auth.ports import PasswordHasher, TokenIssuer
    from apps.character.application.character.ports import CharacterGateway

logger = logging.getLogger(__name__)


class LoginCommand:
    """로그인 UseCase.

    존재하지 않는 ID와 잘못된 비밀번호는 같은 오류로 응답하여
    계정 존재 여부를 노출하지 않습니다.
    """

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        password_hasher: "PasswordHasher",
        token_issuer: "TokenIssuer",
    ) -> None:
        self._characters = character_gateway
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer

    async def execute(self, credential: Credential) -> IssuedToken:
        """자격 증명을 확인하고 토큰을 발급합니다.

        Raises:
            AuthenticationError: ID 없음 또는 비밀번호 불일치
        """
        character = await self._characters.get_by_id(credential.id)
        if character is None or not self._password_hasher.verify(
            credential.password, character.password_hash
        ):
            logger.info("Login rejected", extra={"character_id": credential.id})
            raise AuthenticationError()

        profile = UserProfile(
            id=character.id,
            permissions=frozenset(PermissionKey(p) for p in character.permissions),
        )
        issued = self._token_issuer.issue(profile)
        logger.info(
            "Access token issued",
            extra={"character_id": character.id, "jti": issued.jti},
        )
        return issued
