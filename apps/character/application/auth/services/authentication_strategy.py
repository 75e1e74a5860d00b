"""BearerAuthenticationStrategy.

Authorization 헤더에서 베어러 토큰을 추출하고 TokenIssuer에 검증을 위임합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.character.application.auth.exceptions import (
    InvalidAccessTokenError,
    MalformedCredentialsError,
    MissingCredentialsError,
)
from apps.character.domain.exceptions import InvalidTokenError

if TYPE_CHECKING:
    from apps.character.application.auth.dto import UserProfile
    from apps.character.application.auth.ports import TokenIssuer

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


class BearerAuthenticationStrategy:
    """JWT 베어러 인증 전략.

    상태를 갖지 않으며 I/O가 없습니다.
    """

    name = "jwt"

    def __init__(self, token_issuer: "TokenIssuer") -> None:
        self._token_issuer = token_issuer

    def authenticate(self, authorization: str | None) -> "UserProfile":
        """요청의 Authorization 헤더로 사용자를 인증합니다.

        Args:
            authorization: Authorization 헤더 원문

        Returns:
            토큰에 담긴 사용자 프로필

        Raises:
            MissingCredentialsError: 헤더 없음
            MalformedCredentialsError: 'Bearer <token>' 형식이 아님
            InvalidAccessTokenError: 토큰 검증 실패
        """
        token = self.extract_credentials(authorization)
        try:
            return self._token_issuer.verify(token)
        except InvalidTokenError as e:
            logger.info("Access token rejected", extra={"reason": e.message})
            raise InvalidAccessTokenError(e.message) from e

    @staticmethod
    def extract_credentials(authorization: str | None) -> str:
        """헤더에서 토큰 부분만 추출합니다."""
        if not authorization:
            raise MissingCredentialsError()

        if not authorization.startswith(BEARER_SCHEME):
            raise MalformedCredentialsError("Authorization header is not of type 'Bearer'.")

        parts = authorization.split()
        if len(parts) != 2 or parts[0] != BEARER_SCHEME:
            raise MalformedCredentialsError(
                "Authorization header value must follow the pattern: "
                "'Bearer xx.yy.zz' where xx.yy.zz is a valid JWT token."
            )
        return parts[1]
