"""JWT Token Service.

TokenIssuer 포트의 구현체입니다.
"""

from __future__ import annotations

import time
import uuid
from datetime import timedelta
from typing import Any

from jose import JWTError, jwt

from apps.character.application.auth.dto import IssuedToken, UserProfile
from apps.character.domain.enums import PermissionKey
from apps.character.domain.exceptions import InvalidTokenError, TokenExpiredError


class JwtTokenService:
    """JWT 토큰 서비스.

    TokenIssuer 구현체. 권한 목록을 ``permissions`` 클레임에 담습니다.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "character-api",
        audience: str = "character-clients",
        access_token_expire_minutes: int = 60,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._issuer = issuer
        self._audience = audience
        self._access_token_expire = timedelta(minutes=access_token_expire_minutes)

    def _now_timestamp(self) -> int:
        """현재 UTC Unix timestamp 반환."""
        return int(time.time())

    def issue(self, profile: UserProfile) -> IssuedToken:
        """액세스 토큰 발급."""
        jti = str(uuid.uuid4())
        now = self._now_timestamp()
        expires_at = now + int(self._access_token_expire.total_seconds())

        payload: dict[str, Any] = {
            "sub": profile.id,
            "permissions": sorted(p.value for p in profile.permissions),
            "jti": jti,
            "exp": expires_at,
            "iat": now,
            "nbf": now,
            "iss": self._issuer,
            "aud": self._audience,
        }

        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return IssuedToken(token=token, jti=jti, expires_at=expires_at)

    def verify(self, token: str) -> UserProfile:
        """토큰 검증 후 사용자 프로필 복원.

        Raises:
            TokenExpiredError: 만료된 토큰
            InvalidTokenError: 서명 불일치, 형식 오류, 알 수 없는 권한
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError as e:
            if "expired" in str(e).lower():
                raise TokenExpiredError() from e
            raise InvalidTokenError(str(e)) from e

        try:
            permissions = frozenset(PermissionKey(p) for p in payload.get("permissions", []))
            return UserProfile(
                id=payload["sub"],
                permissions=permissions,
                jti=payload.get("jti"),
                expires_at=payload.get("exp"),
            )
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token claims: {e}") from e
