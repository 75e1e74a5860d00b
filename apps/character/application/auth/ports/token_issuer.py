"""TokenIssuer Port.

서명된 베어러 토큰 발급/검증을 위한 인터페이스입니다.
"""

from typing import Protocol

from apps.character.application.auth.dto import IssuedToken, UserProfile


class TokenIssuer(Protocol):
    """토큰 발급자 인터페이스.

    구현체:
        - JwtTokenService (infrastructure/security/)
    """

    def issue(self, profile: UserProfile) -> IssuedToken:
        """사용자 ID와 권한 집합을 담은 토큰을 발급합니다.

        Args:
            profile: 토큰에 담을 사용자 프로필

        Returns:
            발급된 토큰
        """
        ...

    def verify(self, token: str) -> UserProfile:
        """서명과 만료를 검증하고 프로필을 복원합니다.

        Args:
            token: JWT 토큰 문자열

        Returns:
            토큰에 담긴 사용자 프로필

        Raises:
            InvalidTokenError: 서명 불일치 또는 형식 오류
            TokenExpiredError: 만료된 토큰
        """
        ...
