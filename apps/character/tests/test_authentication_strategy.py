"""BearerAuthenticationStrategy 테스트.

Authorization 헤더 파싱 규칙과 검증 위임을 검증합니다.
형식이 잘못된 헤더는 토큰 검증까지 가지 않아야 합니다.
"""

from unittest.mock import create_autospec

import pytest

from apps.character.application.auth.dto import UserProfile
from apps.character.application.auth.exceptions import (
    AuthenticationFailure,
    InvalidAccessTokenError,
    MalformedCredentialsError,
    MissingCredentialsError,
)
from apps.character.application.auth.ports import TokenIssuer
from apps.character.application.auth.services import BearerAuthenticationStrategy
from apps.character.domain.enums import PermissionKey
from apps.character.domain.exceptions import InvalidTokenError, TokenExpiredError


@pytest.fixture
def token_issuer():
    return create_autospec(TokenIssuer, instance=True)


@pytest.fixture
def strategy(token_issuer) -> BearerAuthenticationStrategy:
    return BearerAuthenticationStrategy(token_issuer)


class TestAuthenticate:
    """authenticate() 테스트."""

    def test_valid_header_returns_profile(self, strategy, token_issuer) -> None:
        """'Bearer <token>' 이면 verify 결과를 그대로 반환합니다."""
        profile = UserProfile(id="hero", permissions=frozenset({PermissionKey.VIEW_OWN_USER}))
        token_issuer.verify.return_value = profile

        result = strategy.authenticate("Bearer abc.def.ghi")

        assert result is profile
        token_issuer.verify.assert_called_once_with("abc.def.ghi")

    @pytest.mark.parametrize("header", [None, ""])
    def test_missing_header(self, strategy, token_issuer, header) -> None:
        with pytest.raises(MissingCredentialsError) as exc_info:
            strategy.authenticate(header)

        assert exc_info.value.status_code == 401
        token_issuer.verify.assert_not_called()

    @pytest.mark.parametrize(
        "header",
        [
            "Basic dXNlcjpwYXNz",
            "bearer abc.def.ghi",
            "Token abc",
            "Bearer",
            "Bearer a b",
            "Bearerabc.def.ghi",
        ],
    )
    def test_malformed_header_never_calls_verify(self, strategy, token_issuer, header) -> None:
        """형식 오류는 MalformedCredentialsError, verify는 호출되지 않음.

        이유:
        파싱 단계 실패를 토큰 검증 실패와 구분해야 클라이언트가
        원인을 알 수 있습니다.
        """
        with pytest.raises(MalformedCredentialsError):
            strategy.authenticate(header)

        token_issuer.verify.assert_not_called()

    def test_invalid_token_is_wrapped_and_chained(self, strategy, token_issuer) -> None:
        """verify 실패는 InvalidAccessTokenError로 변환되고 원인이 보존됩니다."""
        original = InvalidTokenError("Signature verification failed.")
        token_issuer.verify.side_effect = original

        with pytest.raises(InvalidAccessTokenError) as exc_info:
            strategy.authenticate("Bearer tampered")

        assert exc_info.value.__cause__ is original
        assert exc_info.value.code == "INVALID_ACCESS_TOKEN"
        assert isinstance(exc_info.value, AuthenticationFailure)

    def test_expired_token(self, strategy, token_issuer) -> None:
        token_issuer.verify.side_effect = TokenExpiredError()

        with pytest.raises(InvalidAccessTokenError) as exc_info:
            strategy.authenticate("Bearer expired")

        assert isinstance(exc_info.value.__cause__, TokenExpiredError)
        assert "expired" in exc_info.value.message


class TestExtractCredentials:
    def test_extracts_token_part(self) -> None:
        assert BearerAuthenticationStrategy.extract_credentials("Bearer xx.yy.zz") == "xx.yy.zz"

    def test_tolerates_extra_whitespace(self) -> None:
        """split()은 연속 공백을 하나로 취급합니다."""
        assert BearerAuthenticationStrategy.extract_credentials("Bearer   xx.yy.zz ") == "xx.yy.zz"
