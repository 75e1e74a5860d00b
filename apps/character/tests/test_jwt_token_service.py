"""JWT Token Service 단위 테스트.

JwtTokenService의 토큰 발급/검증 로직을 테스트합니다.
외부 의존성 없이 순수 로직만 테스트합니다.
"""

import time

import pytest
from jose import jwt

from apps.character.application.auth.dto import UserProfile
from apps.character.domain.enums import DEFAULT_PERMISSIONS, PermissionKey
from apps.character.domain.exceptions import InvalidTokenError, TokenExpiredError
from apps.character.infrastructure.security import JwtTokenService

SECRET = "test-secret-key-12345"


class TestJwtTokenService:
    """JwtTokenService 테스트."""

    @pytest.fixture
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret_key=SECRET,
            algorithm="HS256",
            issuer="test-issuer",
            audience="test-audience",
            access_token_expire_minutes=60,
        )

    @pytest.fixture
    def profile(self) -> UserProfile:
        return UserProfile(id="hero@example.com", permissions=frozenset(DEFAULT_PERMISSIONS))

    def test_issue_then_verify_round_trip(self, token_service, profile) -> None:
        """발급한 토큰을 검증하면 같은 ID와 권한이 복원됩니다."""
        # Act
        issued = token_service.issue(profile)
        verified = token_service.verify(issued.token)

        # Assert
        assert verified.id == profile.id
        assert verified.permissions == profile.permissions
        assert verified.jti == issued.jti
        assert verified.expires_at == issued.expires_at

    def test_claims(self, token_service, profile) -> None:
        """표준 클레임(iss/aud/exp/iat/nbf)과 permissions 클레임 포함."""
        issued = token_service.issue(profile)

        claims = jwt.get_unverified_claims(issued.token)

        assert claims["sub"] == "hero@example.com"
        assert claims["iss"] == "test-issuer"
        assert claims["aud"] == "test-audience"
        assert claims["exp"] - claims["iat"] == 3600
        assert claims["permissions"] == sorted(p.value for p in DEFAULT_PERMISSIONS)

    def test_empty_permissions(self, token_service) -> None:
        issued = token_service.issue(UserProfile(id="nobody"))

        assert token_service.verify(issued.token).permissions == frozenset()

    def test_verify_invalid_token(self, token_service) -> None:
        with pytest.raises(InvalidTokenError):
            token_service.verify("not-a-jwt")

    def test_verify_tampered_signature(self, token_service, profile) -> None:
        """서명이 변조된 토큰은 거부됩니다."""
        token = token_service.issue(profile).token
        header, payload, signature = token.split(".")
        tampered_signature = ("A" if signature[0] != "A" else "B") + signature[1:]

        with pytest.raises(InvalidTokenError):
            token_service.verify(f"{header}.{payload}.{tampered_signature}")

    def test_verify_token_signed_with_other_secret(self, token_service, profile) -> None:
        other = JwtTokenService(
            secret_key="another-secret",
            issuer="test-issuer",
            audience="test-audience",
        )

        with pytest.raises(InvalidTokenError):
            token_service.verify(other.issue(profile).token)

    def test_verify_wrong_audience(self, token_service, profile) -> None:
        other = JwtTokenService(secret_key=SECRET, issuer="test-issuer", audience="elsewhere")

        with pytest.raises(InvalidTokenError):
            token_service.verify(other.issue(profile).token)

    def test_verify_expired_token(self, token_service, profile, monkeypatch) -> None:
        """만료된 토큰은 TokenExpiredError (InvalidTokenError 하위 타입)."""
        issued_at = 1_700_000_000
        monkeypatch.setattr(token_service, "_now_timestamp", lambda: issued_at)
        token = token_service.issue(profile).token

        with pytest.raises(TokenExpiredError) as exc_info:
            token_service.verify(token)

        assert isinstance(exc_info.value, InvalidTokenError)

    def test_unknown_permission_claim_rejected(self, token_service) -> None:
        token = jwt.encode(
            {
                "sub": "hero",
                "permissions": ["Superuser"],
                "exp": int(time.time()) + 60,
                "iss": "test-issuer",
                "aud": "test-audience",
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            token_service.verify(token)

    def test_missing_subject_rejected(self, token_service) -> None:
        token = jwt.encode(
            {
                "permissions": [PermissionKey.VIEW_OWN_USER.value],
                "exp": int(time.time()) + 60,
                "iss": "test-issuer",
                "aud": "test-audience",
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            token_service.verify(token)

    def test_missing_expiration_rejected(self, token_service) -> None:
        """exp 클레임이 없는 토큰은 서명이 유효해도 거부됩니다."""
        token = jwt.encode(
            {
                "sub": "hero",
                "permissions": [PermissionKey.VIEW_OWN_USER.value],
                "iss": "test-issuer",
                "aud": "test-audience",
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError) as exc_info:
            token_service.verify(token)

        assert not isinstance(exc_info.value, TokenExpiredError)
