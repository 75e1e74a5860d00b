"""Authentication / Authorization Exceptions."""

from __future__ import annotations

from collections.abc import Iterable

from apps.character.application.common.exceptions.base import ApplicationError


class AuthenticationFailure(ApplicationError):
    """요청 인증 실패 (HTTP 401 상당)."""

    status_code = 401
    code = "UNAUTHORIZED"


class MissingCredentialsError(AuthenticationFailure):
    """Authorization 헤더 없음."""

    code = "MISSING_CREDENTIALS"

    def __init__(self) -> None:
        super().__init__("Authorization header not found.")


class MalformedCredentialsError(AuthenticationFailure):
    """Authorization 헤더가 'Bearer <token>' 형식이 아님."""

    code = "MALFORMED_CREDENTIALS"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)


class InvalidAccessTokenError(AuthenticationFailure):
    """토큰 검증 실패. 원인 예외는 __cause__로 보존됩니다."""

    code = "INVALID_ACCESS_TOKEN"

    def __init__(self, reason: str = "Invalid access token") -> None:
        super().__init__(reason)


class AuthenticationError(AuthenticationFailure):
    """로그인 실패 (ID 없음 또는 비밀번호 불일치)."""

    code = "AUTHENTICATION_FAILED"

    def __init__(self, reason: str = "Invalid id or password") -> None:
        super().__init__(reason)


class ForbiddenError(ApplicationError):
    """필요 권한 부족 (HTTP 403 상당)."""

    status_code = 403
    code = "FORBIDDEN"

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = sorted(missing)
        super().__init__(f"Missing required permissions: {', '.join(self.missing)}")
