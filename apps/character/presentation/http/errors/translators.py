"""Error Translators.

도메인/애플리케이션 예외를 (HTTP 상태 코드, 에러 코드)로 변환합니다.
"""

from apps.character.application.auth.exceptions import AuthenticationFailure, ForbiddenError
from apps.character.application.common.exceptions import ApplicationError, PersistenceError
from apps.character.domain.exceptions import (
    CharacterNotFoundError,
    ConcurrentUpdateError,
    DomainError,
    DuplicateIdentifierError,
    InvalidTokenError,
    NotFoundError,
)


def translate_domain_error(exc: DomainError) -> tuple[int, str]:
    """도메인 예외를 (status_code, code) 튜플로 변환."""
    if isinstance(exc, CharacterNotFoundError):
        return 404, "CHARACTER_NOT_FOUND"
    if isinstance(exc, NotFoundError):
        return 404, "NOT_FOUND"
    if isinstance(exc, DuplicateIdentifierError):
        return 400, "DUPLICATE_IDENTIFIER"
    if isinstance(exc, ConcurrentUpdateError):
        return 409, "CONCURRENT_UPDATE"
    if isinstance(exc, InvalidTokenError):
        return 401, "INVALID_ACCESS_TOKEN"
    return 400, "DOMAIN_ERROR"


def translate_application_error(exc: ApplicationError) -> tuple[int, str]:
    """애플리케이션 예외를 (status_code, code) 튜플로 변환."""
    if isinstance(exc, (AuthenticationFailure, ForbiddenError)):
        return exc.status_code, exc.code
    if isinstance(exc, PersistenceError):
        return 503, "PERSISTENCE_ERROR"
    return 400, "APPLICATION_ERROR"
