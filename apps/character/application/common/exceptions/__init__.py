"""Application Exceptions.

공통 예외만 포함합니다. 인증 예외는 apps.character.application.auth.exceptions를 사용하세요.
"""

from apps.character.application.common.exceptions.base import ApplicationError
from apps.character.application.common.exceptions.gateway import PersistenceError

__all__ = ["ApplicationError", "PersistenceError"]
