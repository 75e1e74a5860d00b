"""Gateway Exceptions."""

from apps.character.application.common.exceptions.base import ApplicationError


class PersistenceError(ApplicationError):
    """영속성 계층(DB) 작업 실패.

    어댑터가 드라이버 예외를 감싸서 던지며, 원인은 __cause__로 보존됩니다.
    """

    def __init__(self, operation: str, reason: str | None = None) -> None:
        self.operation = operation
        message = f"Persistence operation failed: {operation}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
