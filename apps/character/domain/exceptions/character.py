"""Character 도메인 예외."""

from apps.character.domain.exceptions.base import DomainError


class NotFoundError(DomainError):
    """대상 리소스를 찾을 수 없음."""


class CharacterNotFoundError(NotFoundError):
    """캐릭터를 찾을 수 없음."""

    def __init__(self, character_id: str) -> None:
        self.character_id = character_id
        super().__init__(f"Character not found: {character_id}")


class DuplicateIdentifierError(DomainError):
    """이미 존재하는 캐릭터 ID로 생성 시도."""

    def __init__(self, character_id: str) -> None:
        self.character_id = character_id
        super().__init__(f"Character already exists: {character_id}")


class ConcurrentUpdateError(DomainError):
    """다른 요청이 먼저 캐릭터를 수정함 (버전 불일치)."""

    def __init__(self, character_id: str, expected_version: int) -> None:
        self.character_id = character_id
        self.expected_version = expected_version
        super().__init__(
            f"Character {character_id} was modified concurrently "
            f"(expected version {expected_version})"
        )
