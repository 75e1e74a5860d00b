"""Character Gateway Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from apps.character.application.character.dto import CharacterQuery
from apps.character.domain.entities import Character


class CharacterGateway(ABC):
    """캐릭터 영속성 포트.

    인프라스트럭처 계층에서 구현됩니다.
    """

    @abstractmethod
    async def exists(self, character_id: str) -> bool:
        """캐릭터 존재 여부를 확인합니다."""
        ...

    @abstractmethod
    async def add(self, character: Character) -> None:
        """새 캐릭터를 추가합니다."""
        ...

    @abstractmethod
    async def get_by_id(self, character_id: str) -> Character | None:
        """ID로 캐릭터를 조회합니다."""
        ...

    @abstractmethod
    async def list(self, query: CharacterQuery) -> Sequence[Character]:
        """필터에 맞는 캐릭터 목록을 ID 순으로 조회합니다."""
        ...

    @abstractmethod
    async def count(self, query: CharacterQuery) -> int:
        """필터에 맞는 캐릭터 수를 반환합니다."""
        ...

    @abstractmethod
    async def save(self, character: Character) -> None:
        """조회 시점의 버전을 기준으로 캐릭터를 저장합니다.

        저장에 성공하면 character.version이 1 증가합니다.

        Raises:
            ConcurrentUpdateError: 다른 요청이 먼저 수정한 경우
        """
        ...

    @abstractmethod
    async def update_matching(self, query: CharacterQuery, changes: dict[str, Any]) -> int:
        """필터에 맞는 모든 캐릭터에 변경을 적용하고 건수를 반환합니다."""
        ...

    @abstractmethod
    async def delete(self, character_id: str) -> bool:
        """캐릭터를 삭제합니다. 없으면 False."""
        ...
