"""ListCharacters / CountCharacters queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.character.application.character.dto import CharacterQuery, CharacterView

if TYPE_CHECKING:
    from apps.character.application.character.ports import CharacterGateway


class ListCharactersQuery:
    """캐릭터 목록 조회 (ID 순)."""

    def __init__(self, character_gateway: "CharacterGateway") -> None:
        self._characters = character_gateway

    async def execute(self, query: CharacterQuery) -> list[CharacterView]:
        characters = await self._characters.list(query)
        return [CharacterView.from_entity(c) for c in characters]


class CountCharactersQuery:
    """필터에 맞는 캐릭터 수 조회."""

    def __init__(self, character_gateway: "CharacterGateway") -> None:
        self._characters = character_gateway

    async def execute(self, query: CharacterQuery) -> int:
        return await self._characters.count(query)
