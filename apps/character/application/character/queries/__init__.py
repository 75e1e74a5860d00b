"""Character queries."""

from apps.character.application.character.queries.get_loadout import GetLoadoutQuery
from apps.character.application.character.queries.list_characters import (
    CountCharactersQuery,
    ListCharactersQuery,
)

__all__ = ["CountCharactersQuery", "GetLoadoutQuery", "ListCharactersQuery"]
