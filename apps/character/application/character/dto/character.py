"""Character DTOs."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any

from apps.character.domain.entities import Character
from apps.character.domain.enums import PermissionKey


@dataclass(frozen=True, slots=True)
class NewCharacter:
    """캐릭터 생성 요청.

    스탯을 생략하면 엔티티 기본값을 사용합니다.
    """

    id: str
    name: str
    password: str
    stats: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class CharacterChanges:
    """부분 수정 요청. None인 필드는 변경하지 않습니다."""

    name: str | None = None
    password: str | None = None
    level: int | None = None
    current_exp: int | None = None
    next_level_exp: int | None = None
    max_health: int | None = None
    current_health: int | None = None
    max_mana: int | None = None
    current_mana: int | None = None
    attack: int | None = None
    defence: int | None = None

    def as_dict(self) -> dict[str, Any]:
        """설정된 필드만 반환합니다 (password 제외)."""
        return {
            key: value
            for key, value in asdict(self).items()
            if value is not None and key != "password"
        }


@dataclass(frozen=True, slots=True)
class CharacterReplacement:
    """전체 교체 요청. ID와 권한은 유지됩니다."""

    name: str
    password: str
    level: int
    current_exp: int
    next_level_exp: int
    max_health: int
    current_health: int
    max_mana: int
    current_mana: int
    attack: int
    defence: int


@dataclass(frozen=True, slots=True)
class CharacterQuery:
    """목록/카운트 필터."""

    name: str | None = None
    min_level: int | None = None
    limit: int | None = None
    offset: int = 0


@dataclass(frozen=True, slots=True)
class CharacterView:
    """응답용 캐릭터 스냅샷 (비밀번호 해시 제외)."""

    id: str
    name: str
    level: int
    current_exp: int
    next_level_exp: int
    max_health: int
    current_health: int
    max_mana: int
    current_mana: int
    attack: int
    defence: int
    permissions: tuple[PermissionKey, ...]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, character: Character) -> "CharacterView":
        return cls(
            id=character.id,
            name=character.name,
            level=character.level,
            current_exp=character.current_exp,
            next_level_exp=character.next_level_exp,
            max_health=character.max_health,
            current_health=character.current_health,
            max_mana=character.max_mana,
            current_mana=character.current_mana,
            attack=character.attack,
            defence=character.defence,
            permissions=tuple(PermissionKey(p) for p in character.permissions),
            created_at=character.created_at,
            updated_at=character.updated_at,
        )
