"""ORM Mappings.

Imperative Mapping을 사용하여 도메인 엔티티를 테이블에 매핑합니다.
도메인 엔티티는 SQLAlchemy에 의존하지 않습니다.
"""

from sqlalchemy import Table

from apps.character.domain.entities import Armor, Character, Skill, Weapon
from apps.character.infrastructure.persistence_postgres.registry import mapper_registry
from apps.character.infrastructure.persistence_postgres.tables import (
    armors_table,
    characters_table,
    skills_table,
    weapons_table,
)


def start_character_mapper() -> None:
    """Character 엔티티 매퍼 시작.

    version 컬럼을 version_id_col로 지정하여 UPDATE 시
    ``WHERE id = :id AND version = :expected`` 조건과 버전 증가가 자동 적용됩니다.
    """
    if hasattr(Character, "__mapper__"):
        return

    mapper_registry.map_imperatively(
        Character,
        characters_table,
        version_id_col=characters_table.c.version,
    )


def _map_slot(entity: type, table: Table) -> None:
    if hasattr(entity, "__mapper__"):
        return
    mapper_registry.map_imperatively(entity, table)


def start_equipment_mappers() -> None:
    """Weapon / Armor / Skill 엔티티 매퍼 시작."""
    _map_slot(Weapon, weapons_table)
    _map_slot(Armor, armors_table)
    _map_slot(Skill, skills_table)


def start_mappers() -> None:
    """모든 매퍼 시작.

    앱 부팅 시 한 번만 호출됩니다 (중복 호출 안전).
    """
    start_character_mapper()
    start_equipment_mappers()


__all__ = ["start_character_mapper", "start_equipment_mappers", "start_mappers"]
