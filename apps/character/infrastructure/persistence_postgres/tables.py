"""Table Definitions.

Character 도메인의 SQLAlchemy Table 정의.
ORM 매핑 없이 순수 테이블 스키마만 정의합니다.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.sql import func

from apps.character.infrastructure.persistence_postgres.registry import mapper_registry

# character.characters 테이블
characters_table = Table(
    "characters",
    mapper_registry.metadata,
    Column("id", String(320), primary_key=True),
    Column("name", Text, nullable=False, index=True),
    Column("password_hash", String(128), nullable=False),
    Column("level", Integer, nullable=False, default=1, index=True),
    Column("current_exp", Integer, nullable=False, default=0),
    Column("next_level_exp", Integer, nullable=False, default=100),
    Column("max_health", Integer, nullable=False, default=100),
    Column("current_health", Integer, nullable=False, default=100),
    Column("max_mana", Integer, nullable=False, default=50),
    Column("current_mana", Integer, nullable=False, default=50),
    Column("attack", Integer, nullable=False, default=10),
    Column("defence", Integer, nullable=False, default=5),
    Column("permissions", JSONB, nullable=False, server_default="[]"),
    Column("version", Integer, nullable=False, default=1),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), server_default=func.now(), onupdate=func.now()),
)


def _character_fk() -> Column:
    return Column(
        "character_id",
        String(320),
        ForeignKey("character.characters.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )


# character.weapons 테이블 (캐릭터당 최대 1개)
weapons_table = Table(
    "weapons",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    _character_fk(),
    Column("name", Text, nullable=False),
    Column("attack", Integer, nullable=False, default=0),
    Column("defence", Integer, nullable=False, default=0),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
)

# character.armors 테이블 (캐릭터당 최대 1개)
armors_table = Table(
    "armors",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    _character_fk(),
    Column("name", Text, nullable=False),
    Column("attack", Integer, nullable=False, default=0),
    Column("defence", Integer, nullable=False, default=0),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
)

# character.skills 테이블 (캐릭터당 최대 1개)
skills_table = Table(
    "skills",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    _character_fk(),
    Column("name", Text, nullable=False),
    Column("description", Text, nullable=True),
    Column("mana_cost", Integer, nullable=False, default=0),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
)
