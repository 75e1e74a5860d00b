"""Character sheet schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-19

Character Domain Migration
Schema: character.*

characters 와 캐릭터당 최대 1건인 weapons / armors / skills 테이블을 생성합니다.
"""

from typing import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

SCHEMA = "character"


def _character_fk() -> sa.Column:
    return sa.Column(
        "character_id",
        sa.String(320),
        sa.ForeignKey(f"{SCHEMA}.characters.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )


def upgrade() -> None:
    """Create character sheet tables."""
    op.execute(f"CREATE SCHEMA IF NOT EXISTS {SCHEMA}")

    op.create_table(
        "characters",
        sa.Column("id", sa.String(320), primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("password_hash", sa.String(128), nullable=False),
        sa.Column("level", sa.Integer, nullable=False, server_default="1"),
        sa.Column("current_exp", sa.Integer, nullable=False, server_default="0"),
        sa.Column("next_level_exp", sa.Integer, nullable=False, server_default="100"),
        sa.Column("max_health", sa.Integer, nullable=False, server_default="100"),
        sa.Column("current_health", sa.Integer, nullable=False, server_default="100"),
        sa.Column("max_mana", sa.Integer, nullable=False, server_default="50"),
        sa.Column("current_mana", sa.Integer, nullable=False, server_default="50"),
        sa.Column("attack", sa.Integer, nullable=False, server_default="10"),
        sa.Column("defence", sa.Integer, nullable=False, server_default="5"),
        sa.Column(
            "permissions",
            postgresql.JSONB,
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("version", sa.Integer, nullable=False, server_default="1"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        schema=SCHEMA,
    )
    op.create_index("ix_character_characters_name", "characters", ["name"], schema=SCHEMA)
    op.create_index("ix_character_characters_level", "characters", ["level"], schema=SCHEMA)

    for table in ("weapons", "armors"):
        op.create_table(
            table,
            sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
            _character_fk(),
            sa.Column("name", sa.Text, nullable=False),
            sa.Column("attack", sa.Integer, nullable=False, server_default="0"),
            sa.Column("defence", sa.Integer, nullable=False, server_default="0"),
            sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
            schema=SCHEMA,
        )

    op.create_table(
        "skills",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        _character_fk(),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("mana_cost", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        schema=SCHEMA,
    )


def downgrade() -> None:
    """Drop character sheet tables."""
    op.drop_table("skills", schema=SCHEMA)
    op.drop_table("armors", schema=SCHEMA)
    op.drop_table("weapons", schema=SCHEMA)
    op.drop_index("ix_character_characters_level", table_name="characters", schema=SCHEMA)
    op.drop_index("ix_character_characters_name", table_name="characters", schema=SCHEMA)
    op.drop_table("characters", schema=SCHEMA)
