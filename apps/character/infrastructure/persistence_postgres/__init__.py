"""PostgreSQL Persistence.

Imperative Mapping을 사용하여 도메인 엔티티를 직접 조회/저장합니다.
"""

from apps.character.infrastructure.persistence_postgres.character_gateway_sqla import (
    SqlaCharacterGateway,
)
from apps.character.infrastructure.persistence_postgres.equipment_gateway_sqla import (
    SqlaArmorGateway,
    SqlaSkillGateway,
    SqlaWeaponGateway,
)
from apps.character.infrastructure.persistence_postgres.mappings import start_mappers
from apps.character.infrastructure.persistence_postgres.registry import mapper_registry
from apps.character.infrastructure.persistence_postgres.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = [
    "SqlaArmorGateway",
    "SqlaCharacterGateway",
    "SqlaSkillGateway",
    "SqlaTransactionManager",
    "SqlaWeaponGateway",
    "mapper_registry",
    "start_mappers",
]
