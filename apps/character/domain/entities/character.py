"""Character Entity.

플레이어 캐릭터 애그리거트 루트입니다.
ORM과 분리된 순수 도메인 엔티티이며, SQLAlchemy 매핑은
infrastructure/persistence_postgres/mappings.py에서 정의합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from apps.character.domain.enums import PermissionKey

LEVEL_EXP_STEP = 100
HEALTH_PER_LEVEL = 10
MANA_PER_LEVEL = 5
ATTACK_PER_LEVEL = 3
DEFENCE_PER_LEVEL = 1


@dataclass(eq=False)
class Character:
    """캐릭터 엔티티.

    Attributes:
        id: 캐릭터 식별자 (로그인 ID 겸용)
        name: 표시 이름
        password_hash: bcrypt 해시 (응답에 절대 포함하지 않음)
        level: 레벨 (1 이상)
        current_exp: 현재 경험치
        next_level_exp: 다음 레벨까지 필요한 경험치
        max_health / current_health: 체력
        max_mana / current_mana: 마나
        attack / defence: 장비 보정치가 포함된 전투 스탯
        permissions: 부여된 권한 키 목록
        version: 낙관적 동시성 제어 버전
    """

    id: str
    name: str
    password_hash: str
    level: int = 1
    current_exp: int = 0
    next_level_exp: int = 100
    max_health: int = 100
    current_health: int = 100
    max_mana: int = 50
    current_mana: int = 50
    attack: int = 10
    defence: int = 5
    permissions: list[PermissionKey] = field(default_factory=list)
    version: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def apply_modifiers(self, attack: int, defence: int) -> None:
        """장비 보정치를 스탯에 더합니다."""
        self.attack += attack
        self.defence += defence

    def remove_modifiers(self, attack: int, defence: int) -> None:
        """장비 보정치를 스탯에서 뺍니다."""
        self.attack -= attack
        self.defence -= defence

    def level_up(self) -> int:
        """누적 경험치로 레벨업을 정산합니다.

        다음 레벨 경험치를 차감할 때마다 임계값이 100씩 증가하므로
        current_exp는 감소하고 next_level_exp는 증가하여 반드시 종료됩니다.

        Returns:
            올라간 레벨 수 (0 가능)
        """
        levels = 0
        while self.current_exp >= self.next_level_exp:
            levels += 1
            self.current_exp -= self.next_level_exp
            self.next_level_exp += LEVEL_EXP_STEP

        self.level += levels
        self.max_health += HEALTH_PER_LEVEL * levels
        self.current_health = self.max_health
        self.max_mana += MANA_PER_LEVEL * levels
        self.current_mana = self.max_mana
        self.attack += ATTACK_PER_LEVEL * levels
        self.defence += DEFENCE_PER_LEVEL * levels
        return levels

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Character):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Character(id={self.id!r}, name={self.name!r}, level={self.level})"
