"""Equip / Unequip commands.

무기와 방어구는 같은 규칙을 따릅니다.
스탯 변경과 장비 레코드 변경은 한 트랜잭션에서 처리됩니다.

    final = base - old + new
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar
from uuid import uuid4

from apps.character.application.character.dto import EquipmentSpec
from apps.character.domain.entities import Armor, Character, Equipment, Weapon
from apps.character.domain.enums import EquipmentSlot
from apps.character.domain.exceptions import CharacterNotFoundError

if TYPE_CHECKING:
    from apps.character.application.character.ports import (
        CharacterGateway,
        EquipmentGateway,
    )
    from apps.character.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Equipment)


class _SlotCommand(Generic[E]):
    slot: ClassVar[EquipmentSlot]

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        equipment_gateway: "EquipmentGateway[E]",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._characters = character_gateway
        self._equipment = equipment_gateway
        self._tx = transaction_manager

    async def _load(self, character_id: str) -> Character:
        character = await self._characters.get_by_id(character_id)
        if character is None:
            raise CharacterNotFoundError(character_id)
        return character


class EquipCommand(_SlotCommand[E]):
    """장비 장착 UseCase (기존 장비는 교체)."""

    item_type: ClassVar[type[Equipment]]

    async def execute(self, character_id: str, spec: EquipmentSpec) -> E:
        """새 장비를 장착합니다.

        Args:
            character_id: 캐릭터 ID
            spec: 장착할 장비의 이름과 보정치

        Returns:
            생성된 장비

        Raises:
            CharacterNotFoundError: 캐릭터 없음
            ConcurrentUpdateError: 다른 요청이 먼저 캐릭터를 수정함
        """
        async with self._tx.begin():
            character = await self._load(character_id)
            character.apply_modifiers(spec.attack, spec.defence)

            current = await self._equipment.get(character_id)
            if current is not None:
                character.remove_modifiers(current.attack, current.defence)
                await self._equipment.delete(character_id)

            now = datetime.now(timezone.utc)
            character.updated_at = now
            await self._characters.save(character)

            item = self.item_type(
                id=uuid4(),
                character_id=character_id,
                name=spec.name,
                attack=spec.attack,
                defence=spec.defence,
                created_at=now,
            )
            await self._equipment.add(item)

        logger.info(
            "Equipment equipped",
            extra={
                "character_id": character_id,
                "slot": self.slot.value,
                "replaced": current is not None,
            },
        )
        return item


class UnequipCommand(_SlotCommand[E]):
    """장비 해제 UseCase. 장착된 장비가 없으면 아무 것도 하지 않습니다."""

    async def execute(self, character_id: str) -> None:
        """
        Raises:
            CharacterNotFoundError: 캐릭터 없음
        """
        async with self._tx.begin():
            character = await self._load(character_id)
            current = await self._equipment.get(character_id)
            if current is None:
                return

            character.remove_modifiers(current.attack, current.defence)
            character.updated_at = datetime.now(timezone.utc)
            await self._equipment.delete(character_id)
            await self._characters.save(character)

        logger.info(
            "Equipment unequipped",
            extra={"character_id": character_id, "slot": self.slot.value},
        )


class EquipWeaponCommand(EquipCommand[Weapon]):
    slot = EquipmentSlot.WEAPON
    item_type = Weapon


class UnequipWeaponCommand(UnequipCommand[Weapon]):
    slot = EquipmentSlot.WEAPON


class EquipArmorCommand(EquipCommand[Armor]):
    slot = EquipmentSlot.ARMOR
    item_type = Armor


class UnequipArmorCommand(UnequipCommand[Armor]):
    slot = EquipmentSlot.ARMOR
