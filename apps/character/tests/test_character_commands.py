"""Character Lifecycle UseCase 테스트.

인메모리 Fake 포트로 생성/수정/장비/스킬/레벨업/삭제 규칙을 검증합니다.
"""

import pytest

from apps.character.application.character.commands import (
    CreateCharacterCommand,
    DeleteCharacterCommand,
    DeleteSkillCommand,
    EquipArmorCommand,
    EquipWeaponCommand,
    LevelUpCommand,
    ReplaceCharacterCommand,
    UnequipArmorCommand,
    UnequipWeaponCommand,
    UpdateAllCharactersCommand,
    UpdateCharacterCommand,
    UpdateSkillCommand,
)
from apps.character.application.character.dto import (
    CharacterChanges,
    CharacterQuery,
    CharacterReplacement,
    EquipmentSpec,
    NewCharacter,
    SkillSpec,
)
from apps.character.domain.entities import Armor, Weapon
from apps.character.domain.enums import DEFAULT_PERMISSIONS
from apps.character.domain.exceptions import (
    CharacterNotFoundError,
    ConcurrentUpdateError,
    DuplicateIdentifierError,
    NotFoundError,
)
from apps.character.tests.fakes import make_character

pytestmark = pytest.mark.asyncio

HERO = "hero@example.com"


class TestCreateCharacter:
    """CreateCharacterCommand 테스트."""

    async def test_creates_with_defaults(self, characters, hasher, tx) -> None:
        """기본 스탯/권한으로 생성되고 비밀번호는 해시로만 저장됩니다."""
        command = CreateCharacterCommand(characters, hasher, tx)

        view = await command.execute(NewCharacter(id=HERO, name="Hero", password="secret"))

        assert view.id == HERO
        assert view.level == 1
        assert set(view.permissions) == set(DEFAULT_PERMISSIONS)
        assert not hasattr(view, "password_hash")
        assert characters.rows[HERO].password_hash == "hashed::secret"
        assert tx.commits == 1

    async def test_creates_with_custom_stats(self, characters, hasher, tx) -> None:
        command = CreateCharacterCommand(characters, hasher, tx)

        view = await command.execute(
            NewCharacter(id=HERO, name="Hero", password="pw", stats={"attack": 42, "level": 3})
        )

        assert view.attack == 42
        assert view.level == 3
        assert view.defence == 5

    async def test_duplicate_id_leaves_existing_untouched(self, characters, hasher, tx) -> None:
        """같은 ID로 생성하면 DuplicateIdentifierError, 기존 레코드는 그대로.

        이유:
        ID는 로그인 식별자이므로 덮어쓰면 계정 탈취가 됩니다.
        """
        await characters.add(make_character(HERO, name="Original", attack=99))
        command = CreateCharacterCommand(characters, hasher, tx)

        with pytest.raises(DuplicateIdentifierError):
            await command.execute(NewCharacter(id=HERO, name="Impostor", password="x"))

        stored = characters.rows[HERO]
        assert stored.name == "Original"
        assert stored.attack == 99
        assert tx.rollbacks == 1
        assert tx.commits == 0


class TestEquipWeapon:
    """EquipWeaponCommand / UnequipWeaponCommand 테스트.

    검증 포인트:
    1. final = base - old + new
    2. 장착 후 해제하면 원래 스탯으로 복귀
    3. 없는 장비 해제는 아무 변화 없음
    """

    @pytest.fixture
    def equip(self, characters, weapons, tx) -> EquipWeaponCommand:
        return EquipWeaponCommand(characters, weapons, tx)

    @pytest.fixture
    def unequip(self, characters, weapons, tx) -> UnequipWeaponCommand:
        return UnequipWeaponCommand(characters, weapons, tx)

    async def test_equip_adds_modifiers(self, characters, weapons, equip) -> None:
        await characters.add(make_character(HERO))

        weapon = await equip.execute(HERO, EquipmentSpec(name="Sword", attack=7, defence=1))

        assert isinstance(weapon, Weapon)
        assert weapons.rows[HERO] is weapon
        stored = characters.rows[HERO]
        assert (stored.attack, stored.defence) == (17, 6)
        assert stored.version == 2

    async def test_equip_then_unequip_restores_base(
        self, characters, weapons, equip, unequip
    ) -> None:
        await characters.add(make_character(HERO))

        await equip.execute(HERO, EquipmentSpec(name="Cursed Blade", attack=12, defence=-3))
        await unequip.execute(HERO)

        stored = characters.rows[HERO]
        assert (stored.attack, stored.defence) == (10, 5)
        assert HERO not in weapons.rows

    async def test_equip_a_then_b_keeps_only_b(self, characters, weapons, equip) -> None:
        """A 장착 후 B 장착 → base + B (A의 보정치는 제거)."""
        await characters.add(make_character(HERO))

        await equip.execute(HERO, EquipmentSpec(name="A", attack=5, defence=2))
        await equip.execute(HERO, EquipmentSpec(name="B", attack=1, defence=8))

        stored = characters.rows[HERO]
        assert (stored.attack, stored.defence) == (11, 13)
        assert weapons.rows[HERO].name == "B"

    async def test_unequip_without_weapon_is_noop(
        self, characters, weapons, unequip, tx
    ) -> None:
        await characters.add(make_character(HERO))

        await unequip.execute(HERO)

        stored = characters.rows[HERO]
        assert (stored.attack, stored.defence) == (10, 5)
        assert stored.version == 1
        assert tx.rollbacks == 0

    async def test_equip_unknown_character(self, equip, weapons) -> None:
        with pytest.raises(CharacterNotFoundError):
            await equip.execute("ghost", EquipmentSpec(name="Sword", attack=1))

        assert weapons.rows == {}

    async def test_unequip_unknown_character(self, unequip) -> None:
        with pytest.raises(NotFoundError):
            await unequip.execute("ghost")

    async def test_concurrent_equip_rejected(self, characters, weapons, tx) -> None:
        """같은 버전을 읽은 두 번째 저장은 ConcurrentUpdateError.

        이유:
        읽기-수정-쓰기 경합에서 보정치가 중복 적용되거나 유실되면 안 됩니다.
        """
        await characters.add(make_character(HERO))
        stale = await characters.get_by_id(HERO)

        await EquipWeaponCommand(characters, weapons, tx).execute(
            HERO, EquipmentSpec(name="First", attack=3)
        )

        stale.apply_modifiers(100, 0)
        with pytest.raises(ConcurrentUpdateError):
            await characters.save(stale)

        assert characters.rows[HERO].attack == 13


class TestEquipArmor:
    """방어구도 무기와 같은 규칙을 따릅니다."""

    async def test_equip_replace_and_unequip(self, characters, armors, tx) -> None:
        await characters.add(make_character(HERO))
        equip = EquipArmorCommand(characters, armors, tx)
        unequip = UnequipArmorCommand(characters, armors, tx)

        first = await equip.execute(HERO, EquipmentSpec(name="Leather", defence=3))
        assert isinstance(first, Armor)
        await equip.execute(HERO, EquipmentSpec(name="Plate", attack=-1, defence=10))

        stored = characters.rows[HERO]
        assert (stored.attack, stored.defence) == (9, 15)

        await unequip.execute(HERO)
        stored = characters.rows[HERO]
        assert (stored.attack, stored.defence) == (10, 5)
        assert armors.rows == {}

    async def test_weapon_and_armor_stack(self, characters, weapons, armors, tx) -> None:
        await characters.add(make_character(HERO))

        await EquipWeaponCommand(characters, weapons, tx).execute(
            HERO, EquipmentSpec(name="Sword", attack=4)
        )
        await EquipArmorCommand(characters, armors, tx).execute(
            HERO, EquipmentSpec(name="Shield", defence=6)
        )
        await UnequipWeaponCommand(characters, weapons, tx).execute(HERO)

        stored = characters.rows[HERO]
        assert (stored.attack, stored.defence) == (10, 11)


class TestSkill:
    """UpdateSkillCommand / DeleteSkillCommand 테스트."""

    async def test_update_replaces_wholesale(self, characters, skills, tx) -> None:
        """기존 스킬은 병합되지 않고 교체됩니다. 스탯 변화 없음."""
        await characters.add(make_character(HERO))
        command = UpdateSkillCommand(characters, skills, tx)

        first = await command.execute(
            HERO, SkillSpec(name="Fireball", description="Burns", mana_cost=10)
        )
        second = await command.execute(HERO, SkillSpec(name="Heal"))

        assert skills.rows[HERO] is second
        assert second.id != first.id
        assert second.description is None
        assert second.mana_cost == 0
        assert characters.rows[HERO].version == 1

    async def test_update_unknown_character(self, characters, skills, tx) -> None:
        with pytest.raises(CharacterNotFoundError):
            await UpdateSkillCommand(characters, skills, tx).execute(
                "ghost", SkillSpec(name="Heal")
            )

    async def test_delete_is_idempotent(self, characters, skills, tx) -> None:
        await characters.add(make_character(HERO))
        await UpdateSkillCommand(characters, skills, tx).execute(HERO, SkillSpec(name="Heal"))
        command = DeleteSkillCommand(characters, skills, tx)

        await command.execute(HERO)
        await command.execute(HERO)

        assert skills.rows == {}


class TestLevelUpCommand:
    async def test_level_up_saves(self, characters, tx) -> None:
        await characters.add(make_character(HERO, current_exp=250, next_level_exp=100))

        view = await LevelUpCommand(characters, tx).execute(HERO)

        assert view.level == 2
        assert view.current_exp == 150
        assert view.next_level_exp == 200
        stored = characters.rows[HERO]
        assert stored.level == 2
        assert stored.version == 2

    async def test_level_up_unknown_character(self, characters, tx) -> None:
        with pytest.raises(CharacterNotFoundError):
            await LevelUpCommand(characters, tx).execute("ghost")


class TestDeleteCharacter:
    """DeleteCharacterCommand 테스트."""

    @pytest.fixture
    def command(self, characters, weapons, armors, skills, tx) -> DeleteCharacterCommand:
        return DeleteCharacterCommand(characters, weapons, armors, skills, tx)

    async def test_delete_without_sub_resources(self, characters, command) -> None:
        """무기/방어구/스킬이 없어도 삭제에 성공합니다."""
        await characters.add(make_character(HERO))

        await command.execute(HERO)

        assert HERO not in characters.rows

    async def test_delete_removes_every_slot(
        self, characters, weapons, armors, skills, tx, command
    ) -> None:
        await characters.add(make_character(HERO))
        await EquipWeaponCommand(characters, weapons, tx).execute(
            HERO, EquipmentSpec(name="Sword", attack=1)
        )
        await EquipArmorCommand(characters, armors, tx).execute(
            HERO, EquipmentSpec(name="Plate", defence=1)
        )
        await UpdateSkillCommand(characters, skills, tx).execute(HERO, SkillSpec(name="Heal"))

        await command.execute(HERO)

        assert characters.rows == {}
        assert weapons.rows == armors.rows == skills.rows == {}

    async def test_delete_unknown_character(self, command, weapons) -> None:
        with pytest.raises(CharacterNotFoundError):
            await command.execute("ghost")

        assert weapons.delete_calls == []


class TestUpdateCharacter:
    """Update / Replace / UpdateAll 테스트."""

    async def test_partial_update_only_touches_given_fields(
        self, characters, hasher, tx
    ) -> None:
        await characters.add(make_character(HERO, current_exp=5))

        view = await UpdateCharacterCommand(characters, hasher, tx).execute(
            HERO, CharacterChanges(name="Renamed", current_exp=300)
        )

        assert view.name == "Renamed"
        assert view.current_exp == 300
        assert view.attack == 10
        assert characters.rows[HERO].password_hash == "hashed::secret"

    async def test_partial_update_rehashes_password(self, characters, hasher, tx) -> None:
        await characters.add(make_character(HERO))

        await UpdateCharacterCommand(characters, hasher, tx).execute(
            HERO, CharacterChanges(password="new-password")
        )

        assert characters.rows[HERO].password_hash == "hashed::new-password"

    async def test_update_unknown_character(self, characters, hasher, tx) -> None:
        with pytest.raises(CharacterNotFoundError):
            await UpdateCharacterCommand(characters, hasher, tx).execute(
                "ghost", CharacterChanges(name="x")
            )

    async def test_replace_keeps_id_and_permissions(self, characters, hasher, tx) -> None:
        await characters.add(make_character(HERO))
        replacement = CharacterReplacement(
            name="Reborn",
            password="pw",
            level=9,
            current_exp=1,
            next_level_exp=900,
            max_health=190,
            current_health=190,
            max_mana=95,
            current_mana=95,
            attack=34,
            defence=13,
        )

        view = await ReplaceCharacterCommand(characters, hasher, tx).execute(HERO, replacement)

        assert view.id == HERO
        assert view.level == 9
        assert set(view.permissions) == set(DEFAULT_PERMISSIONS)
        assert characters.rows[HERO].password_hash == "hashed::pw"

    async def test_update_all_matching(self, characters, hasher, tx) -> None:
        await characters.add(make_character("a", level=1))
        await characters.add(make_character("b", level=5))
        await characters.add(make_character("c", level=8))

        count = await UpdateAllCharactersCommand(characters, hasher, tx).execute(
            CharacterChanges(current_health=1), CharacterQuery(min_level=5)
        )

        assert count == 2
        assert characters.rows["a"].current_health == 100
        assert characters.rows["b"].current_health == 1
        assert characters.rows["c"].current_health == 1

    async def test_update_all_with_empty_changes(self, characters, hasher, tx) -> None:
        await characters.add(make_character("a"))

        count = await UpdateAllCharactersCommand(characters, hasher, tx).execute(
            CharacterChanges(), CharacterQuery()
        )

        assert count == 0
        assert tx.commits == 0
