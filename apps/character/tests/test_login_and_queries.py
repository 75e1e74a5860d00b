"""Login UseCase 및 조회 Query 테스트."""

from unittest.mock import create_autospec

import pytest

from apps.character.application.auth.commands import LoginCommand
from apps.character.application.auth.dto import Credential, IssuedToken, UserProfile
from apps.character.application.auth.exceptions import AuthenticationError
from apps.character.application.auth.ports import TokenIssuer
from apps.character.application.character.dto import (
    CharacterQuery,
    EquipmentSpec,
    Loadout,
)
from apps.character.application.character.commands import EquipWeaponCommand
from apps.character.application.character.queries import (
    CountCharactersQuery,
    GetLoadoutQuery,
    ListCharactersQuery,
)
from apps.character.domain.enums import DEFAULT_PERMISSIONS
from apps.character.domain.exceptions import CharacterNotFoundError
from apps.character.tests.fakes import make_character

pytestmark = pytest.mark.asyncio


class TestLoginCommand:
    """LoginCommand 테스트.

    검증 포인트:
    1. 올바른 자격 증명이면 캐릭터 권한을 담은 토큰 발급
    2. 없는 ID와 틀린 비밀번호는 같은 오류
    """

    @pytest.fixture
    def token_issuer(self):
        issuer = create_autospec(TokenIssuer, instance=True)
        issuer.issue.return_value = IssuedToken(token="t", jti="j", expires_at=1)
        return issuer

    async def test_issues_token_with_permissions(self, characters, hasher, token_issuer) -> None:
        await characters.add(make_character("hero"))

        issued = await LoginCommand(characters, hasher, token_issuer).execute(
            Credential(id="hero", password="secret")
        )

        assert issued.token == "t"
        token_issuer.issue.assert_called_once_with(
            UserProfile(id="hero", permissions=frozenset(DEFAULT_PERMISSIONS))
        )

    @pytest.mark.parametrize(
        ("character_id", "password"),
        [("hero", "wrong"), ("ghost", "secret")],
    )
    async def test_rejects_bad_credentials(
        self, characters, hasher, token_issuer, character_id, password
    ) -> None:
        await characters.add(make_character("hero"))

        with pytest.raises(AuthenticationError) as exc_info:
            await LoginCommand(characters, hasher, token_issuer).execute(
                Credential(id=character_id, password=password)
            )

        assert exc_info.value.message == "Invalid id or password"
        token_issuer.issue.assert_not_called()


class TestListAndCount:
    async def test_list_is_ordered_and_paginated(self, characters) -> None:
        for cid in ("c", "a", "b", "d"):
            await characters.add(make_character(cid))

        views = await ListCharactersQuery(characters).execute(CharacterQuery(limit=2, offset=1))

        assert [v.id for v in views] == ["b", "c"]

    async def test_filters(self, characters) -> None:
        await characters.add(make_character("a", name="Zed", level=3))
        await characters.add(make_character("b", name="Zed", level=1))
        await characters.add(make_character("c", name="Amy", level=9))
        query = CharacterQuery(name="Zed", min_level=2)

        views = await ListCharactersQuery(characters).execute(query)
        count = await CountCharactersQuery(characters).execute(query)

        assert [v.id for v in views] == ["a"]
        assert count == 1

    async def test_count_all(self, characters) -> None:
        await characters.add(make_character("a"))
        await characters.add(make_character("b"))

        assert await CountCharactersQuery(characters).execute(CharacterQuery()) == 2


class TestGetLoadout:
    """GetLoadoutQuery 테스트. 비어 있는 슬롯은 None."""

    async def test_empty_loadout(self, characters, weapons, armors, skills) -> None:
        await characters.add(make_character("hero"))

        loadout = await GetLoadoutQuery(characters, weapons, armors, skills).execute("hero")

        assert loadout == Loadout(weapon=None, armor=None, skill=None)

    async def test_partial_loadout(self, characters, weapons, armors, skills, tx) -> None:
        await characters.add(make_character("hero"))
        await EquipWeaponCommand(characters, weapons, tx).execute(
            "hero", EquipmentSpec(name="Sword", attack=3)
        )

        loadout = await GetLoadoutQuery(characters, weapons, armors, skills).execute("hero")

        assert loadout.weapon is not None
        assert loadout.weapon.name == "Sword"
        assert loadout.armor is None
        assert loadout.skill is None

    async def test_unknown_character(self, characters, weapons, armors, skills) -> None:
        with pytest.raises(CharacterNotFoundError):
            await GetLoadoutQuery(characters, weapons, armors, skills).execute("ghost")
