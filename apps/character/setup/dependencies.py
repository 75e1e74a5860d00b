"""Dependency Injection for FastAPI.

컨트롤러가 사용하는 Command/Query 객체 그래프는 이곳에서만 조립됩니다.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps.character.application.auth.commands import LoginCommand
from apps.character.application.auth.ports import PasswordHasher, TokenIssuer
from apps.character.application.auth.services import (
    BearerAuthenticationStrategy,
    PermissionGate,
)
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
from apps.character.application.character.ports import (
    ArmorGateway,
    CharacterGateway,
    SkillGateway,
    WeaponGateway,
)
from apps.character.application.character.queries import (
    CountCharactersQuery,
    GetLoadoutQuery,
    ListCharactersQuery,
)
from apps.character.application.common.ports import TransactionManager
from apps.character.infrastructure.persistence_postgres import (
    SqlaArmorGateway,
    SqlaCharacterGateway,
    SqlaSkillGateway,
    SqlaTransactionManager,
    SqlaWeaponGateway,
)
from apps.character.infrastructure.security import BcryptPasswordHasher, JwtTokenService
from apps.character.setup.config import get_settings
from apps.character.setup.database import get_db_session

SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


# ============================================================
# Security
# ============================================================


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """JwtTokenService 싱글톤을 주입합니다."""
    settings = get_settings()
    return JwtTokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        access_token_expire_minutes=settings.access_token_exp_minutes,
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """BcryptPasswordHasher 싱글톤을 주입합니다."""
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_rounds)


def get_authentication_strategy(
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> BearerAuthenticationStrategy:
    return BearerAuthenticationStrategy(token_issuer)


def get_permission_gate() -> PermissionGate:
    return PermissionGate()


# ============================================================
# Gateways
# ============================================================


async def get_character_gateway(session: SessionDep) -> CharacterGateway:
    return SqlaCharacterGateway(session)


async def get_weapon_gateway(session: SessionDep) -> WeaponGateway:
    return SqlaWeaponGateway(session)


async def get_armor_gateway(session: SessionDep) -> ArmorGateway:
    return SqlaArmorGateway(session)


async def get_skill_gateway(session: SessionDep) -> SkillGateway:
    return SqlaSkillGateway(session)


async def get_transaction_manager(session: SessionDep) -> TransactionManager:
    return SqlaTransactionManager(session)


CharactersDep = Annotated[CharacterGateway, Depends(get_character_gateway)]
WeaponsDep = Annotated[WeaponGateway, Depends(get_weapon_gateway)]
ArmorsDep = Annotated[ArmorGateway, Depends(get_armor_gateway)]
SkillsDep = Annotated[SkillGateway, Depends(get_skill_gateway)]
TxDep = Annotated[TransactionManager, Depends(get_transaction_manager)]
HasherDep = Annotated[PasswordHasher, Depends(get_password_hasher)]


# ============================================================
# Commands / Queries
# ============================================================


async def get_login_command(
    characters: CharactersDep,
    hasher: HasherDep,
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> LoginCommand:
    """LoginCommand를 주입합니다."""
    return LoginCommand(characters, hasher, token_issuer)


async def get_create_character_command(
    characters: CharactersDep, hasher: HasherDep, tx: TxDep
) -> CreateCharacterCommand:
    """CreateCharacterCommand를 주입합니다."""
    return CreateCharacterCommand(characters, hasher, tx)


async def get_update_character_command(
    characters: CharactersDep, hasher: HasherDep, tx: TxDep
) -> UpdateCharacterCommand:
    return UpdateCharacterCommand(characters, hasher, tx)


async def get_replace_character_command(
    characters: CharactersDep, hasher: HasherDep, tx: TxDep
) -> ReplaceCharacterCommand:
    return ReplaceCharacterCommand(characters, hasher, tx)


async def get_update_all_characters_command(
    characters: CharactersDep, hasher: HasherDep, tx: TxDep
) -> UpdateAllCharactersCommand:
    return UpdateAllCharactersCommand(characters, hasher, tx)


async def get_delete_character_command(
    characters: CharactersDep,
    weapons: WeaponsDep,
    armors: ArmorsDep,
    skills: SkillsDep,
    tx: TxDep,
) -> DeleteCharacterCommand:
    """DeleteCharacterCommand를 주입합니다."""
    return DeleteCharacterCommand(characters, weapons, armors, skills, tx)


async def get_equip_weapon_command(
    characters: CharactersDep, weapons: WeaponsDep, tx: TxDep
) -> EquipWeaponCommand:
    return EquipWeaponCommand(characters, weapons, tx)


async def get_unequip_weapon_command(
    characters: CharactersDep, weapons: WeaponsDep, tx: TxDep
) -> UnequipWeaponCommand:
    return UnequipWeaponCommand(characters, weapons, tx)


async def get_equip_armor_command(
    characters: CharactersDep, armors: ArmorsDep, tx: TxDep
) -> EquipArmorCommand:
    return EquipArmorCommand(characters, armors, tx)


async def get_unequip_armor_command(
    characters: CharactersDep, armors: ArmorsDep, tx: TxDep
) -> UnequipArmorCommand:
    return UnequipArmorCommand(characters, armors, tx)


async def get_update_skill_command(
    characters: CharactersDep, skills: SkillsDep, tx: TxDep
) -> UpdateSkillCommand:
    return UpdateSkillCommand(characters, skills, tx)


async def get_delete_skill_command(
    characters: CharactersDep, skills: SkillsDep, tx: TxDep
) -> DeleteSkillCommand:
    return DeleteSkillCommand(characters, skills, tx)


async def get_level_up_command(characters: CharactersDep, tx: TxDep) -> LevelUpCommand:
    """LevelUpCommand를 주입합니다."""
    return LevelUpCommand(characters, tx)


async def get_list_characters_query(characters: CharactersDep) -> ListCharactersQuery:
    return ListCharactersQuery(characters)


async def get_count_characters_query(characters: CharactersDep) -> CountCharactersQuery:
    return CountCharactersQuery(characters)


async def get_loadout_query(
    characters: CharactersDep,
    weapons: WeaponsDep,
    armors: ArmorsDep,
    skills: SkillsDep,
) -> GetLoadoutQuery:
    """GetLoadoutQuery를 주입합니다."""
    return GetLoadoutQuery(characters, weapons, armors, skills)
