"""Character HTTP Controller.

캐릭터 생성/조회/수정/삭제 및 레벨업 엔드포인트.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from apps.character.application.character.commands import (
    CreateCharacterCommand,
    DeleteCharacterCommand,
    LevelUpCommand,
    ReplaceCharacterCommand,
    UpdateAllCharactersCommand,
    UpdateCharacterCommand,
)
from apps.character.application.character.dto import (
    CharacterChanges,
    CharacterQuery,
    CharacterReplacement,
    NewCharacter,
)
from apps.character.application.character.queries import (
    CountCharactersQuery,
    GetLoadoutQuery,
    ListCharactersQuery,
)
from apps.character.presentation.http.schemas import (
    CharacterCreateRequest,
    CharacterPatchRequest,
    CharacterPutRequest,
    CharacterResponse,
    CountResponse,
    LoadoutResponse,
)
from apps.character.setup.dependencies import (
    get_count_characters_query,
    get_create_character_command,
    get_delete_character_command,
    get_level_up_command,
    get_list_characters_query,
    get_loadout_query,
    get_replace_character_command,
    get_update_all_characters_command,
    get_update_character_command,
)

router = APIRouter(prefix="/characters", tags=["characters"])

STAT_FIELDS = (
    "level",
    "current_exp",
    "next_level_exp",
    "max_health",
    "current_health",
    "max_mana",
    "current_mana",
    "attack",
    "defence",
)


def character_filter(
    name: Annotated[str | None, Query(description="이름 일치 필터")] = None,
    min_level: Annotated[int | None, Query(ge=1, description="최소 레벨")] = None,
    limit: Annotated[int | None, Query(ge=1, le=1000)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> CharacterQuery:
    """쿼리 파라미터를 CharacterQuery로 변환합니다."""
    return CharacterQuery(name=name, min_level=min_level, limit=limit, offset=offset)


FilterDep = Annotated[CharacterQuery, Depends(character_filter)]


@router.post(
    "",
    response_model=CharacterResponse,
    summary="캐릭터 생성",
    description="기본 권한으로 캐릭터를 생성합니다. 이미 존재하는 ID면 400.",
)
async def create_character(
    request: CharacterCreateRequest,
    command: Annotated[CreateCharacterCommand, Depends(get_create_character_command)],
) -> CharacterResponse:
    stats = request.model_dump(include=set(STAT_FIELDS), exclude_none=True)
    view = await command.execute(
        NewCharacter(id=request.id, name=request.name, password=request.password, stats=stats)
    )
    return CharacterResponse.model_validate(view)


@router.get("/count", response_model=CountResponse, summary="캐릭터 수 조회")
async def count_characters(
    query: FilterDep,
    count_query: Annotated[CountCharactersQuery, Depends(get_count_characters_query)],
) -> CountResponse:
    return CountResponse(count=await count_query.execute(query))


@router.get("", response_model=list[CharacterResponse], summary="캐릭터 목록 조회")
async def list_characters(
    query: FilterDep,
    list_query: Annotated[ListCharactersQuery, Depends(get_list_characters_query)],
) -> list[CharacterResponse]:
    views = await list_query.execute(query)
    return [CharacterResponse.model_validate(v) for v in views]


@router.patch("", response_model=CountResponse, summary="캐릭터 일괄 수정")
async def update_all_characters(
    request: CharacterPatchRequest,
    query: FilterDep,
    command: Annotated[UpdateAllCharactersCommand, Depends(get_update_all_characters_command)],
) -> CountResponse:
    changes = CharacterChanges(**request.model_dump(exclude_none=True))
    return CountResponse(count=await command.execute(changes, query))


@router.get(
    "/{character_id}",
    response_model=LoadoutResponse,
    summary="장비 현황 조회",
    description="무기/방어구/스킬을 반환합니다. 비어 있는 슬롯은 null.",
)
async def find_equipment(
    character_id: str,
    query: Annotated[GetLoadoutQuery, Depends(get_loadout_query)],
) -> LoadoutResponse:
    loadout = await query.execute(character_id)
    return LoadoutResponse.model_validate(loadout)


@router.patch(
    "/{character_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="캐릭터 부분 수정",
)
async def update_character(
    character_id: str,
    request: CharacterPatchRequest,
    command: Annotated[UpdateCharacterCommand, Depends(get_update_character_command)],
) -> None:
    await command.execute(character_id, CharacterChanges(**request.model_dump(exclude_none=True)))


@router.put(
    "/{character_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="캐릭터 전체 교체",
)
async def replace_character(
    character_id: str,
    request: CharacterPutRequest,
    command: Annotated[ReplaceCharacterCommand, Depends(get_replace_character_command)],
) -> None:
    await command.execute(character_id, CharacterReplacement(**request.model_dump()))


@router.delete(
    "/{character_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="캐릭터 삭제",
    description="장착된 무기/방어구/스킬도 함께 삭제됩니다.",
)
async def delete_character(
    character_id: str,
    command: Annotated[DeleteCharacterCommand, Depends(get_delete_character_command)],
) -> None:
    await command.execute(character_id)


@router.patch(
    "/{character_id}/levelup",
    response_model=CharacterResponse,
    summary="레벨업 정산",
)
async def level_up(
    character_id: str,
    command: Annotated[LevelUpCommand, Depends(get_level_up_command)],
) -> CharacterResponse:
    view = await command.execute(character_id)
    return CharacterResponse.model_validate(view)
