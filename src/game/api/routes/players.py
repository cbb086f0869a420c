from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from src.game.api.schemas.players import PlayerPayload, PlayerResponse
from src.game.config import get_settings
from src.game.db.repositories.player_filters import PlayerCriteria
from src.game.enums import Profession, Race
from src.game.services.player_rules import id_check
from src.game.services.player_service import PlayerService

router = APIRouter(prefix="/rest/players", tags=["players"])

# Paging values are 32-bit ints on the wire.
MAX_PAGE_VALUE = 2**31 - 1


def get_player_service(request: Request) -> PlayerService:
    return request.app.state.player_service


def player_criteria(
    name: str | None = None,
    title: str | None = None,
    race: Race | None = None,
    profession: Profession | None = None,
    banned: bool | None = None,
    min_level: float | None = Query(default=None, alias="minLevel"),
    max_level: float | None = Query(default=None, alias="maxLevel"),
    min_experience: float | None = Query(default=None, alias="minExperience"),
    max_experience: float | None = Query(default=None, alias="maxExperience"),
    after: int | None = None,
    before: int | None = None,
) -> PlayerCriteria:
    return PlayerCriteria(
        name=name,
        title=title,
        race=race,
        profession=profession,
        banned=banned,
        min_level=min_level,
        max_level=max_level,
        min_experience=min_experience,
        max_experience=max_experience,
        after=after,
        before=before,
    )


@router.get("", response_model=list[PlayerResponse])
@router.get("/", response_model=list[PlayerResponse], include_in_schema=False)
def list_players(
    request: Request,
    criteria: PlayerCriteria = Depends(player_criteria),
    page_number: int = Query(default=0, ge=0, le=MAX_PAGE_VALUE, alias="pageNumber"),
    page_size: int | None = Query(default=None, ge=1, le=MAX_PAGE_VALUE, alias="pageSize"),
    service: PlayerService = Depends(get_player_service),
):
    _ = request.state.request_id
    rows = service.list_players(
        criteria,
        page_number=page_number,
        page_size=page_size or get_settings().default_page_size,
    )
    return [PlayerResponse.from_row(row) for row in rows]


@router.get("/count", response_model=int)
def count_players(
    request: Request,
    criteria: PlayerCriteria = Depends(player_criteria),
    service: PlayerService = Depends(get_player_service),
):
    _ = request.state.request_id
    return service.count_players(criteria)


@router.get("/{player_id}", response_model=PlayerResponse)
def get_player(request: Request, player_id: str, service: PlayerService = Depends(get_player_service)):
    _ = request.state.request_id
    return PlayerResponse.from_row(service.get_player(id_check(player_id)))


@router.post("", response_model=PlayerResponse)
@router.post("/", response_model=PlayerResponse, include_in_schema=False)
def create_player(request: Request, body: PlayerPayload, service: PlayerService = Depends(get_player_service)):
    _ = request.state.request_id
    return PlayerResponse.from_row(service.create_player(body.to_record()))


@router.post("/{player_id}", response_model=PlayerResponse)
def update_player(
    request: Request,
    player_id: str,
    body: PlayerPayload,
    service: PlayerService = Depends(get_player_service),
):
    _ = request.state.request_id
    return PlayerResponse.from_row(service.update_player(id_check(player_id), body.to_record()))


@router.delete("/{player_id}", response_class=PlainTextResponse)
def delete_player(request: Request, player_id: str, service: PlayerService = Depends(get_player_service)):
    _ = request.state.request_id
    service.delete_player(id_check(player_id))
    return PlainTextResponse("Player deleted")
