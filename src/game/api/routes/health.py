from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from src.game.api.routes.players import get_player_service
from src.game.services.player_service import PlayerService

router = APIRouter(tags=["health"])


@router.get("/health")
def get_health(request: Request, service: PlayerService = Depends(get_player_service)):
    _ = request.state.request_id
    return {"status": "ok", "players": service.count_players()}
