"""Player statistics routes."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from football_api.deps import get_player_stats_service
from football_api.schemas import PlayerStatsCreate, PlayerStatsResponse, PlayerStatsUpdate
from football_api.services import PlayerStatsService

router = APIRouter()


@router.get("", response_model=List[PlayerStatsResponse])
async def list_stats(
    player_id: Optional[int] = Query(None),
    game_id: Optional[int] = Query(None),
    service: PlayerStatsService = Depends(get_player_stats_service),
):
    """All stat lines, or those of one player, one game, or one player in one game."""
    if player_id is not None and game_id is not None:
        return [service.get_stats_for_player_and_game(player_id, game_id)]
    if player_id is not None:
        return service.list_stats_by_player(player_id)
    if game_id is not None:
        return service.list_stats_by_game(game_id)
    return service.list_stats()


@router.post("", response_model=PlayerStatsResponse, status_code=status.HTTP_201_CREATED)
async def create_stats(payload: PlayerStatsCreate, service: PlayerStatsService = Depends(get_player_stats_service)):
    return service.create_stats(payload.model_dump(exclude_unset=True))


@router.get("/{stats_id}", response_model=PlayerStatsResponse)
async def get_stats(stats_id: int, service: PlayerStatsService = Depends(get_player_stats_service)):
    return service.get_stats(stats_id)


@router.api_route("/{stats_id}", methods=["PUT", "PATCH"], response_model=PlayerStatsResponse)
async def update_stats(
    stats_id: int,
    payload: PlayerStatsUpdate,
    service: PlayerStatsService = Depends(get_player_stats_service),
):
    return service.update_stats(stats_id, payload.model_dump(exclude_unset=True))


@router.delete("/{stats_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_stats(stats_id: int, service: PlayerStatsService = Depends(get_player_stats_service)):
    service.delete_stats(stats_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
