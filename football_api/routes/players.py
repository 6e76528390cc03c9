"""Player routes, including the player-scoped stats endpoints."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from football_api.deps import get_player_service, get_player_stats_service
from football_api.schemas import (
    PlayerCreate,
    PlayerResponse,
    PlayerStatsCreate,
    PlayerStatsResponse,
    PlayerStatsUpdate,
    PlayerUpdate,
)
from football_api.services import PlayerService, PlayerStatsService

router = APIRouter()


@router.get("", response_model=List[PlayerResponse])
async def list_players(
    team_id: Optional[int] = Query(None, description="Only players on this team"),
    service: PlayerService = Depends(get_player_service),
):
    if team_id is not None:
        return service.list_players_by_team(team_id)
    return service.list_players()


@router.post("", response_model=PlayerResponse, status_code=status.HTTP_201_CREATED)
async def create_player(payload: PlayerCreate, service: PlayerService = Depends(get_player_service)):
    return service.create_player(payload.model_dump(exclude_unset=True))


@router.get("/{player_id}", response_model=PlayerResponse)
async def get_player(player_id: int, service: PlayerService = Depends(get_player_service)):
    return service.get_player(player_id)


@router.api_route("/{player_id}", methods=["PUT", "PATCH"], response_model=PlayerResponse)
async def update_player(
    player_id: int, payload: PlayerUpdate, service: PlayerService = Depends(get_player_service)
):
    return service.update_player(player_id, payload.model_dump(exclude_unset=True))


@router.delete("/{player_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_player(player_id: int, service: PlayerService = Depends(get_player_service)):
    service.delete_player(player_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{player_id}/stats", response_model=List[PlayerStatsResponse])
async def list_player_stats(player_id: int, service: PlayerStatsService = Depends(get_player_stats_service)):
    return service.list_stats_by_player(player_id)


@router.post("/{player_id}/stats", response_model=PlayerStatsResponse, status_code=status.HTTP_201_CREATED)
async def create_player_stats(
    player_id: int,
    payload: PlayerStatsCreate,
    service: PlayerStatsService = Depends(get_player_stats_service),
):
    """The player comes from the path; a ``player_id`` in the body is ignored."""
    data = payload.model_dump(exclude_unset=True)
    data["player_id"] = player_id
    return service.create_stats(data)


@router.get("/{player_id}/stats/{stats_id}", response_model=PlayerStatsResponse)
async def get_player_stats(
    player_id: int, stats_id: int, service: PlayerStatsService = Depends(get_player_stats_service)
):
    return service.get_player_stats(player_id, stats_id)


@router.api_route("/{player_id}/stats/{stats_id}", methods=["PUT", "PATCH"], response_model=PlayerStatsResponse)
async def update_player_stats(
    player_id: int,
    stats_id: int,
    payload: PlayerStatsUpdate,
    service: PlayerStatsService = Depends(get_player_stats_service),
):
    service.get_player_stats(player_id, stats_id)
    return service.update_stats(stats_id, payload.model_dump(exclude_unset=True))


@router.delete("/{player_id}/stats/{stats_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_player_stats(
    player_id: int, stats_id: int, service: PlayerStatsService = Depends(get_player_stats_service)
):
    service.get_player_stats(player_id, stats_id)
    service.delete_stats(stats_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
