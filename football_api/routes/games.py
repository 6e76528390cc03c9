"""Game routes."""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from football_api.deps import get_game_service, get_player_stats_service
from football_api.schemas import GameCreate, GameResponse, GameUpdate, PlayerStatsResponse
from football_api.services import GameService, PlayerStatsService

router = APIRouter()


@router.get("", response_model=List[GameResponse])
async def list_games(service: GameService = Depends(get_game_service)):
    """All games, newest first."""
    return service.list_games()


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
async def create_game(payload: GameCreate, service: GameService = Depends(get_game_service)):
    return service.create_game(payload.model_dump(exclude_unset=True))


@router.get("/season/{season}", response_model=List[GameResponse])
async def list_games_by_season(season: str, service: GameService = Depends(get_game_service)):
    return service.list_games_by_season(season)


@router.get("/season/{season}/week/{week}", response_model=List[GameResponse])
async def list_games_by_week(season: str, week: int, service: GameService = Depends(get_game_service)):
    return service.list_games_by_week(season, week)


@router.get("/{game_id}", response_model=GameResponse)
async def get_game(game_id: int, service: GameService = Depends(get_game_service)):
    return service.get_game(game_id)


@router.api_route("/{game_id}", methods=["PUT", "PATCH"], response_model=GameResponse)
async def update_game(game_id: int, payload: GameUpdate, service: GameService = Depends(get_game_service)):
    return service.update_game(game_id, payload.model_dump(exclude_unset=True))


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_game(game_id: int, service: GameService = Depends(get_game_service)):
    service.delete_game(game_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{game_id}/stats", response_model=List[PlayerStatsResponse])
async def list_game_stats(game_id: int, service: PlayerStatsService = Depends(get_player_stats_service)):
    """Box score for the game."""
    return service.list_stats_by_game(game_id)
