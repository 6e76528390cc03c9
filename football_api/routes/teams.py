"""Team routes."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from football_api.deps import get_game_service, get_player_service, get_team_service
from football_api.schemas import GameResponse, PlayerResponse, TeamCreate, TeamResponse, TeamUpdate
from football_api.services import GameService, PlayerService, TeamService

router = APIRouter()


@router.get("", response_model=List[TeamResponse])
async def list_teams(
    conference: Optional[str] = Query(None, description="AFC or NFC"),
    division: Optional[str] = Query(None, description="North, South, East or West"),
    service: TeamService = Depends(get_team_service),
):
    """List teams, optionally filtered by conference and/or division."""
    return service.list_teams(conference=conference, division=division)


@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
async def create_team(payload: TeamCreate, service: TeamService = Depends(get_team_service)):
    return service.create_team(payload.model_dump(exclude_unset=True))


@router.get("/{team_id}", response_model=TeamResponse)
async def get_team(team_id: int, service: TeamService = Depends(get_team_service)):
    return service.get_team(team_id)


@router.api_route("/{team_id}", methods=["PUT", "PATCH"], response_model=TeamResponse)
async def update_team(team_id: int, payload: TeamUpdate, service: TeamService = Depends(get_team_service)):
    return service.update_team(team_id, payload.model_dump(exclude_unset=True))


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_team(team_id: int, service: TeamService = Depends(get_team_service)):
    service.delete_team(team_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{team_id}/players", response_model=List[PlayerResponse])
async def list_team_players(team_id: int, service: PlayerService = Depends(get_player_service)):
    """Roster, ordered by position then jersey number."""
    return service.list_players_by_team(team_id)


@router.get("/{team_id}/games", response_model=List[GameResponse])
async def list_team_games(team_id: int, service: GameService = Depends(get_game_service)):
    """Home and away games, newest first."""
    return service.list_games_by_team(team_id)
