"""Common dependencies."""
from typing import Generator
from uuid import uuid4

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from football_api.services import GameService, PlayerService, PlayerStatsService, TeamService
from football_api.storage.repositories import (
    GameRepository,
    PlayerRepository,
    PlayerStatsRepository,
    TeamRepository,
)


def get_request_id(request: Request) -> str:
    """Request ID assigned by the logging middleware, or a fresh one."""
    return getattr(request.state, "request_id", None) or request.headers.get("x-request-id") or str(uuid4())


def get_db(request: Request) -> Generator[Session, None, None]:
    """Database session dependency."""
    yield from request.app.state.database.get_session()


def get_team_service(db: Session = Depends(get_db)) -> TeamService:
    return TeamService(TeamRepository(db))


def get_player_service(db: Session = Depends(get_db)) -> PlayerService:
    return PlayerService(PlayerRepository(db), TeamRepository(db))


def get_game_service(request: Request, db: Session = Depends(get_db)) -> GameService:
    return GameService(GameRepository(db), TeamRepository(db), clock=request.app.state.clock)


def get_player_stats_service(request: Request, db: Session = Depends(get_db)) -> PlayerStatsService:
    return PlayerStatsService(
        PlayerStatsRepository(db),
        PlayerRepository(db),
        GameRepository(db),
        revalidate_merged=request.app.state.settings.STATS_REVALIDATE_MERGED,
    )
