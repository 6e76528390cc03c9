"""Request and response models for the HTTP layer."""
from football_api.schemas.team import TeamCreate, TeamUpdate, TeamResponse
from football_api.schemas.player import PlayerCreate, PlayerUpdate, PlayerResponse
from football_api.schemas.game import GameCreate, GameUpdate, GameResponse
from football_api.schemas.player_stats import (
    PlayerStatsCreate,
    PlayerStatsUpdate,
    PlayerStatsResponse,
    StatCounters,
)

__all__ = [
    "TeamCreate",
    "TeamUpdate",
    "TeamResponse",
    "PlayerCreate",
    "PlayerUpdate",
    "PlayerResponse",
    "GameCreate",
    "GameUpdate",
    "GameResponse",
    "PlayerStatsCreate",
    "PlayerStatsUpdate",
    "PlayerStatsResponse",
    "StatCounters",
]
