"""Player statistics request and response models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class StatCounters(BaseModel):
    """Every counter of a box score line; all optional."""

    # Passing
    passing_attempts: Optional[int] = None
    passing_completions: Optional[int] = None
    passing_yards: Optional[int] = None
    passing_touchdowns: Optional[int] = None
    passing_interceptions: Optional[int] = None

    # Rushing
    rushing_attempts: Optional[int] = None
    rushing_yards: Optional[int] = None
    rushing_touchdowns: Optional[int] = None

    # Receiving
    receiving_targets: Optional[int] = None
    receptions: Optional[int] = None
    receiving_yards: Optional[int] = None
    receiving_touchdowns: Optional[int] = None

    # Ball security
    fumbles: Optional[int] = None
    fumbles_lost: Optional[int] = None

    # Defense
    tackles: Optional[int] = None
    solo_tackles: Optional[int] = None
    assisted_tackles: Optional[int] = None
    sacks: Optional[int] = None
    defensive_interceptions: Optional[int] = None
    pass_deflections: Optional[int] = None
    forced_fumbles: Optional[int] = None
    fumble_recoveries: Optional[int] = None
    defensive_touchdowns: Optional[int] = None

    # Kicking
    field_goals_attempted: Optional[int] = None
    field_goals_made: Optional[int] = None
    extra_points_attempted: Optional[int] = None
    extra_points_made: Optional[int] = None
    punts: Optional[int] = None
    punt_yards: Optional[int] = None

    # Returns
    kick_returns: Optional[int] = None
    kick_return_yards: Optional[int] = None
    kick_return_touchdowns: Optional[int] = None
    punt_returns: Optional[int] = None
    punt_return_yards: Optional[int] = None
    punt_return_touchdowns: Optional[int] = None


class PlayerStatsCreate(StatCounters):
    player_id: Optional[int] = None
    game_id: Optional[int] = None


class PlayerStatsUpdate(StatCounters):
    """Partial update of counters; ``null`` clears one."""


class PlayerStatsResponse(StatCounters):
    model_config = ConfigDict(from_attributes=True)

    id: int
    player_id: int
    game_id: int
    created_at: datetime
    updated_at: datetime
