"""Game request and response models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GameCreate(BaseModel):
    home_team_id: Optional[int] = None
    away_team_id: Optional[int] = None
    season: Optional[str] = None
    week: Optional[int] = Field(default=None, description="1-22")
    game_date: Optional[datetime] = None
    status: Optional[str] = Field(default=None, description="scheduled, in_progress, completed or cancelled")
    home_score: Optional[int] = None
    away_score: Optional[int] = None


class GameUpdate(BaseModel):
    """Partial update. ``null`` clears a score."""
    home_team_id: Optional[int] = None
    away_team_id: Optional[int] = None
    season: Optional[str] = None
    week: Optional[int] = None
    game_date: Optional[datetime] = None
    status: Optional[str] = None
    home_score: Optional[int] = None
    away_score: Optional[int] = None


class GameResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    home_team_id: int
    away_team_id: int
    season: str
    week: int
    game_date: datetime
    status: str
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    created_at: datetime
    updated_at: datetime
