"""Player request and response models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PlayerCreate(BaseModel):
    team_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    position: Optional[str] = None
    jersey_number: Optional[int] = Field(default=None, description="0-99")
    height: Optional[int] = Field(default=None, description="Inches, 60-90")
    weight: Optional[int] = Field(default=None, description="Pounds, 150-400")


class PlayerUpdate(BaseModel):
    """Partial update. ``null`` clears jersey number, height or weight."""
    team_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    position: Optional[str] = None
    jersey_number: Optional[int] = None
    height: Optional[int] = None
    weight: Optional[int] = None


class PlayerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    team_id: int
    first_name: str
    last_name: str
    position: str
    jersey_number: Optional[int] = None
    height: Optional[int] = None
    weight: Optional[int] = None
    created_at: datetime
    updated_at: datetime
