"""Team request and response models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class TeamCreate(BaseModel):
    """Team creation payload.

    Fields are optional at the shape level so that a missing value is reported
    with the same message as a blank one.
    """
    name: Optional[str] = None
    city: Optional[str] = None
    conference: Optional[str] = None
    division: Optional[str] = None


class TeamUpdate(BaseModel):
    """Partial update; only the keys present in the body are applied."""
    name: Optional[str] = None
    city: Optional[str] = None
    conference: Optional[str] = None
    division: Optional[str] = None


class TeamResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    city: str
    conference: str
    division: str
    created_at: datetime
    updated_at: datetime
