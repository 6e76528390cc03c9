"""Team model."""
from sqlalchemy import Column, String, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from football_api.storage.base import Base, TimestampMixin


class Team(TimestampMixin, Base):
    """Football team."""

    __tablename__ = "teams"
    __table_args__ = (
        UniqueConstraint("name", "city", name="uq_team_name_city"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    city = Column(String(50), nullable=False)
    conference = Column(String(3), nullable=False)  # AFC or NFC
    division = Column(String(10), nullable=False)  # North, South, East, West

    # Relationships
    players = relationship("Player", back_populates="team")
    home_games = relationship("Game", foreign_keys="Game.home_team_id", back_populates="home_team")
    away_games = relationship("Game", foreign_keys="Game.away_team_id", back_populates="away_team")

    def __repr__(self) -> str:
        return f"<Team id={self.id} {self.city} {self.name} ({self.conference} {self.division})>"
