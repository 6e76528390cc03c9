"""Player model."""
from sqlalchemy import Column, String, Integer, ForeignKey, Index
from sqlalchemy.orm import relationship

from football_api.storage.base import Base, TimestampMixin


class Player(TimestampMixin, Base):
    """Rostered player.

    Jersey numbers are unique per team, but that is checked by the service
    with a roster scan rather than a constraint.
    """

    __tablename__ = "players"
    __table_args__ = (
        Index("idx_players_team", "team_id"),
        Index("idx_players_name", "last_name", "first_name"),
    )

    id = Column(Integer, primary_key=True, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)

    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    position = Column(String(20), nullable=False)
    jersey_number = Column(Integer)
    height = Column(Integer)  # inches
    weight = Column(Integer)  # pounds

    # Relationships
    team = relationship("Team", back_populates="players")
    stats = relationship("PlayerStats", back_populates="player")

    def __repr__(self) -> str:
        number = self.jersey_number if self.jersey_number is not None else "-"
        return f"<Player id={self.id} {self.first_name} {self.last_name} (#{number}, {self.position}, team {self.team_id})>"
