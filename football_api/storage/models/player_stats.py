"""Per-game player statistics model."""
from sqlalchemy import Column, Integer, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship

from football_api.storage.base import Base, TimestampMixin


class PlayerStats(TimestampMixin, Base):
    """Box score line for one player in one game.

    Every counter is nullable: a missing value means "not recorded", which is
    different from zero.
    """

    __tablename__ = "player_stats"
    __table_args__ = (
        UniqueConstraint('player_id', 'game_id', name='uq_player_stats_player_game'),
        Index('idx_player_stats_game', 'game_id'),
    )

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(Integer, ForeignKey("players.id"), nullable=False)
    game_id = Column(Integer, ForeignKey("games.id"), nullable=False)

    # Passing
    passing_attempts = Column(Integer)
    passing_completions = Column(Integer)
    passing_yards = Column(Integer)
    passing_touchdowns = Column(Integer)
    passing_interceptions = Column(Integer)

    # Rushing
    rushing_attempts = Column(Integer)
    rushing_yards = Column(Integer)
    rushing_touchdowns = Column(Integer)

    # Receiving
    receiving_targets = Column(Integer)
    receptions = Column(Integer)
    receiving_yards = Column(Integer)
    receiving_touchdowns = Column(Integer)

    # Ball security
    fumbles = Column(Integer)
    fumbles_lost = Column(Integer)

    # Defense
    tackles = Column(Integer)
    solo_tackles = Column(Integer)
    assisted_tackles = Column(Integer)
    sacks = Column(Integer)
    defensive_interceptions = Column(Integer)
    pass_deflections = Column(Integer)
    forced_fumbles = Column(Integer)
    fumble_recoveries = Column(Integer)
    defensive_touchdowns = Column(Integer)

    # Kicking
    field_goals_attempted = Column(Integer)
    field_goals_made = Column(Integer)
    extra_points_attempted = Column(Integer)
    extra_points_made = Column(Integer)
    punts = Column(Integer)
    punt_yards = Column(Integer)

    # Returns
    kick_returns = Column(Integer)
    kick_return_yards = Column(Integer)
    kick_return_touchdowns = Column(Integer)
    punt_returns = Column(Integer)
    punt_return_yards = Column(Integer)
    punt_return_touchdowns = Column(Integer)

    # Relationships
    player = relationship("Player", back_populates="stats")
    game = relationship("Game", back_populates="player_stats")

    def __repr__(self) -> str:
        return f"<PlayerStats id={self.id} player={self.player_id} game={self.game_id}>"
