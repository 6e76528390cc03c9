"""Game model."""
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Index, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship

from football_api.storage.base import Base, TimestampMixin


class Game(TimestampMixin, Base):
    """Scheduled or played game between two teams."""

    __tablename__ = "games"
    __table_args__ = (
        Index('idx_game_date', 'game_date'),
        Index('idx_season_week', 'season', 'week'),
        Index('idx_teams', 'home_team_id', 'away_team_id'),
        UniqueConstraint('home_team_id', 'away_team_id', 'season', 'week', 'game_date', name='uq_game_matchup'),
        CheckConstraint('home_team_id <> away_team_id', name='check_distinct_teams'),
        CheckConstraint('home_score >= 0', name='check_home_score_positive'),
        CheckConstraint('away_score >= 0', name='check_away_score_positive'),
    )

    id = Column(Integer, primary_key=True, index=True)

    # Teams
    home_team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)
    away_team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)

    # Season info
    season = Column(String(20), nullable=False)
    week = Column(Integer, nullable=False)
    game_date = Column(DateTime, nullable=False)  # naive UTC

    # scheduled, in_progress, completed, cancelled
    status = Column(String(20), nullable=False, default="scheduled")

    # Scores
    home_score = Column(Integer)
    away_score = Column(Integer)

    # Relationships
    home_team = relationship("Team", foreign_keys=[home_team_id], back_populates="home_games")
    away_team = relationship("Team", foreign_keys=[away_team_id], back_populates="away_games")
    player_stats = relationship("PlayerStats", back_populates="game")
