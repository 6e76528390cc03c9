"""Game repository."""
from typing import List

from football_api.storage.models import Game, PlayerStats
from football_api.storage.repositories.base import BaseRepository


class GameRepository(BaseRepository[Game]):
    model = Game
    entity_name = "game"

    def list_all(self) -> List[Game]:
        return self.db.query(Game).order_by(Game.game_date.desc(), Game.created_at.desc()).all()

    def list_by_team(self, team_id: int) -> List[Game]:
        """Home and away games, newest first."""
        return (
            self.db.query(Game)
            .filter((Game.home_team_id == team_id) | (Game.away_team_id == team_id))
            .order_by(Game.game_date.desc(), Game.created_at.desc())
            .all()
        )

    def list_by_season(self, season: str) -> List[Game]:
        return (
            self.db.query(Game)
            .filter(Game.season == season)
            .order_by(Game.week, Game.game_date)
            .all()
        )

    def list_by_week(self, season: str, week: int) -> List[Game]:
        return (
            self.db.query(Game)
            .filter(Game.season == season, Game.week == week)
            .order_by(Game.game_date)
            .all()
        )

    def count_stats(self, game_id: int) -> int:
        return self.db.query(PlayerStats).filter(PlayerStats.game_id == game_id).count()
