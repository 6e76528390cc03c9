"""Team repository."""
from typing import List

from football_api.storage.models import Game, Player, Team
from football_api.storage.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    model = Team
    entity_name = "team"

    def list_all(self) -> List[Team]:
        return self.db.query(Team).order_by(Team.conference, Team.division, Team.name).all()

    def list_by_conference(self, conference: str) -> List[Team]:
        return (
            self.db.query(Team)
            .filter(Team.conference == conference)
            .order_by(Team.division, Team.name)
            .all()
        )

    def list_by_division(self, division: str) -> List[Team]:
        return self.db.query(Team).filter(Team.division == division).order_by(Team.name).all()

    def count_players(self, team_id: int) -> int:
        return self.db.query(Player).filter(Player.team_id == team_id).count()

    def count_games(self, team_id: int) -> int:
        return (
            self.db.query(Game)
            .filter((Game.home_team_id == team_id) | (Game.away_team_id == team_id))
            .count()
        )
