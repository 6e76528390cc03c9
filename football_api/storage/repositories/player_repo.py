"""Player repository."""
from typing import List

from football_api.storage.models import Player, PlayerStats
from football_api.storage.repositories.base import BaseRepository


class PlayerRepository(BaseRepository[Player]):
    model = Player
    entity_name = "player"

    def list_all(self) -> List[Player]:
        return self.db.query(Player).order_by(Player.last_name, Player.first_name).all()

    def list_by_team(self, team_id: int) -> List[Player]:
        """Team roster, grouped by position."""
        return (
            self.db.query(Player)
            .filter(Player.team_id == team_id)
            .order_by(Player.position, Player.jersey_number)
            .all()
        )

    def count_stats(self, player_id: int) -> int:
        return self.db.query(PlayerStats).filter(PlayerStats.player_id == player_id).count()
