"""Player statistics repository."""
from typing import List, Optional

from football_api.storage.models import Player, PlayerStats, Team
from football_api.storage.repositories.base import BaseRepository


class PlayerStatsRepository(BaseRepository[PlayerStats]):
    model = PlayerStats
    entity_name = "player stats"

    def list_all(self) -> List[PlayerStats]:
        return self.db.query(PlayerStats).order_by(PlayerStats.created_at.desc(), PlayerStats.id.desc()).all()

    def list_by_player(self, player_id: int) -> List[PlayerStats]:
        return (
            self.db.query(PlayerStats)
            .filter(PlayerStats.player_id == player_id)
            .order_by(PlayerStats.created_at.desc(), PlayerStats.id.desc())
            .all()
        )

    def list_by_game(self, game_id: int) -> List[PlayerStats]:
        """Box score for a game, grouped by team then player name."""
        return (
            self.db.query(PlayerStats)
            .join(Player, PlayerStats.player_id == Player.id)
            .join(Team, Player.team_id == Team.id)
            .filter(PlayerStats.game_id == game_id)
            .order_by(Team.name, Player.last_name, Player.first_name)
            .all()
        )

    def get_by_player_and_game(self, player_id: int, game_id: int) -> Optional[PlayerStats]:
        return (
            self.db.query(PlayerStats)
            .filter(PlayerStats.player_id == player_id, PlayerStats.game_id == game_id)
            .first()
        )

    def exists_by_player_and_game(self, player_id: int, game_id: int) -> bool:
        return (
            self.db.query(PlayerStats.id)
            .filter(PlayerStats.player_id == player_id, PlayerStats.game_id == game_id)
            .first()
            is not None
        )
