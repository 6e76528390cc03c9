"""Player statistics business logic."""
from typing import Any, List, Mapping

from football_api.app_logging import get_logger
from football_api.errors import ConflictError, NotFoundError
from football_api.storage.models import PlayerStats
from football_api.storage.repositories import GameRepository, PlayerRepository, PlayerStatsRepository
from football_api.validation.common import check_entity_id, merge_patch
from football_api.validation.player_stats import (
    check_stat_invariants,
    stat_values,
    validate_stats_create,
    validate_stats_patch,
)

logger = get_logger(__name__)


class PlayerStatsService:
    """One stats row per (player, game).

    With ``revalidate_merged`` the cross-field rules run again on the stored
    row with the patch applied, so a patch that lowers ``passing_attempts``
    below the stored ``passing_completions`` is rejected. Without it only the
    counters supplied together in the patch are compared.
    """

    def __init__(
        self,
        stats: PlayerStatsRepository,
        players: PlayerRepository,
        games: GameRepository,
        revalidate_merged: bool = True,
    ):
        self.stats = stats
        self.players = players
        self.games = games
        self.revalidate_merged = revalidate_merged

    def get_stats(self, stats_id: int) -> PlayerStats:
        check_entity_id(stats_id, "player stats")
        stats = self.stats.get_by_id(stats_id)
        if stats is None:
            raise NotFoundError("player stats", stats_id)
        return stats

    def get_player_stats(self, player_id: int, stats_id: int) -> PlayerStats:
        """A stats row addressed through its player; other players' rows are not found."""
        check_entity_id(player_id, "player")
        stats = self.get_stats(stats_id)
        if stats.player_id != player_id:
            raise NotFoundError("player stats", stats_id)
        return stats

    def get_stats_for_player_and_game(self, player_id: int, game_id: int) -> PlayerStats:
        check_entity_id(player_id, "player")
        check_entity_id(game_id, "game")
        stats = self.stats.get_by_player_and_game(player_id, game_id)
        if stats is None:
            raise NotFoundError("player stats", f"player {player_id}/game {game_id}")
        return stats

    def list_stats(self) -> List[PlayerStats]:
        return self.stats.list_all()

    def list_stats_by_player(self, player_id: int) -> List[PlayerStats]:
        check_entity_id(player_id, "player")
        self._require_player(player_id)
        return self.stats.list_by_player(player_id)

    def list_stats_by_game(self, game_id: int) -> List[PlayerStats]:
        check_entity_id(game_id, "game")
        self._require_game(game_id)
        return self.stats.list_by_game(game_id)

    def create_stats(self, data: Mapping[str, Any]) -> PlayerStats:
        values = validate_stats_create(data)
        player_id, game_id = values["player_id"], values["game_id"]

        self._require_player(player_id)
        self._require_game(game_id)

        duplicate = f"player stats already exist for player {player_id} in game {game_id}"
        if self.stats.exists_by_player_and_game(player_id, game_id):
            raise ConflictError(duplicate)

        try:
            stats = self.stats.create(values)
        except ConflictError as e:
            # Lost a race with a concurrent insert; the unique constraint decides
            raise ConflictError(duplicate) from e

        logger.info(
            f"Created player stats {stats.id}",
            extra={"stats_id": stats.id, "player_id": player_id, "game_id": game_id},
        )
        return stats

    def update_stats(self, stats_id: int, patch: Mapping[str, Any]) -> PlayerStats:
        check_entity_id(stats_id, "player stats")
        changes = validate_stats_patch(patch)
        stats = self.get_stats(stats_id)

        if self.revalidate_merged:
            check_stat_invariants(merge_patch(stat_values(stats), changes))

        updated = self.stats.update(stats_id, changes)
        if updated is None:
            raise NotFoundError("player stats", stats_id)

        logger.info(f"Updated player stats {stats_id}", extra={"stats_id": stats_id, "fields": sorted(changes)})
        return updated

    def delete_stats(self, stats_id: int) -> None:
        check_entity_id(stats_id, "player stats")
        if not self.stats.exists(stats_id):
            raise NotFoundError("player stats", stats_id)

        if not self.stats.delete(stats_id):
            raise NotFoundError("player stats", stats_id)
        logger.info(f"Deleted player stats {stats_id}", extra={"stats_id": stats_id})

    def _require_player(self, player_id: int) -> None:
        if not self.players.exists(player_id):
            raise NotFoundError("player", player_id, field="player_id")

    def _require_game(self, game_id: int) -> None:
        if not self.games.exists(game_id):
            raise NotFoundError("game", game_id, field="game_id")
