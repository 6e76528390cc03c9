"""Player business logic."""
from typing import Any, Dict, List, Mapping

from football_api.app_logging import get_logger
from football_api.errors import ConflictError, NotFoundError
from football_api.storage.models import Player
from football_api.storage.repositories import PlayerRepository, TeamRepository
from football_api.validation.common import check_entity_id, merge_patch
from football_api.validation.players import (
    PLAYER_FIELDS,
    find_jersey_conflict,
    validate_player_create,
    validate_player_patch,
)

logger = get_logger(__name__)


class PlayerService:
    def __init__(self, players: PlayerRepository, teams: TeamRepository):
        self.players = players
        self.teams = teams

    def get_player(self, player_id: int) -> Player:
        check_entity_id(player_id, "player")
        player = self.players.get_by_id(player_id)
        if player is None:
            raise NotFoundError("player", player_id)
        return player

    def list_players(self) -> List[Player]:
        return self.players.list_all()

    def list_players_by_team(self, team_id: int) -> List[Player]:
        check_entity_id(team_id, "team")
        self._require_team(team_id)
        return self.players.list_by_team(team_id)

    def create_player(self, data: Mapping[str, Any]) -> Player:
        values = validate_player_create(data)
        self._require_team(values["team_id"])
        self._check_jersey(values["team_id"], values["jersey_number"])

        player = self.players.create(values)
        logger.info(f"Created player {player.id}", extra={"player_id": player.id, "team_id": player.team_id})
        return player

    def update_player(self, player_id: int, patch: Mapping[str, Any]) -> Player:
        check_entity_id(player_id, "player")
        changes = validate_player_patch(patch)
        player = self.get_player(player_id)

        if "team_id" in changes and changes["team_id"] != player.team_id:
            self._require_team(changes["team_id"])

        merged = merge_patch(self._snapshot(player), changes)
        if "jersey_number" in changes or "team_id" in changes:
            self._check_jersey(merged["team_id"], merged["jersey_number"], exclude_id=player_id)

        updated = self.players.update(player_id, changes)
        if updated is None:
            raise NotFoundError("player", player_id)

        logger.info(f"Updated player {player_id}", extra={"player_id": player_id, "fields": sorted(changes)})
        return updated

    def delete_player(self, player_id: int) -> None:
        check_entity_id(player_id, "player")
        if not self.players.exists(player_id):
            raise NotFoundError("player", player_id)

        stats = self.players.count_stats(player_id)
        if stats:
            raise ConflictError(f"player {player_id} cannot be deleted while it has {stats} stat record(s)")

        if not self.players.delete(player_id):
            raise NotFoundError("player", player_id)
        logger.info(f"Deleted player {player_id}", extra={"player_id": player_id})

    def _require_team(self, team_id: int) -> None:
        if not self.teams.exists(team_id):
            raise NotFoundError("team", team_id, field="team_id")

    def _check_jersey(self, team_id: int, jersey_number, exclude_id=None) -> None:
        """Roster scan: the number must be free among current teammates."""
        if jersey_number is None:
            return
        taken_by = find_jersey_conflict(self.players.list_by_team(team_id), jersey_number, exclude_id)
        if taken_by is not None:
            raise ConflictError(
                f"jersey number {jersey_number} is already taken by another player on this team "
                f"(player {taken_by.id})",
                field="jersey_number",
            )

    @staticmethod
    def _snapshot(player: Player) -> Dict[str, Any]:
        return {field: getattr(player, field) for field in PLAYER_FIELDS}
