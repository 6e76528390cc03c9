"""Game business logic."""
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping

from football_api.app_logging import get_logger
from football_api.errors import ConflictError, NotFoundError
from football_api.storage.base import utcnow
from football_api.storage.models import Game
from football_api.storage.repositories import GameRepository, TeamRepository
from football_api.validation.common import check_entity_id, check_text, merge_patch
from football_api.validation.games import (
    GAME_FIELDS,
    check_distinct_teams,
    check_week,
    validate_game_create,
    validate_game_patch,
)

logger = get_logger(__name__)


class GameService:
    """Games between two existing, distinct teams.

    ``clock`` supplies "now" for the game-date window; tests pass a fixed one.
    """

    def __init__(
        self,
        games: GameRepository,
        teams: TeamRepository,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.games = games
        self.teams = teams
        self.clock = clock

    def get_game(self, game_id: int) -> Game:
        check_entity_id(game_id, "game")
        game = self.games.get_by_id(game_id)
        if game is None:
            raise NotFoundError("game", game_id)
        return game

    def list_games(self) -> List[Game]:
        return self.games.list_all()

    def list_games_by_team(self, team_id: int) -> List[Game]:
        check_entity_id(team_id, "team")
        if not self.teams.exists(team_id):
            raise NotFoundError("team", team_id)
        return self.games.list_by_team(team_id)

    def list_games_by_season(self, season: str) -> List[Game]:
        return self.games.list_by_season(check_text(season, "season", "season"))

    def list_games_by_week(self, season: str, week: int) -> List[Game]:
        season = check_text(season, "season", "season")
        return self.games.list_by_week(season, check_week(week))

    def create_game(self, data: Mapping[str, Any]) -> Game:
        values = validate_game_create(data, now=self.clock())
        self._require_team(values["home_team_id"], "home team", "home_team_id")
        self._require_team(values["away_team_id"], "away team", "away_team_id")

        try:
            game = self.games.create(values)
        except ConflictError as e:
            raise ConflictError(self._duplicate_message(values)) from e

        logger.info(f"Created game {game.id}", extra={"game_id": game.id})
        return game

    def update_game(self, game_id: int, patch: Mapping[str, Any]) -> Game:
        check_entity_id(game_id, "game")
        changes = validate_game_patch(patch, now=self.clock())
        game = self.get_game(game_id)

        if "home_team_id" in changes:
            self._require_team(changes["home_team_id"], "home team", "home_team_id")
        if "away_team_id" in changes:
            self._require_team(changes["away_team_id"], "away team", "away_team_id")

        # Only one side may have changed
        merged = merge_patch(self._snapshot(game), changes)
        check_distinct_teams(merged["home_team_id"], merged["away_team_id"])

        try:
            updated = self.games.update(game_id, changes)
        except ConflictError as e:
            raise ConflictError(self._duplicate_message(merged)) from e
        if updated is None:
            raise NotFoundError("game", game_id)

        logger.info(f"Updated game {game_id}", extra={"game_id": game_id, "fields": sorted(changes)})
        return updated

    def delete_game(self, game_id: int) -> None:
        check_entity_id(game_id, "game")
        if not self.games.exists(game_id):
            raise NotFoundError("game", game_id)

        stats = self.games.count_stats(game_id)
        if stats:
            raise ConflictError(f"game {game_id} cannot be deleted while it has {stats} stat record(s)")

        if not self.games.delete(game_id):
            raise NotFoundError("game", game_id)
        logger.info(f"Deleted game {game_id}", extra={"game_id": game_id})

    def _require_team(self, team_id: int, label: str, field: str) -> None:
        if not self.teams.exists(team_id):
            raise NotFoundError(label, team_id, field=field)

    @staticmethod
    def _duplicate_message(values: Mapping[str, Any]) -> str:
        return (
            f"game between home team {values['home_team_id']} and away team {values['away_team_id']} "
            f"in season {values['season']} week {values['week']} on {values['game_date'].isoformat()} already exists"
        )

    @staticmethod
    def _snapshot(game: Game) -> Dict[str, Any]:
        return {field: getattr(game, field) for field in GAME_FIELDS}
