"""Team business logic."""
from typing import Any, List, Mapping, Optional

from football_api.app_logging import get_logger
from football_api.errors import ConflictError, NotFoundError
from football_api.storage.models import Team
from football_api.storage.repositories import TeamRepository
from football_api.validation.common import check_entity_id, merge_patch
from football_api.validation.teams import (
    normalize_conference,
    normalize_division,
    validate_team_create,
    validate_team_patch,
)

logger = get_logger(__name__)


class TeamService:
    def __init__(self, teams: TeamRepository):
        self.teams = teams

    def get_team(self, team_id: int) -> Team:
        check_entity_id(team_id, "team")
        team = self.teams.get_by_id(team_id)
        if team is None:
            raise NotFoundError("team", team_id)
        return team

    def list_teams(self, conference: Optional[str] = None, division: Optional[str] = None) -> List[Team]:
        """All teams, optionally narrowed to a conference and/or division."""
        if conference is not None and division is not None:
            conference = normalize_conference(conference)
            return [t for t in self.teams.list_by_division(normalize_division(division)) if t.conference == conference]
        if conference is not None:
            return self.teams.list_by_conference(normalize_conference(conference))
        if division is not None:
            return self.teams.list_by_division(normalize_division(division))
        return self.teams.list_all()

    def create_team(self, data: Mapping[str, Any]) -> Team:
        values = validate_team_create(data)
        try:
            team = self.teams.create(values)
        except ConflictError as e:
            raise ConflictError(
                f"team {values['name']!r} from {values['city']!r} already exists"
            ) from e

        logger.info(f"Created team {team.id}", extra={"team_id": team.id})
        return team

    def update_team(self, team_id: int, patch: Mapping[str, Any]) -> Team:
        check_entity_id(team_id, "team")
        changes = validate_team_patch(patch)

        current = self.teams.get_by_id(team_id)
        if current is None:
            raise NotFoundError("team", team_id)
        merged = merge_patch({"name": current.name, "city": current.city}, changes)

        try:
            team = self.teams.update(team_id, changes)
        except ConflictError as e:
            raise ConflictError(
                f"team {merged['name']!r} from {merged['city']!r} already exists"
            ) from e
        if team is None:
            raise NotFoundError("team", team_id)

        logger.info(f"Updated team {team_id}", extra={"team_id": team_id, "fields": sorted(changes)})
        return team

    def delete_team(self, team_id: int) -> None:
        check_entity_id(team_id, "team")
        if not self.teams.exists(team_id):
            raise NotFoundError("team", team_id)

        players = self.teams.count_players(team_id)
        games = self.teams.count_games(team_id)
        if players or games:
            raise ConflictError(
                f"team {team_id} cannot be deleted while it has {players} player(s) and {games} game(s)"
            )

        if not self.teams.delete(team_id):
            raise NotFoundError("team", team_id)
        logger.info(f"Deleted team {team_id}", extra={"team_id": team_id})
