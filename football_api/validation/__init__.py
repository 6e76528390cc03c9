"""Request validation and consistency rules.

Everything here is pure: functions take plain mappings (and, for games, the
current time) and either return cleaned values or raise a
``football_api.errors.ServiceError``. Lookups against storage live in the
service layer.
"""
from football_api.validation.common import merge_patch
from football_api.validation.teams import validate_team_create, validate_team_patch
from football_api.validation.players import (
    find_jersey_conflict,
    validate_player_create,
    validate_player_patch,
)
from football_api.validation.games import (
    check_distinct_teams,
    check_week,
    validate_game_create,
    validate_game_patch,
)
from football_api.validation.player_stats import (
    STAT_FIELD_NAMES,
    check_stat_invariants,
    validate_stats_create,
    validate_stats_patch,
)

__all__ = [
    "merge_patch",
    "validate_team_create",
    "validate_team_patch",
    "find_jersey_conflict",
    "validate_player_create",
    "validate_player_patch",
    "check_distinct_teams",
    "check_week",
    "validate_game_create",
    "validate_game_patch",
    "STAT_FIELD_NAMES",
    "check_stat_invariants",
    "validate_stats_create",
    "validate_stats_patch",
]
