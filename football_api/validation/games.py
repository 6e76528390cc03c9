"""Game request rules, including the game-date window."""
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from football_api.errors import ValidationError
from football_api.validation.common import (
    check_id,
    check_non_negative,
    check_text,
    ensure_fields_present,
    normalize_choice,
    reject_null,
    require_id,
    require_text,
)

GAME_STATUSES = ("scheduled", "in_progress", "completed", "cancelled")
DEFAULT_STATUS = "scheduled"
WEEK_RANGE = (1, 22)

# Accepted game_date window relative to "now"
YEARS_BACK = 1
YEARS_AHEAD = 2

GAME_FIELDS = (
    "home_team_id",
    "away_team_id",
    "season",
    "week",
    "game_date",
    "status",
    "home_score",
    "away_score",
)
REQUIRED_FIELDS = ("home_team_id", "away_team_id", "season", "week", "game_date", "status")

LABELS = {
    "home_team_id": "home team ID",
    "away_team_id": "away team ID",
    "season": "season",
    "week": "week",
    "game_date": "game date",
    "status": "status",
    "home_score": "home score",
    "away_score": "away score",
}


def to_utc_naive(value: datetime) -> datetime:
    """Storage keeps naive UTC timestamps."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def shift_years(value: datetime, years: int) -> datetime:
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        # Feb 29 rolls over to Mar 1 in non-leap target years
        return value.replace(year=value.year + years, month=3, day=1)


def check_game_date(value: datetime, now: datetime) -> datetime:
    game_date = to_utc_naive(value)
    now = to_utc_naive(now)

    if game_date < shift_years(now, -YEARS_BACK):
        raise ValidationError("game date cannot be more than 1 year in the past", field="game_date")
    if game_date > shift_years(now, YEARS_AHEAD):
        raise ValidationError("game date cannot be more than 2 years in the future", field="game_date")
    return game_date


def check_week(week: Optional[int]) -> int:
    low, high = WEEK_RANGE
    if week is None or week < low or week > high:
        raise ValidationError(f"week must be between {low} and {high}, got {week}", field="week")
    return week


def check_distinct_teams(home_team_id: Optional[int], away_team_id: Optional[int]) -> None:
    if home_team_id is not None and home_team_id == away_team_id:
        raise ValidationError("home team and away team cannot be the same", field="away_team_id")


def normalize_status(value: str) -> str:
    return normalize_choice(value, GAME_STATUSES, "status", "status")


def validate_game_create(data: Mapping[str, Any], now: datetime) -> Dict[str, Any]:
    cleaned: Dict[str, Any] = {
        "home_team_id": require_id(data.get("home_team_id"), "home_team_id", LABELS["home_team_id"]),
        "away_team_id": require_id(data.get("away_team_id"), "away_team_id", LABELS["away_team_id"]),
    }
    check_distinct_teams(cleaned["home_team_id"], cleaned["away_team_id"])

    cleaned["season"] = require_text(data.get("season"), "season", "season")
    cleaned["week"] = check_week(data.get("week"))

    game_date = data.get("game_date")
    if game_date is None:
        raise ValidationError("game date is required", field="game_date")
    cleaned["game_date"] = check_game_date(game_date, now)

    status = data.get("status")
    if status is None or not status.strip():
        cleaned["status"] = DEFAULT_STATUS
    else:
        cleaned["status"] = normalize_status(status)

    cleaned["home_score"] = check_non_negative(data.get("home_score"), "home_score", LABELS["home_score"])
    cleaned["away_score"] = check_non_negative(data.get("away_score"), "away_score", LABELS["away_score"])
    return cleaned


def validate_game_patch(patch: Mapping[str, Any], now: datetime) -> Dict[str, Any]:
    ensure_fields_present(patch)
    reject_null(patch, REQUIRED_FIELDS, LABELS)

    cleaned: Dict[str, Any] = {}
    for field in ("home_team_id", "away_team_id"):
        if field in patch:
            cleaned[field] = check_id(patch[field], field, LABELS[field])
    if "season" in patch:
        cleaned["season"] = check_text(patch["season"], "season", "season")
    if "week" in patch:
        cleaned["week"] = check_week(patch["week"])
    if "game_date" in patch:
        cleaned["game_date"] = check_game_date(patch["game_date"], now)
    if "status" in patch:
        cleaned["status"] = normalize_status(patch["status"])
    for field in ("home_score", "away_score"):
        if field in patch:
            cleaned[field] = check_non_negative(patch[field], field, LABELS[field])
    return cleaned
