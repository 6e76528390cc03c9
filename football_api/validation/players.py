"""Player request rules and the roster scan for jersey numbers."""
from typing import Any, Dict, Iterable, Mapping, Optional

from football_api.validation.common import (
    check_id,
    check_range,
    check_text,
    ensure_fields_present,
    reject_null,
    require_id,
    require_text,
)

JERSEY_RANGE = (0, 99)
HEIGHT_RANGE = (60, 90)  # inches, 5'0" to 7'6"
WEIGHT_RANGE = (150, 400)  # pounds

TEXT_FIELDS = ("first_name", "last_name", "position")
MEASUREMENT_FIELDS = ("jersey_number", "height", "weight")
PLAYER_FIELDS = ("team_id",) + TEXT_FIELDS + MEASUREMENT_FIELDS

LABELS = {
    "team_id": "team ID",
    "first_name": "first name",
    "last_name": "last name",
    "position": "position",
}


def _check_measurements(data: Mapping[str, Any], cleaned: Dict[str, Any]) -> None:
    if "jersey_number" in data:
        cleaned["jersey_number"] = check_range(data["jersey_number"], *JERSEY_RANGE, "jersey_number", "jersey number")
    if "height" in data:
        cleaned["height"] = check_range(data["height"], *HEIGHT_RANGE, "height", "height", "inches")
    if "weight" in data:
        cleaned["weight"] = check_range(data["weight"], *WEIGHT_RANGE, "weight", "weight", "pounds")


def validate_player_create(data: Mapping[str, Any]) -> Dict[str, Any]:
    cleaned: Dict[str, Any] = {"team_id": require_id(data.get("team_id"), "team_id", LABELS["team_id"])}
    for field in TEXT_FIELDS:
        cleaned[field] = require_text(data.get(field), field, LABELS[field])

    cleaned.update({field: None for field in MEASUREMENT_FIELDS})
    _check_measurements(data, cleaned)
    return cleaned


def validate_player_patch(patch: Mapping[str, Any]) -> Dict[str, Any]:
    ensure_fields_present(patch)
    reject_null(patch, ("team_id",) + TEXT_FIELDS, LABELS)

    cleaned: Dict[str, Any] = {}
    if "team_id" in patch:
        cleaned["team_id"] = check_id(patch["team_id"], "team_id", LABELS["team_id"])
    for field in TEXT_FIELDS:
        if field in patch:
            cleaned[field] = check_text(patch[field], field, LABELS[field])
    _check_measurements(patch, cleaned)
    return cleaned


def find_jersey_conflict(
    roster: Iterable[Any], jersey_number: Optional[int], exclude_id: Optional[int] = None
) -> Optional[Any]:
    """Return the teammate already wearing ``jersey_number``, if any."""
    if jersey_number is None:
        return None
    for teammate in roster:
        if exclude_id is not None and teammate.id == exclude_id:
            continue
        if teammate.jersey_number is not None and teammate.jersey_number == jersey_number:
            return teammate
    return None
