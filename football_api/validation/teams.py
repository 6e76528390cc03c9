"""Team request rules."""
from typing import Any, Dict, Mapping

from football_api.validation.common import (
    check_text,
    ensure_fields_present,
    normalize_choice,
    reject_null,
    require_text,
)

CONFERENCES = ("AFC", "NFC")
DIVISIONS = ("North", "South", "East", "West")

TEAM_FIELDS = ("name", "city", "conference", "division")

LABELS = {
    "name": "team name",
    "city": "city",
    "conference": "conference",
    "division": "division",
}


def validate_team_create(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate a create payload and return the cleaned values."""
    cleaned = {field: require_text(data.get(field), field, LABELS[field]) for field in TEAM_FIELDS}
    cleaned["conference"] = normalize_choice(cleaned["conference"], CONFERENCES, "conference", "conference")
    cleaned["division"] = normalize_choice(cleaned["division"], DIVISIONS, "division", "division")
    return cleaned


def validate_team_patch(patch: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate the supplied subset of team fields."""
    ensure_fields_present(patch)
    reject_null(patch, TEAM_FIELDS, LABELS)

    cleaned = {}
    for field in TEAM_FIELDS:
        if field in patch:
            cleaned[field] = check_text(patch[field], field, LABELS[field])

    if "conference" in cleaned:
        cleaned["conference"] = normalize_choice(cleaned["conference"], CONFERENCES, "conference", "conference")
    if "division" in cleaned:
        cleaned["division"] = normalize_choice(cleaned["division"], DIVISIONS, "division", "division")
    return cleaned


def normalize_conference(value: str) -> str:
    """Used by list filters: blank is an error, unknown values are rejected."""
    return normalize_choice(check_text(value, "conference", "conference"), CONFERENCES, "conference", "conference")


def normalize_division(value: str) -> str:
    return normalize_choice(check_text(value, "division", "division"), DIVISIONS, "division", "division")
