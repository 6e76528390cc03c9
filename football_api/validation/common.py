"""Field-level rules shared by every entity family."""
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

from football_api.errors import NoFieldsProvidedError, ValidationError

# Largest value a signed 64-bit INTEGER column holds
MAX_INT = 2**63 - 1


def ensure_fields_present(patch: Mapping[str, Any]) -> None:
    """Reject a patch that would not change anything."""
    if not patch:
        raise NoFieldsProvidedError()


def check_entity_id(entity_id: int, entity: str) -> int:
    """Identifiers taken from the URL must be positive before any lookup."""
    if entity_id is None or entity_id <= 0 or entity_id > MAX_INT:
        raise ValidationError(f"invalid {entity} ID: {entity_id}", field="id")
    return entity_id


def _check_upper_bound(value: int, field: str, label: str) -> int:
    if value > MAX_INT:
        raise ValidationError(f"{label} cannot exceed {MAX_INT}", field=field)
    return value


def require_id(value: Optional[int], field: str, label: str) -> int:
    if value is None or value <= 0:
        raise ValidationError(f"{label} is required and must be positive", field=field)
    return _check_upper_bound(value, field, label)


def check_id(value: Optional[int], field: str, label: str) -> int:
    """Same as ``require_id`` with update wording."""
    if value is None or value <= 0:
        raise ValidationError(f"{label} must be positive", field=field)
    return _check_upper_bound(value, field, label)


def require_text(value: Optional[str], field: str, label: str) -> str:
    """Return the trimmed value, rejecting blanks on create."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{label} is required", field=field)
    return cleaned


def check_text(value: Optional[str], field: str, label: str) -> str:
    """Return the trimmed value, rejecting blanks on update."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{label} cannot be empty", field=field)
    return cleaned


def normalize_choice(value: str, choices: Sequence[str], field: str, label: str) -> str:
    """Case-insensitive membership; returns the canonical spelling."""
    lowered = value.strip().lower()
    for choice in choices:
        if choice.lower() == lowered:
            return choice
    raise ValidationError(f"{label} must be one of: {', '.join(choices)}", field=field)


def check_range(
    value: Optional[int], low: int, high: int, field: str, label: str, unit: str = ""
) -> Optional[int]:
    if value is None:
        return None
    if value < low or value > high:
        suffix = f" {unit}" if unit else ""
        raise ValidationError(f"{label} must be between {low} and {high}{suffix}", field=field)
    return value


def check_non_negative(value: Optional[int], field: str, label: str) -> Optional[int]:
    if value is not None and value < 0:
        raise ValidationError(f"{label} cannot be negative", field=field)
    if value is not None:
        _check_upper_bound(value, field, label)
    return value


def reject_null(patch: Mapping[str, Any], fields: Iterable[str], labels: Mapping[str, str]) -> None:
    """Mandatory columns can be patched but never cleared."""
    for field in fields:
        if field in patch and patch[field] is None:
            raise ValidationError(f"{labels[field]} cannot be empty", field=field)


def merge_patch(current: Mapping[str, Any], patch: Mapping[str, Any]) -> Dict[str, Any]:
    """Overlay the fields present in ``patch`` onto ``current``.

    Presence is what counts: a key mapped to ``None`` clears the value.
    """
    merged = dict(current)
    merged.update(patch)
    return merged
