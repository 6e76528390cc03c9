"""Player statistics rules.

Counters are optional and non-negative. A handful of them are tied together
(completions vs. attempts, tackle totals, kicking, fumbles); each relation is
only checked when every counter it mentions has a value, so partial box
scores are accepted.
"""
from typing import Any, Callable, Dict, Mapping, NamedTuple, Tuple

from football_api.errors import ValidationError
from football_api.validation.common import check_non_negative, ensure_fields_present, require_id


class StatField(NamedTuple):
    name: str
    label: str


STAT_FIELDS: Tuple[StatField, ...] = (
    StatField("passing_attempts", "passing attempts"),
    StatField("passing_completions", "passing completions"),
    StatField("passing_yards", "passing yards"),
    StatField("passing_touchdowns", "passing touchdowns"),
    StatField("passing_interceptions", "passing interceptions"),
    StatField("rushing_attempts", "rushing attempts"),
    StatField("rushing_yards", "rushing yards"),
    StatField("rushing_touchdowns", "rushing touchdowns"),
    StatField("receiving_targets", "receiving targets"),
    StatField("receptions", "receptions"),
    StatField("receiving_yards", "receiving yards"),
    StatField("receiving_touchdowns", "receiving touchdowns"),
    StatField("fumbles", "fumbles"),
    StatField("fumbles_lost", "fumbles lost"),
    StatField("tackles", "tackles"),
    StatField("solo_tackles", "solo tackles"),
    StatField("assisted_tackles", "assisted tackles"),
    StatField("sacks", "sacks"),
    StatField("defensive_interceptions", "defensive interceptions"),
    StatField("pass_deflections", "pass deflections"),
    StatField("forced_fumbles", "forced fumbles"),
    StatField("fumble_recoveries", "fumble recoveries"),
    StatField("defensive_touchdowns", "defensive touchdowns"),
    StatField("field_goals_attempted", "field goals attempted"),
    StatField("field_goals_made", "field goals made"),
    StatField("extra_points_attempted", "extra points attempted"),
    StatField("extra_points_made", "extra points made"),
    StatField("punts", "punts"),
    StatField("punt_yards", "punt yards"),
    StatField("kick_returns", "kick returns"),
    StatField("kick_return_yards", "kick return yards"),
    StatField("kick_return_touchdowns", "kick return touchdowns"),
    StatField("punt_returns", "punt returns"),
    StatField("punt_return_yards", "punt return yards"),
    StatField("punt_return_touchdowns", "punt return touchdowns"),
)

STAT_FIELD_NAMES: Tuple[str, ...] = tuple(stat.name for stat in STAT_FIELDS)


class StatRule(NamedTuple):
    fields: Tuple[str, ...]
    holds: Callable[..., bool]
    message: str


STAT_RULES: Tuple[StatRule, ...] = (
    StatRule(
        ("passing_completions", "passing_attempts"),
        lambda completions, attempts: completions <= attempts,
        "passing completions cannot exceed passing attempts",
    ),
    StatRule(
        ("tackles", "solo_tackles", "assisted_tackles"),
        lambda total, solo, assisted: total == solo + assisted,
        "total tackles must equal solo tackles plus assisted tackles",
    ),
    StatRule(
        ("field_goals_made", "field_goals_attempted"),
        lambda made, attempted: made <= attempted,
        "field goals made cannot exceed field goals attempted",
    ),
    StatRule(
        ("extra_points_made", "extra_points_attempted"),
        lambda made, attempted: made <= attempted,
        "extra points made cannot exceed extra points attempted",
    ),
    StatRule(
        ("fumbles_lost", "fumbles"),
        lambda lost, total: lost <= total,
        "fumbles lost cannot exceed total fumbles",
    ),
)


def check_counters(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Non-negativity for every counter present in ``values``."""
    cleaned = {}
    for stat in STAT_FIELDS:
        if stat.name in values:
            cleaned[stat.name] = check_non_negative(values[stat.name], stat.name, stat.label)
    return cleaned


def check_stat_invariants(values: Mapping[str, Any]) -> None:
    """Apply every cross-field rule whose operands all have a value."""
    for rule in STAT_RULES:
        operands = [values.get(field) for field in rule.fields]
        if any(operand is None for operand in operands):
            continue
        if not rule.holds(*operands):
            raise ValidationError(rule.message, field=rule.fields[0])


def validate_stats_create(data: Mapping[str, Any]) -> Dict[str, Any]:
    cleaned: Dict[str, Any] = {
        "player_id": require_id(data.get("player_id"), "player_id", "player ID"),
        "game_id": require_id(data.get("game_id"), "game_id", "game ID"),
    }

    counters = {name: data.get(name) for name in STAT_FIELD_NAMES}
    if all(value is None for value in counters.values()):
        raise ValidationError("at least one statistic must be provided")

    cleaned.update(check_counters(counters))
    check_stat_invariants(cleaned)
    return cleaned


def validate_stats_patch(patch: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate the counters supplied in a patch, on their own."""
    counters = {name: patch[name] for name in STAT_FIELD_NAMES if name in patch}
    ensure_fields_present(counters)

    cleaned = check_counters(counters)
    check_stat_invariants(cleaned)
    return cleaned


def stat_values(stats: Any) -> Dict[str, Any]:
    """Snapshot the counters of a stored row for merging."""
    return {name: getattr(stats, name) for name in STAT_FIELD_NAMES}
