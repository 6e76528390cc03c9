from datetime import datetime

import pytest

from football_api.errors import ConflictError, NoFieldsProvidedError, NotFoundError, ValidationError

from tests.conftest import KICKOFF


# Teams


def test_team_round_trip(team_service):
    created = team_service.create_team(
        {"name": "Chiefs", "city": "Kansas City", "conference": "AFC", "division": "West"}
    )
    fetched = team_service.get_team(created.id)

    assert (fetched.id, fetched.name, fetched.city, fetched.conference, fetched.division) == (
        created.id, "Chiefs", "Kansas City", "AFC", "West"
    )
    assert fetched.created_at == created.created_at
    assert fetched.updated_at == created.updated_at

    team_service.delete_team(created.id)
    with pytest.raises(NotFoundError) as exc:
        team_service.get_team(created.id)
    assert exc.value.message == f"team with ID {created.id} not found"


def test_duplicate_team_is_a_conflict(team_service, chiefs):
    with pytest.raises(ConflictError) as exc:
        team_service.create_team({"name": "Chiefs", "city": "Kansas City", "conference": "AFC", "division": "West"})
    assert exc.value.message == "team 'Chiefs' from 'Kansas City' already exists"


def test_same_name_in_another_city_is_allowed(team_service, chiefs):
    team = team_service.create_team({"name": "Chiefs", "city": "Omaha", "conference": "AFC", "division": "West"})
    assert team.id != chiefs.id


def test_team_empty_update_rejected(team_service, chiefs):
    with pytest.raises(NoFieldsProvidedError):
        team_service.update_team(chiefs.id, {})


def test_team_update_applies_patch(team_service, chiefs):
    updated = team_service.update_team(chiefs.id, {"division": "north"})
    assert updated.division == "North"
    assert updated.name == "Chiefs"


def test_team_update_into_existing_name_city_conflicts(team_service, chiefs, eagles):
    with pytest.raises(ConflictError) as exc:
        team_service.update_team(eagles.id, {"name": "Chiefs", "city": "Kansas City"})
    assert exc.value.message == "team 'Chiefs' from 'Kansas City' already exists"
    assert team_service.get_team(eagles.id).name == "Eagles"


def test_update_missing_team_not_found(team_service):
    with pytest.raises(NotFoundError):
        team_service.update_team(42, {"name": "Jets"})


def test_list_teams_filters(team_service, chiefs, eagles):
    assert [t.id for t in team_service.list_teams()] == [chiefs.id, eagles.id]
    assert [t.id for t in team_service.list_teams(conference="nfc")] == [eagles.id]
    assert [t.id for t in team_service.list_teams(division="West")] == [chiefs.id]
    assert team_service.list_teams(conference="NFC", division="West") == []


def test_list_teams_rejects_unknown_conference(team_service):
    with pytest.raises(ValidationError):
        team_service.list_teams(conference="XFL")


def test_team_with_players_cannot_be_deleted(team_service, chiefs, quarterback):
    with pytest.raises(ConflictError) as exc:
        team_service.delete_team(chiefs.id)
    assert "1 player(s)" in exc.value.message


def test_team_with_games_cannot_be_deleted(team_service, eagles, game):
    with pytest.raises(ConflictError) as exc:
        team_service.delete_team(eagles.id)
    assert "1 game(s)" in exc.value.message


def test_delete_missing_team_not_found(team_service):
    with pytest.raises(NotFoundError):
        team_service.delete_team(7)


def test_invalid_id_rejected_before_lookup(team_service):
    with pytest.raises(ValidationError) as exc:
        team_service.get_team(0)
    assert exc.value.message == "invalid team ID: 0"


# Players


def test_player_requires_existing_team(player_service):
    with pytest.raises(NotFoundError) as exc:
        player_service.create_player({"team_id": 9, "first_name": "A", "last_name": "B", "position": "QB"})
    assert exc.value.message == "team with ID 9 not found"
    assert exc.value.field == "team_id"


def test_duplicate_jersey_on_same_team_conflicts(player_service, chiefs, quarterback):
    with pytest.raises(ConflictError) as exc:
        player_service.create_player(
            {"team_id": chiefs.id, "first_name": "Chad", "last_name": "Henne", "position": "QB", "jersey_number": 15}
        )
    assert exc.value.message.startswith("jersey number 15 is already taken by another player on this team")


def test_same_jersey_on_different_team_accepted(player_service, eagles, quarterback):
    player = player_service.create_player(
        {"team_id": eagles.id, "first_name": "Jalen", "last_name": "Hurts", "position": "QB", "jersey_number": 15}
    )
    assert player.jersey_number == 15


def test_players_without_numbers_do_not_collide(player_service, chiefs):
    for first_name in ("One", "Two"):
        player_service.create_player(
            {"team_id": chiefs.id, "first_name": first_name, "last_name": "Rookie", "position": "WR"}
        )
    assert len(player_service.list_players_by_team(chiefs.id)) == 2


def test_player_can_keep_own_jersey_on_update(player_service, quarterback):
    updated = player_service.update_player(quarterback.id, {"jersey_number": 15, "weight": 230})
    assert updated.weight == 230


def test_player_update_into_teammates_jersey_conflicts(player_service, chiefs, quarterback):
    backup = player_service.create_player(
        {"team_id": chiefs.id, "first_name": "Carson", "last_name": "Wentz", "position": "QB", "jersey_number": 11}
    )
    with pytest.raises(ConflictError):
        player_service.update_player(backup.id, {"jersey_number": 15})


def test_player_move_rechecks_destination_roster(player_service, eagles, quarterback):
    player_service.create_player(
        {"team_id": eagles.id, "first_name": "Jalen", "last_name": "Hurts", "position": "QB", "jersey_number": 15}
    )
    with pytest.raises(ConflictError):
        player_service.update_player(quarterback.id, {"team_id": eagles.id})

    moved = player_service.update_player(quarterback.id, {"team_id": eagles.id, "jersey_number": 2})
    assert (moved.team_id, moved.jersey_number) == (eagles.id, 2)


def test_player_move_to_missing_team_not_found(player_service, quarterback):
    with pytest.raises(NotFoundError):
        player_service.update_player(quarterback.id, {"team_id": 99})


def test_player_patch_null_clears_jersey(player_service, quarterback):
    assert player_service.update_player(quarterback.id, {"jersey_number": None}).jersey_number is None


def test_player_with_stats_cannot_be_deleted(player_service, stats_service, quarterback, game):
    stats_service.create_stats({"player_id": quarterback.id, "game_id": game.id, "passing_attempts": 10})
    with pytest.raises(ConflictError):
        player_service.delete_player(quarterback.id)


def test_list_players_by_missing_team_not_found(player_service):
    with pytest.raises(NotFoundError):
        player_service.list_players_by_team(3)


# Games


def game_values(home, away, **overrides):
    values = {"home_team_id": home, "away_team_id": away, "season": "2024", "week": 1, "game_date": KICKOFF}
    values.update(overrides)
    return values


def test_game_create_checks_both_teams(game_service, chiefs):
    with pytest.raises(NotFoundError) as exc:
        game_service.create_game(game_values(chiefs.id, 77))
    assert exc.value.message == "away team with ID 77 not found"
    assert exc.value.field == "away_team_id"


def test_game_same_team_rejected(game_service, chiefs):
    with pytest.raises(ValidationError):
        game_service.create_game(game_values(chiefs.id, chiefs.id))


def test_duplicate_game_conflicts(game_service, chiefs, eagles, game):
    with pytest.raises(ConflictError):
        game_service.create_game(game_values(chiefs.id, eagles.id))


def test_game_round_trip_keeps_timestamps(game_service, game):
    fetched = game_service.get_game(game.id)
    assert fetched.game_date == KICKOFF
    assert fetched.status == "scheduled"
    assert fetched.created_at == game.created_at


def test_game_update_rechecks_distinct_teams_after_merge(game_service, chiefs, game):
    with pytest.raises(ValidationError) as exc:
        game_service.update_game(game.id, {"away_team_id": chiefs.id})
    assert exc.value.message == "home team and away team cannot be the same"


def test_game_update_records_result(game_service, game):
    updated = game_service.update_game(game.id, {"status": "COMPLETED", "home_score": 27, "away_score": 20})
    assert (updated.status, updated.home_score, updated.away_score) == ("completed", 27, 20)


def test_game_date_outside_window_rejected(game_service, chiefs, eagles):
    with pytest.raises(ValidationError):
        game_service.create_game(game_values(chiefs.id, eagles.id, game_date=datetime(2022, 1, 1)))


def test_games_by_season_and_week(game_service, chiefs, eagles, game):
    later = game_service.create_game(game_values(eagles.id, chiefs.id, week=5, game_date=datetime(2024, 10, 6, 20)))

    assert [g.id for g in game_service.list_games_by_season("2024")] == [game.id, later.id]
    assert [g.id for g in game_service.list_games_by_week("2024", 5)] == [later.id]
    assert [g.id for g in game_service.list_games()] == [later.id, game.id]
    assert [g.id for g in game_service.list_games_by_team(chiefs.id)] == [later.id, game.id]


def test_games_by_week_checks_range(game_service):
    with pytest.raises(ValidationError):
        game_service.list_games_by_week("2024", 23)


def test_games_by_blank_season_rejected(game_service):
    with pytest.raises(ValidationError):
        game_service.list_games_by_season("  ")


def test_game_with_stats_cannot_be_deleted(game_service, stats_service, quarterback, game):
    stats_service.create_stats({"player_id": quarterback.id, "game_id": game.id, "passing_attempts": 10})
    with pytest.raises(ConflictError):
        game_service.delete_game(game.id)


def test_delete_game(game_service, game):
    game_service.delete_game(game.id)
    with pytest.raises(NotFoundError):
        game_service.get_game(game.id)


# Player stats


def test_stats_scenario(stats_service, quarterback, game):
    stats = stats_service.create_stats(
        {"player_id": quarterback.id, "game_id": game.id, "passing_attempts": 35, "passing_completions": 28}
    )
    assert stats_service.get_stats(stats.id).passing_completions == 28

    with pytest.raises(ConflictError) as exc:
        stats_service.create_stats({"player_id": quarterback.id, "game_id": game.id, "passing_attempts": 1})
    assert exc.value.message == f"player stats already exist for player {quarterback.id} in game {game.id}"


def test_store_uniqueness_is_a_conflict_when_lookup_misses(stats_service, monkeypatch, quarterback, game):
    payload = {"player_id": quarterback.id, "game_id": game.id, "passing_attempts": 35, "passing_completions": 28}
    first = stats_service.create_stats(payload)

    # A concurrent writer got in between the lookup and the insert
    monkeypatch.setattr(stats_service.stats, "exists_by_player_and_game", lambda player_id, game_id: False)
    with pytest.raises(ConflictError) as exc:
        stats_service.create_stats(payload)
    assert exc.value.message == f"player stats already exist for player {quarterback.id} in game {game.id}"

    # The session was rolled back and is still usable
    assert [s.id for s in stats_service.list_stats_by_player(quarterback.id)] == [first.id]
    assert stats_service.get_stats(first.id).passing_attempts == 35


def test_stats_require_existing_player(stats_service, game):
    with pytest.raises(NotFoundError) as exc:
        stats_service.create_stats({"player_id": 50, "game_id": game.id, "sacks": 1})
    assert exc.value.field == "player_id"


def test_stats_require_existing_game(stats_service, quarterback):
    with pytest.raises(NotFoundError) as exc:
        stats_service.create_stats({"player_id": quarterback.id, "game_id": 50, "sacks": 1})
    assert exc.value.message == "game with ID 50 not found"


def test_stats_listing(stats_service, quarterback, game):
    stats = stats_service.create_stats({"player_id": quarterback.id, "game_id": game.id, "rushing_yards": 12})
    assert [s.id for s in stats_service.list_stats_by_player(quarterback.id)] == [stats.id]
    assert [s.id for s in stats_service.list_stats_by_game(game.id)] == [stats.id]
    assert stats_service.get_stats_for_player_and_game(quarterback.id, game.id).id == stats.id

    with pytest.raises(NotFoundError):
        stats_service.list_stats_by_game(999)


def test_stats_addressed_through_wrong_player_not_found(stats_service, player_service, chiefs, quarterback, game):
    other = player_service.create_player(
        {"team_id": chiefs.id, "first_name": "Isiah", "last_name": "Pacheco", "position": "RB"}
    )
    stats = stats_service.create_stats({"player_id": quarterback.id, "game_id": game.id, "sacks": 0})
    with pytest.raises(NotFoundError):
        stats_service.get_player_stats(other.id, stats.id)


def test_partial_update_revalidated_against_stored_values(stats_service, quarterback, game):
    stats = stats_service.create_stats(
        {"player_id": quarterback.id, "game_id": game.id, "passing_attempts": 35, "passing_completions": 28}
    )
    with pytest.raises(ValidationError) as exc:
        stats_service.update_stats(stats.id, {"passing_attempts": 20})
    assert exc.value.message == "passing completions cannot exceed passing attempts"
    assert stats_service.get_stats(stats.id).passing_attempts == 35


def test_patch_only_mode_skips_stored_values(patch_only_stats_service, quarterback, game):
    service = patch_only_stats_service
    stats = service.create_stats(
        {"player_id": quarterback.id, "game_id": game.id, "passing_attempts": 35, "passing_completions": 28}
    )
    updated = service.update_stats(stats.id, {"passing_attempts": 20})
    assert (updated.passing_attempts, updated.passing_completions) == (20, 28)

    with pytest.raises(ValidationError):
        service.update_stats(stats.id, {"passing_attempts": 20, "passing_completions": 21})


def test_stats_patch_null_clears_counter(stats_service, quarterback, game):
    stats = stats_service.create_stats(
        {"player_id": quarterback.id, "game_id": game.id, "tackles": 3, "solo_tackles": 2, "assisted_tackles": 1}
    )
    updated = stats_service.update_stats(stats.id, {"tackles": None, "solo_tackles": 5})
    assert (updated.tackles, updated.solo_tackles, updated.assisted_tackles) == (None, 5, 1)


def test_stats_empty_update_rejected(stats_service, quarterback, game):
    stats = stats_service.create_stats({"player_id": quarterback.id, "game_id": game.id, "punts": 4})
    with pytest.raises(NoFieldsProvidedError):
        stats_service.update_stats(stats.id, {})


def test_delete_stats(stats_service, quarterback, game):
    stats = stats_service.create_stats({"player_id": quarterback.id, "game_id": game.id, "punts": 4})
    stats_service.delete_stats(stats.id)
    with pytest.raises(NotFoundError):
        stats_service.delete_stats(stats.id)
