from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from football_api.app import create_app
from football_api.config import Settings
from football_api.services import GameService, PlayerService, PlayerStatsService, TeamService
from football_api.storage.db import Database
from football_api.storage.repositories import (
    GameRepository,
    PlayerRepository,
    PlayerStatsRepository,
    TeamRepository,
)

FIXED_NOW = datetime(2024, 9, 1, 12, 0, 0)
KICKOFF = datetime(2024, 9, 8, 17, 0, 0)


def fixed_clock():
    return FIXED_NOW


@pytest.fixture()
def database():
    db = Database("sqlite://")
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture()
def session(database):
    db = database.session_factory()
    yield db
    db.close()


@pytest.fixture()
def team_service(session):
    return TeamService(TeamRepository(session))


@pytest.fixture()
def player_service(session):
    return PlayerService(PlayerRepository(session), TeamRepository(session))


@pytest.fixture()
def game_service(session):
    return GameService(GameRepository(session), TeamRepository(session), clock=fixed_clock)


@pytest.fixture()
def stats_service(session):
    return PlayerStatsService(PlayerStatsRepository(session), PlayerRepository(session), GameRepository(session))


@pytest.fixture()
def patch_only_stats_service(session):
    return PlayerStatsService(
        PlayerStatsRepository(session),
        PlayerRepository(session),
        GameRepository(session),
        revalidate_merged=False,
    )


@pytest.fixture()
def chiefs(team_service):
    return team_service.create_team(
        {"name": "Chiefs", "city": "Kansas City", "conference": "AFC", "division": "West"}
    )


@pytest.fixture()
def eagles(team_service):
    return team_service.create_team(
        {"name": "Eagles", "city": "Philadelphia", "conference": "NFC", "division": "East"}
    )


@pytest.fixture()
def game(game_service, chiefs, eagles):
    return game_service.create_game(
        {
            "home_team_id": chiefs.id,
            "away_team_id": eagles.id,
            "season": "2024",
            "week": 1,
            "game_date": KICKOFF,
        }
    )


@pytest.fixture()
def quarterback(player_service, chiefs):
    return player_service.create_player(
        {"team_id": chiefs.id, "first_name": "Patrick", "last_name": "Mahomes", "position": "QB", "jersey_number": 15}
    )


@pytest.fixture()
def settings():
    return Settings(DATABASE_URL="sqlite://", LOG_LEVEL="WARNING", ENVIRONMENT="test")


@pytest.fixture()
def client(settings, database):
    app = create_app(settings, database=database, clock=fixed_clock)
    with TestClient(app) as test_client:
        yield test_client
