"""Repositories: one per table, each bound to a caller-supplied session."""
from football_api.storage.repositories.team_repo import TeamRepository
from football_api.storage.repositories.player_repo import PlayerRepository
from football_api.storage.repositories.game_repo import GameRepository
from football_api.storage.repositories.player_stats_repo import PlayerStatsRepository

__all__ = ["TeamRepository", "PlayerRepository", "GameRepository", "PlayerStatsRepository"]
