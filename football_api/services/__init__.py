"""Service layer: validation, existence checks and persistence per entity."""
from football_api.services.team_service import TeamService
from football_api.services.player_service import PlayerService
from football_api.services.game_service import GameService
from football_api.services.player_stats_service import PlayerStatsService

__all__ = ["TeamService", "PlayerService", "GameService", "PlayerStatsService"]
