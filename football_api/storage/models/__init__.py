"""Database models."""
from football_api.storage.models.team import Team
from football_api.storage.models.game import Game
from football_api.storage.models.player import Player
from football_api.storage.models.player_stats import PlayerStats

__all__ = ['Team', 'Game', 'Player', 'PlayerStats']
