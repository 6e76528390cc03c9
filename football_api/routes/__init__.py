"""API routes module."""
from . import health
from . import teams
from . import players
from . import games
from . import player_stats

__all__ = ["health", "teams", "players", "games", "player_stats"]
