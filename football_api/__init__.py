"""Football teams, players, games and player statistics API."""

__version__ = "0.1.0"
