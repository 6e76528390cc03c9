"""Persistence: engine/session management, ORM models and repositories."""
