"""Database-backed collaborators."""

from league_api.services.data.league_store import SqlLeagueStore

__all__ = [
    "SqlLeagueStore",
]
