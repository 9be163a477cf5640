"""SQLAlchemy database models."""

from league_api.models.team import Team
from league_api.models.game import Game
from league_api.models.user import User
from league_api.models.user_session import UserSession

__all__ = [
    "Team",
    "Game",
    "User",
    "UserSession",
]
