"""Authentication: bcrypt password checks and database-backed sessions."""

from league_api.services.auth.passwords import PasswordHasher
from league_api.services.auth.service import authenticate, login, logout
from league_api.services.auth.sessions import SqlSessionStore, SqlUserDirectory
from league_api.services.auth.types import AuthUser, UserCredentials

__all__ = [
    "AuthUser",
    "UserCredentials",
    "PasswordHasher",
    "SqlSessionStore",
    "SqlUserDirectory",
    "authenticate",
    "login",
    "logout",
]
