"""Login, session validation and logout."""

from typing import Any, Protocol

import structlog

from league_api.services.auth.passwords import PasswordHasher
from league_api.services.auth.types import AuthUser, UserCredentials
from league_api.services.league import messages
from league_api.services.league.store import StoreError
from league_api.services.league.types import Failure

logger = structlog.get_logger()


class UserDirectory(Protocol):
    async def lookup_user(self, username: str) -> UserCredentials | None: ...


class SessionStore(Protocol):
    async def create_session(self, user_id: int) -> str: ...

    async def validate_session(self, token: str) -> AuthUser | None: ...

    async def invalidate_session(self, token: str) -> None: ...


class PasswordVerifier(Protocol):
    def verify(self, password_hash: str, plaintext: str) -> bool: ...


async def login(
    users: UserDirectory,
    sessions: SessionStore,
    username: Any,
    password: Any,
    hasher: PasswordVerifier | None = None,
) -> str | Failure:
    """
    Exchange a username/password for a session token.

    Unknown users and wrong passwords produce the same message so the
    response does not reveal which usernames exist.
    """
    if username is None:
        return Failure.bad_request(messages.MISSING_USERNAME)
    if password is None:
        return Failure.bad_request(messages.MISSING_PASSWORD)

    hasher = hasher or PasswordHasher()
    try:
        credentials = await users.lookup_user(str(username))
        if credentials is None or not hasher.verify(credentials.hashed_password, str(password)):
            logger.warning("Failed login", username=username)
            return Failure.bad_request(messages.INVALID_CREDENTIALS)

        token = await sessions.create_session(credentials.user.id)
    except StoreError as e:
        logger.error("Login failed at storage layer", error=str(e))
        return Failure.storage(messages.STORAGE_ERROR)

    logger.info("User logged in", user_id=credentials.user.id)
    return token


async def authenticate(sessions: SessionStore, token: str) -> AuthUser | None | Failure:
    """Resolve a bearer token to its user; ``None`` for unknown or expired tokens."""
    try:
        return await sessions.validate_session(token)
    except StoreError as e:
        logger.error("Session validation failed at storage layer", error=str(e))
        return Failure.storage(messages.STORAGE_ERROR)


async def logout(sessions: SessionStore, token: str) -> None | Failure:
    try:
        await sessions.invalidate_session(token)
    except StoreError as e:
        logger.error("Logout failed at storage layer", error=str(e))
        return Failure.storage(messages.STORAGE_ERROR)
    return None
