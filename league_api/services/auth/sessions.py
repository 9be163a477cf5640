"""Database-backed user directory and session store."""

import secrets
from datetime import datetime, timedelta, timezone

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from league_api.config import settings
from league_api.models import User, UserSession
from league_api.services.auth.types import AuthUser, UserCredentials
from league_api.services.league.store import StoreError

logger = structlog.get_logger()


def make_user(row: User) -> AuthUser:
    return AuthUser(id=row.id, username=row.username, name=row.name)


class SqlUserDirectory:
    """Looks up and registers users."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def lookup_user(self, username: str) -> UserCredentials | None:
        try:
            result = await self.session.execute(
                select(User).where(User.username == username)
            )
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreError(f"lookup_user failed: {e}") from e

        if row is None:
            return None
        return UserCredentials(user=make_user(row), hashed_password=row.hashed_password)

    async def create_user(self, username: str, name: str, hashed_password: str) -> AuthUser:
        row = User(username=username, name=name, hashed_password=hashed_password)
        try:
            self.session.add(row)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreError(f"create_user failed: {e}") from e
        return make_user(row)


class SqlSessionStore:
    """
    Issues opaque bearer tokens that expire after ``session_expire_minutes``.

    A session used in the second half of its lifetime is renewed for a full
    lifetime, so active users stay signed in.
    """

    def __init__(self, session: AsyncSession, expire_minutes: int | None = None):
        self.session = session
        self.lifetime = timedelta(
            minutes=settings.session_expire_minutes if expire_minutes is None else expire_minutes
        )

    async def create_session(self, user_id: int) -> str:
        token = secrets.token_urlsafe(32)
        row = UserSession(
            id=token,
            user_id=user_id,
            expires_at=datetime.now(timezone.utc) + self.lifetime,
        )
        try:
            self.session.add(row)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreError(f"create_session failed: {e}") from e
        return token

    async def validate_session(self, token: str) -> AuthUser | None:
        try:
            result = await self.session.execute(
                select(UserSession).where(UserSession.id == token)
            )
            row = result.unique().scalar_one_or_none()
            if row is None:
                return None

            if row.is_expired:
                logger.info("Session expired", user_id=row.user_id)
                await self.session.execute(delete(UserSession).where(UserSession.id == token))
                await self.session.commit()
                return None

            if row.expires_in < self.lifetime / 2:
                row.expires_at = datetime.now(timezone.utc) + self.lifetime
                await self.session.commit()
                logger.debug("Session renewed", user_id=row.user_id)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreError(f"validate_session failed: {e}") from e

        return make_user(row.user)

    async def invalidate_session(self, token: str) -> None:
        try:
            await self.session.execute(delete(UserSession).where(UserSession.id == token))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreError(f"invalidate_session failed: {e}") from e
