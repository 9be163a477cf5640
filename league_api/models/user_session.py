"""User session database model."""

from datetime import datetime, timedelta, timezone

from sqlalchemy import String, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from league_api.database import Base
from league_api.models.user import User


class UserSession(Base):
    """Opaque bearer token issued at login."""

    __tablename__ = "user_sessions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    user: Mapped[User] = relationship(User, lazy="joined")

    @property
    def expires_in(self) -> timedelta:
        expires_at = self.expires_at
        # Handle timezone-naive datetimes
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at - datetime.now(timezone.utc)

    @property
    def is_expired(self) -> bool:
        return self.expires_in <= timedelta(0)

