"""Game database model."""

import datetime as dt

from sqlalchemy import CheckConstraint, Date, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from league_api.database import Base
from league_api.models.team import Team


class Game(Base):
    """A played game between two distinct teams."""

    __tablename__ = "games"
    __table_args__ = (
        CheckConstraint("home <> away", name="ck_games_distinct_teams"),
        CheckConstraint("home_score >= 0", name="ck_games_home_score"),
        CheckConstraint("away_score >= 0", name="ck_games_away_score"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)

    home: Mapped[int] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False
    )
    away: Mapped[int] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False
    )

    home_score: Mapped[int] = mapped_column(Integer, nullable=False)
    away_score: Mapped[int] = mapped_column(Integer, nullable=False)

    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=dt.datetime.utcnow
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=dt.datetime.utcnow, onupdate=dt.datetime.utcnow
    )

    # Relationships
    home_team: Mapped[Team] = relationship(Team, foreign_keys=[home], lazy="joined")
    away_team: Mapped[Team] = relationship(Team, foreign_keys=[away], lazy="joined")
