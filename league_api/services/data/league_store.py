"""SQLAlchemy-backed implementation of the league store."""

from typing import Any

import structlog
from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from league_api.models import Game as GameModel, Team as TeamModel
from league_api.services.league import messages
from league_api.services.league.store import StoreError
from league_api.services.league.types import Failure, Game, ProtoGame, Team
from league_api.services.league.validators import make_slug

logger = structlog.get_logger()


def make_team(row: TeamModel) -> Team:
    return Team(slug=row.slug, name=row.name, description=row.description)


def make_game(row: GameModel) -> Game:
    return Game(
        id=row.id,
        date=row.date,
        home=make_team(row.home_team),
        away=make_team(row.away_team),
        home_score=row.home_score,
        away_score=row.away_score,
    )


class SqlLeagueStore:
    """
    League store over one request-scoped AsyncSession.

    Each mutation commits on its own; there are no multi-statement
    transactions. Any SQLAlchemyError is rolled back and re-raised as
    StoreError.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _fail(self, action: str, error: SQLAlchemyError) -> StoreError:
        await self.session.rollback()
        logger.error("Database error", action=action, error=str(error))
        return StoreError(f"{action} failed: {error}")

    async def lookup_team(self, slug: str) -> Team | None:
        try:
            result = await self.session.execute(
                select(TeamModel).where(TeamModel.slug == slug)
            )
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise await self._fail("lookup_team", e) from e
        return make_team(row) if row else None

    async def lookup_team_id(self, slug: str) -> int | None:
        try:
            result = await self.session.execute(
                select(TeamModel.id).where(TeamModel.slug == slug)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise await self._fail("lookup_team_id", e) from e

    async def list_teams(self) -> list[Team]:
        try:
            result = await self.session.execute(select(TeamModel).order_by(TeamModel.id))
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            raise await self._fail("list_teams", e) from e
        return [make_team(row) for row in rows]

    async def create_team(self, name: str, description: str) -> Team | Failure:
        slug = make_slug(name)
        if await self.lookup_team(slug) is not None:
            return Failure.conflict(messages.TEAM_EXISTS)

        row = TeamModel(slug=slug, name=name, description=description)
        try:
            self.session.add(row)
            await self.session.commit()
        except IntegrityError:
            # Lost a race against a concurrent insert of the same slug
            await self.session.rollback()
            return Failure.conflict(messages.TEAM_EXISTS)
        except SQLAlchemyError as e:
            raise await self._fail("create_team", e) from e
        return make_team(row)

    async def update_team(self, old_slug: str, team: Team) -> Team | None:
        try:
            result = await self.session.execute(
                update(TeamModel)
                .where(TeamModel.slug == old_slug)
                .values(slug=team.slug, name=team.name, description=team.description)
                .returning(TeamModel.slug, TeamModel.name, TeamModel.description)
            )
            row = result.one_or_none()
            await self.session.commit()
        except SQLAlchemyError as e:
            raise await self._fail("update_team", e) from e

        if row is None:
            return None
        return Team(slug=row.slug, name=row.name, description=row.description)

    async def delete_team(self, slug: str) -> bool:
        try:
            result = await self.session.execute(
                delete(TeamModel).where(TeamModel.slug == slug)
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            raise await self._fail("delete_team", e) from e
        return result.rowcount > 0

    async def _load_game(self, game_id: int) -> GameModel | None:
        result = await self.session.execute(
            select(GameModel)
            .where(GameModel.id == game_id)
            .execution_options(populate_existing=True)
        )
        return result.unique().scalar_one_or_none()

    async def lookup_game(self, game_id: int) -> Game | None:
        try:
            row = await self._load_game(game_id)
        except SQLAlchemyError as e:
            raise await self._fail("lookup_game", e) from e
        return make_game(row) if row else None

    async def list_games(self) -> list[Game]:
        try:
            result = await self.session.execute(
                select(GameModel).order_by(GameModel.date.desc(), GameModel.id)
            )
            rows = result.unique().scalars().all()
        except SQLAlchemyError as e:
            raise await self._fail("list_games", e) from e
        return [make_game(row) for row in rows]

    async def create_game(self, proto: ProtoGame) -> Game:
        row = GameModel(
            date=proto.date,
            home=proto.home,
            away=proto.away,
            home_score=proto.home_score,
            away_score=proto.away_score,
        )
        try:
            self.session.add(row)
            await self.session.commit()
            created = await self._load_game(row.id)
        except SQLAlchemyError as e:
            raise await self._fail("create_game", e) from e

        if created is None:
            raise StoreError("create_game failed: inserted game not found")
        return make_game(created)

    async def update_game(self, game_id: int, fields: dict[str, Any]) -> Game | None:
        try:
            result = await self.session.execute(
                update(GameModel)
                .where(GameModel.id == game_id)
                .values(**fields)
                .returning(GameModel.id)
            )
            updated_id = result.scalar_one_or_none()
            await self.session.commit()
            if updated_id is None:
                return None
            row = await self._load_game(updated_id)
        except SQLAlchemyError as e:
            raise await self._fail("update_game", e) from e
        return make_game(row) if row else None

    async def delete_game(self, game_id: int) -> bool:
        try:
            result = await self.session.execute(
                delete(GameModel).where(GameModel.id == game_id)
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            raise await self._fail("delete_game", e) from e
        return result.rowcount > 0
