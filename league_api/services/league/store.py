"""Persistence contract consumed by the league core."""

from typing import Any, Protocol

from league_api.services.league.types import (
    Failure,
    Game,
    GameId,
    ProtoGame,
    Slug,
    Team,
    TeamId,
)


# Largest value the integer id and score columns can hold
MAX_STORED_INT = 2**31 - 1


class StoreError(Exception):
    """The storage backend itself failed; not attributable to user input."""


class LeagueStore(Protocol):
    """
    CRUD access to teams and games.

    Lookups return ``None`` when the record is absent. Mutations return
    ``None``/``False`` when the targeted record vanished before the write.
    Backend faults raise :class:`StoreError`.
    """

    async def lookup_team(self, slug: Slug) -> Team | None: ...

    async def lookup_team_id(self, slug: Slug) -> TeamId | None: ...

    async def list_teams(self) -> list[Team]: ...

    async def create_team(self, name: str, description: str) -> Team | Failure: ...

    async def update_team(self, old_slug: Slug, team: Team) -> Team | None: ...

    async def delete_team(self, slug: Slug) -> bool: ...

    async def lookup_game(self, game_id: GameId) -> Game | None: ...

    async def list_games(self) -> list[Game]: ...

    async def create_game(self, proto: ProtoGame) -> Game: ...

    async def update_game(self, game_id: GameId, fields: dict[str, Any]) -> Game | None: ...

    async def delete_game(self, game_id: GameId) -> bool: ...
