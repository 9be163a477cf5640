"""In-memory stand-ins for the storage and auth collaborators."""

import itertools
from dataclasses import replace
from typing import Any

from league_api.services.auth.types import AuthUser, UserCredentials
from league_api.services.league import messages
from league_api.services.league.store import StoreError
from league_api.services.league.types import Failure, Game, ProtoGame, Team
from league_api.services.league.validators import make_slug


class InMemoryLeagueStore:
    """LeagueStore over plain dicts; set ``broken`` to make every call fail."""

    def __init__(self):
        self.teams: dict[int, Team] = {}
        self.games: dict[int, dict[str, Any]] = {}
        self._team_ids = itertools.count(1)
        self._game_ids = itertools.count(1)
        self.broken = False
        self.team_lookups: list[str] = []

    def _check(self) -> None:
        if self.broken:
            raise StoreError("connection refused")

    def _team_id(self, slug: str) -> int | None:
        for team_id, team in self.teams.items():
            if team.slug == slug:
                return team_id
        return None

    def _game(self, game_id: int) -> Game:
        row = self.games[game_id]
        return Game(
            id=game_id,
            date=row["date"],
            home=replace(self.teams[row["home"]]),
            away=replace(self.teams[row["away"]]),
            home_score=row["home_score"],
            away_score=row["away_score"],
        )

    async def lookup_team(self, slug):
        self._check()
        team_id = self._team_id(slug)
        return replace(self.teams[team_id]) if team_id is not None else None

    async def lookup_team_id(self, slug):
        self._check()
        self.team_lookups.append(slug)
        return self._team_id(slug)

    async def list_teams(self):
        self._check()
        return [replace(team) for team in self.teams.values()]

    async def create_team(self, name, description):
        self._check()
        slug = make_slug(name)
        if self._team_id(slug) is not None:
            return Failure.conflict(messages.TEAM_EXISTS)
        team = Team(slug=slug, name=name, description=description)
        self.teams[next(self._team_ids)] = team
        return replace(team)

    async def update_team(self, old_slug, team):
        self._check()
        team_id = self._team_id(old_slug)
        if team_id is None:
            return None
        self.teams[team_id] = replace(team)
        return replace(team)

    async def delete_team(self, slug):
        self._check()
        team_id = self._team_id(slug)
        if team_id is None:
            return False
        del self.teams[team_id]
        self.games = {
            game_id: row
            for game_id, row in self.games.items()
            if team_id not in (row["home"], row["away"])
        }
        return True

    async def lookup_game(self, game_id):
        self._check()
        return self._game(game_id) if game_id in self.games else None

    async def list_games(self):
        self._check()
        return [self._game(game_id) for game_id in self.games]

    async def create_game(self, proto: ProtoGame):
        self._check()
        game_id = next(self._game_ids)
        self.games[game_id] = {
            "date": proto.date,
            "home": proto.home,
            "away": proto.away,
            "home_score": proto.home_score,
            "away_score": proto.away_score,
        }
        return self._game(game_id)

    async def update_game(self, game_id, fields):
        self._check()
        if game_id not in self.games:
            return None
        self.games[game_id].update(fields)
        return self._game(game_id)

    async def delete_game(self, game_id):
        self._check()
        return self.games.pop(game_id, None) is not None


class PlaintextHasher:
    """Password verifier for tests; a "hash" is the password prefixed with ``hashed:``."""

    def hash(self, plaintext: str) -> str:
        return f"hashed:{plaintext}"

    def verify(self, password_hash: str, plaintext: str) -> bool:
        return password_hash == self.hash(plaintext)


class InMemoryUserDirectory:
    def __init__(self):
        self.users: dict[str, UserCredentials] = {}

    def add(self, username: str, password: str, name: str = "Test User") -> AuthUser:
        user = AuthUser(id=len(self.users) + 1, username=username, name=name)
        self.users[username] = UserCredentials(
            user=user, hashed_password=PlaintextHasher().hash(password)
        )
        return user

    async def lookup_user(self, username):
        return self.users.get(username)


class InMemorySessionStore:
    def __init__(self, users: InMemoryUserDirectory):
        self.users = users
        self.sessions: dict[str, int] = {}
        self.expired: set[str] = set()
        self._tokens = itertools.count(1)

    async def create_session(self, user_id):
        token = f"token-{next(self._tokens)}"
        self.sessions[token] = user_id
        return token

    async def validate_session(self, token):
        if token in self.expired:
            self.sessions.pop(token, None)
            return None
        user_id = self.sessions.get(token)
        if user_id is None:
            return None
        for credentials in self.users.users.values():
            if credentials.user.id == user_id:
                return credentials.user
        return None

    async def invalidate_session(self, token):
        self.sessions.pop(token, None)
