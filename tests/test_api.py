"""HTTP tests through the ASGI app with in-memory collaborators."""

from datetime import date, timedelta

import httpx
import pytest
import pytest_asyncio

from league_api.api.deps import (
    get_league_store,
    get_password_hasher,
    get_session_store,
    get_user_directory,
)
from league_api.main import app
from league_api.services.league import messages
from tests.fakes import InMemorySessionStore

pytestmark = [pytest.mark.api, pytest.mark.asyncio]


@pytest_asyncio.fixture
async def client(league, users, sessions, hasher):
    app.dependency_overrides[get_league_store] = lambda: league
    app.dependency_overrides[get_session_store] = lambda: sessions
    app.dependency_overrides[get_user_directory] = lambda: users
    app.dependency_overrides[get_password_hasher] = lambda: hasher

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def auth_headers(sessions: InMemorySessionStore) -> dict:
    token = await sessions.create_session(1)
    return {"Authorization": f"Bearer {token}"}


def recent(days_ago: int = 1) -> str:
    return (date.today() - timedelta(days=days_ago)).isoformat()


class TestIndexAndLogin:
    async def test_index_lists_resources(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert {"href": "/games", "methods": ["GET", "POST"]} in response.json()

    async def test_login_returns_token(self, client):
        response = await client.post("/login", json={"username": "admin", "password": "hunter22"})

        assert response.status_code == 200
        assert response.json()["token"]

    async def test_login_with_wrong_password(self, client):
        response = await client.post("/login", json={"username": "admin", "password": "nope"})

        assert response.status_code == 400
        assert response.json() == {"error": messages.INVALID_CREDENTIALS}

    async def test_login_without_username(self, client):
        response = await client.post("/login", json={"password": "hunter22"})

        assert response.status_code == 400
        assert response.json() == {"error": messages.MISSING_USERNAME}

    async def test_logout_invalidates_token(self, client, auth_headers):
        response = await client.post("/logout", headers=auth_headers)
        assert response.status_code == 204

        response = await client.post("/teams", json={"name": "Delta"}, headers=auth_headers)
        assert response.status_code == 401


class TestAuthentication:
    async def test_missing_header(self, client):
        response = await client.post("/teams", json={"name": "Delta"})

        assert response.status_code == 401
        assert response.json() == {"error": messages.MISSING_AUTH_HEADER}

    async def test_header_without_token(self, client):
        response = await client.post(
            "/teams", json={"name": "Delta"}, headers={"Authorization": "Bearer"}
        )

        assert response.status_code == 401
        assert response.json() == {"error": messages.MISSING_SESSION_TOKEN}

    async def test_invalid_token(self, client):
        response = await client.delete(
            "/teams/alpha", headers={"Authorization": "Bearer forged"}
        )

        assert response.status_code == 401
        assert response.json() == {"error": messages.INVALID_SESSION_TOKEN}

    async def test_reads_need_no_session(self, client):
        response = await client.get("/teams")

        assert response.status_code == 200


class TestTeamsApi:
    async def test_create_and_fetch_by_slug(self, client, auth_headers):
        response = await client.post(
            "/teams", json={"name": "Foo Bar", "description": "x"}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json() == {"slug": "foo-bar", "name": "Foo Bar", "description": "x"}

        response = await client.get("/teams/foo-bar")
        assert response.json()["name"] == "Foo Bar"

    async def test_duplicate_team_is_conflict(self, client, auth_headers):
        response = await client.post(
            "/teams", json={"name": "Alpha", "description": "other"}, headers=auth_headers
        )

        assert response.status_code == 409
        assert response.json() == {"error": messages.TEAM_EXISTS}

    async def test_invalid_team_lists_field_errors(self, client, auth_headers):
        response = await client.post("/teams", json={"description": 5}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == [
            {"field": "name", "message": messages.MISSING_TEAM_NAME},
            {"field": "description", "message": messages.DESCRIPTION_NOT_TEXT},
        ]

    async def test_non_text_description_is_a_field_error(self, client, auth_headers):
        response = await client.post(
            "/teams", json={"name": "Delta", "description": ["x"]}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json() == [
            {"field": "description", "message": messages.DESCRIPTION_NOT_TEXT}
        ]

    async def test_punctuated_name_is_reachable_by_slug(self, client, auth_headers):
        response = await client.post("/teams", json={"name": "AC/DC"}, headers=auth_headers)
        assert response.json()["slug"] == "ac-dc"

        response = await client.get("/teams/ac-dc")
        assert response.status_code == 200


    async def test_unknown_team_is_404(self, client):
        response = await client.get("/teams/omega")

        assert response.status_code == 404
        assert response.json() == {"error": messages.team_not_found("omega")}

    async def test_patch_short_name_leaves_team_unchanged(self, client, auth_headers):
        response = await client.patch("/teams/alpha", json={"name": "Al"}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == [{"field": "name", "message": messages.TEAM_NAME_TOO_SHORT}]

        response = await client.get("/teams/alpha")
        assert response.json()["name"] == "Alpha"

    async def test_patch_rename_moves_slug(self, client, auth_headers):
        response = await client.patch(
            "/teams/alpha", json={"name": "Alpha One"}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["slug"] == "alpha-one"

    async def test_delete_team(self, client, auth_headers):
        response = await client.delete("/teams/beta", headers=auth_headers)
        assert response.status_code == 204

        response = await client.delete("/teams/beta", headers=auth_headers)
        assert response.status_code == 404


class TestGamesApi:
    async def post_game(self, client, headers, **overrides):
        body = {
            "date": recent(),
            "home": "alpha",
            "home_score": 1,
            "away": "beta",
            "away_score": 2,
        }
        body.update(overrides)
        return await client.post("/games", json=body, headers=headers)

    async def test_create_game(self, client, auth_headers):
        response = await self.post_game(client, auth_headers)

        assert response.status_code == 200
        game = response.json()
        assert game["home"]["slug"] == "alpha"
        assert game["away"]["slug"] == "beta"
        assert (game["home_score"], game["away_score"]) == (1, 2)

    async def test_same_team_names_both_fields(self, client, auth_headers):
        response = await self.post_game(client, auth_headers, away="alpha")

        assert response.status_code == 400
        assert response.json() == [{"field": "home, away", "message": messages.SAME_TEAM}]

    async def test_all_violations_in_one_response(self, client, auth_headers):
        response = await self.post_game(
            client, auth_headers, date=recent(400), home_score=-1, away="alpha"
        )

        assert response.status_code == 400
        assert [e["field"] for e in response.json()] == ["date", "home_score", "home, away"]

    async def test_malformed_score_is_a_field_error(self, client, auth_headers):
        response = await self.post_game(client, auth_headers, away_score="two")

        assert response.status_code == 400
        assert response.json() == [
            {"field": "away_score", "message": messages.SCORE_NOT_INTEGER}
        ]

    async def test_unknown_game_is_404(self, client):
        response = await client.get("/games/999")

        assert response.status_code == 404
        assert response.json() == {"error": messages.game_not_found(999)}

    async def test_huge_game_id_is_404(self, client):
        response = await client.get("/games/99999999999")

        assert response.status_code == 404
        assert response.json() == {"error": messages.game_not_found(99999999999)}

    @pytest.mark.parametrize("path", ["/games/abc", "/games/-1", "/games/1.5"])
    async def test_non_numeric_game_id_is_404(self, client, path):
        response = await client.get(path)

        assert response.status_code == 404
        assert "error" in response.json()


    async def test_patch_game_persists(self, client, auth_headers):
        game_id = (await self.post_game(client, auth_headers)).json()["id"]

        response = await client.patch(
            f"/games/{game_id}", json={"home_score": 5}, headers=auth_headers
        )
        assert response.status_code == 200

        response = await client.get(f"/games/{game_id}")
        assert response.json()["home_score"] == 5

    async def test_patch_unknown_game_is_404(self, client, auth_headers):
        response = await client.patch("/games/77", json={"home": "ghost"}, headers=auth_headers)

        assert response.status_code == 404

    async def test_delete_game(self, client, auth_headers):
        game_id = (await self.post_game(client, auth_headers)).json()["id"]

        response = await client.delete(f"/games/{game_id}", headers=auth_headers)
        assert response.status_code == 204

        response = await client.get("/games")
        assert response.json() == []

    async def test_storage_fault_is_500(self, client, league):
        league.broken = True

        response = await client.get("/games")

        assert response.status_code == 500
        assert response.json() == {"error": messages.STORAGE_ERROR}
