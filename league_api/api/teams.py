"""Team API endpoints."""

from fastapi import APIRouter, Depends, Response

from league_api.api.deps import failure_response, get_league_store, require_user
from league_api.schemas.common import ErrorResponse, InvalidFieldResponse
from league_api.schemas.team import TeamCreate, TeamPatch, TeamResponse
from league_api.services.auth import AuthUser
from league_api.services.data import SqlLeagueStore
from league_api.services.league import Failure, teams

router = APIRouter()

VALIDATION_RESPONSES = {
    400: {"model": list[InvalidFieldResponse]},
    401: {"model": ErrorResponse},
}


@router.get("/teams", response_model=list[TeamResponse])
async def get_teams(store: SqlLeagueStore = Depends(get_league_store)):
    """List every team."""
    result = await teams.list_teams(store)
    if isinstance(result, Failure):
        return failure_response(result)
    return result


@router.post(
    "/teams",
    response_model=TeamResponse,
    responses={**VALIDATION_RESPONSES, 409: {"model": ErrorResponse}},
)
async def post_team(
    body: TeamCreate,
    store: SqlLeagueStore = Depends(get_league_store),
    user: AuthUser = Depends(require_user),
):
    """
    Create a team.

    The slug is derived from the name ("Foo Bar" -> "foo-bar"); a name whose
    slug is already taken is rejected with 409.
    """
    result = await teams.create_team(store, body.name, body.description)
    if isinstance(result, Failure):
        return failure_response(result)
    return result


@router.get("/teams/{slug}", response_model=TeamResponse, responses={404: {"model": ErrorResponse}})
async def get_team(slug: str, store: SqlLeagueStore = Depends(get_league_store)):
    result = await teams.get_team(store, slug)
    if isinstance(result, Failure):
        return failure_response(result)
    return result


@router.patch(
    "/teams/{slug}",
    response_model=TeamResponse,
    responses={**VALIDATION_RESPONSES, 404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def patch_team(
    slug: str,
    body: TeamPatch,
    store: SqlLeagueStore = Depends(get_league_store),
    user: AuthUser = Depends(require_user),
):
    """
    Update a team's name and/or description.

    Renaming re-derives the slug, so the returned team may live at a new URL.
    """
    result = await teams.patch_team(store, slug, body.model_dump(exclude_unset=True))
    if isinstance(result, Failure):
        return failure_response(result)
    return result


@router.delete("/teams/{slug}", status_code=204, responses={404: {"model": ErrorResponse}})
async def delete_team(
    slug: str,
    store: SqlLeagueStore = Depends(get_league_store),
    user: AuthUser = Depends(require_user),
):
    """Delete a team together with its games."""
    result = await teams.delete_team(store, slug)
    if isinstance(result, Failure):
        return failure_response(result)
    return Response(status_code=204)
