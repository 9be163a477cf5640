"""Game API endpoints."""

from fastapi import APIRouter, Depends, Response

from league_api.api.deps import failure_response, get_league_store, require_user
from league_api.schemas.common import ErrorResponse, InvalidFieldResponse
from league_api.schemas.game import GameCreate, GamePatch, GameResponse
from league_api.services.auth import AuthUser
from league_api.services.data import SqlLeagueStore
from league_api.services.league import Failure, games

router = APIRouter()

VALIDATION_RESPONSES = {
    400: {"model": list[InvalidFieldResponse]},
    401: {"model": ErrorResponse},
}


@router.get("/games", response_model=list[GameResponse])
async def get_games(store: SqlLeagueStore = Depends(get_league_store)):
    """List every game, most recent first."""
    result = await games.list_games(store)
    if isinstance(result, Failure):
        return failure_response(result)
    return result


@router.post("/games", response_model=GameResponse, responses=VALIDATION_RESPONSES)
async def post_game(
    body: GameCreate,
    store: SqlLeagueStore = Depends(get_league_store),
    user: AuthUser = Depends(require_user),
):
    """
    Record a game.

    All checks run on every submission and every violation is reported:
    - date must fall within the last two months, today included
    - scores must be whole numbers >= 0
    - both teams must exist, and a team cannot play itself
    """
    result = await games.create_game(
        store, body.date, body.home, body.home_score, body.away, body.away_score
    )
    if isinstance(result, Failure):
        return failure_response(result)
    return result


@router.get("/games/{game_id:int}", response_model=GameResponse, responses={404: {"model": ErrorResponse}})
async def get_game(game_id: int, store: SqlLeagueStore = Depends(get_league_store)):
    result = await games.get_game(store, game_id)
    if isinstance(result, Failure):
        return failure_response(result)
    return result


@router.patch(
    "/games/{game_id:int}",
    response_model=GameResponse,
    responses={**VALIDATION_RESPONSES, 404: {"model": ErrorResponse}},
)
async def patch_game(
    game_id: int,
    body: GamePatch,
    store: SqlLeagueStore = Depends(get_league_store),
    user: AuthUser = Depends(require_user),
):
    """Update any subset of a game's fields; only supplied fields are re-checked."""
    result = await games.patch_game(store, game_id, body.model_dump(exclude_unset=True))
    if isinstance(result, Failure):
        return failure_response(result)
    return result


@router.delete("/games/{game_id:int}", status_code=204, responses={404: {"model": ErrorResponse}})
async def delete_game(
    game_id: int,
    store: SqlLeagueStore = Depends(get_league_store),
    user: AuthUser = Depends(require_user),
):
    result = await games.delete_game(store, game_id)
    if isinstance(result, Failure):
        return failure_response(result)
    return Response(status_code=204)
