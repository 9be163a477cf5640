"""Login and logout endpoints."""

from fastapi import APIRouter, Depends, Response

from league_api.api.deps import (
    bearer_token,
    failure_response,
    get_password_hasher,
    get_session_store,
    get_user_directory,
    require_user,
)
from league_api.schemas.auth import LoginRequest, TokenResponse
from league_api.schemas.common import ErrorResponse
from league_api.services.auth import (
    AuthUser,
    PasswordHasher,
    SqlSessionStore,
    SqlUserDirectory,
    login,
    logout,
)
from league_api.services.league import Failure

router = APIRouter()


@router.post("/login", response_model=TokenResponse, responses={400: {"model": ErrorResponse}})
async def post_login(
    body: LoginRequest,
    users: SqlUserDirectory = Depends(get_user_directory),
    sessions: SqlSessionStore = Depends(get_session_store),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """Exchange username and password for a session token."""
    result = await login(users, sessions, body.username, body.password, hasher=hasher)
    if isinstance(result, Failure):
        return failure_response(result)
    return TokenResponse(token=result)


@router.post("/logout", status_code=204, responses={401: {"model": ErrorResponse}})
async def post_logout(
    token: str = Depends(bearer_token),
    user: AuthUser = Depends(require_user),
    sessions: SqlSessionStore = Depends(get_session_store),
):
    """Invalidate the session used for this request."""
    result = await logout(sessions, token)
    if isinstance(result, Failure):
        return failure_response(result)
    return Response(status_code=204)
