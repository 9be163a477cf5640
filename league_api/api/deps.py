"""Shared FastAPI dependencies and outcome-to-response mapping."""

from dataclasses import asdict

from fastapi import Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from league_api.database import get_db
from league_api.services.auth import (
    AuthUser,
    PasswordHasher,
    SqlSessionStore,
    SqlUserDirectory,
    authenticate,
)
from league_api.services.data import SqlLeagueStore
from league_api.services.league import Failure, FailureKind
from league_api.services.league import messages

STATUS_BY_KIND = {
    FailureKind.INVALID: 400,
    FailureKind.BAD_REQUEST: 400,
    FailureKind.NOT_FOUND: 404,
    FailureKind.CONFLICT: 409,
    FailureKind.STORAGE: 500,
}


class ApiError(Exception):
    """Raised from dependencies; rendered as ``{"error": message}`` by the app."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def failure_response(failure: Failure) -> JSONResponse:
    """Field errors become a bare list, everything else an ``{"error": ...}`` body."""
    status_code = STATUS_BY_KIND[failure.kind]
    if failure.kind == FailureKind.INVALID:
        return JSONResponse(status_code=status_code, content=[asdict(e) for e in failure.errors])
    return JSONResponse(status_code=status_code, content={"error": failure.message})


def get_league_store(db: AsyncSession = Depends(get_db)) -> SqlLeagueStore:
    return SqlLeagueStore(db)


def get_session_store(db: AsyncSession = Depends(get_db)) -> SqlSessionStore:
    return SqlSessionStore(db)


def get_user_directory(db: AsyncSession = Depends(get_db)) -> SqlUserDirectory:
    return SqlUserDirectory(db)


def get_password_hasher() -> PasswordHasher:
    return PasswordHasher()


def bearer_token(request: Request) -> str:
    """Extract the session token from ``Authorization: Bearer <token>``."""
    header = request.headers.get("authorization")
    if not header:
        raise ApiError(401, messages.MISSING_AUTH_HEADER)

    _, _, token = header.partition(" ")
    token = token.strip()
    if not token:
        raise ApiError(401, messages.MISSING_SESSION_TOKEN)
    return token


async def require_user(
    token: str = Depends(bearer_token),
    sessions: SqlSessionStore = Depends(get_session_store),
) -> AuthUser:
    user = await authenticate(sessions, token)
    if isinstance(user, Failure):
        raise ApiError(STATUS_BY_KIND[user.kind], user.message)
    if user is None:
        raise ApiError(401, messages.INVALID_SESSION_TOKEN)
    return user
