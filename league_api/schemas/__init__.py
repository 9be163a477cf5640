"""Pydantic schemas for API request/response models."""

from league_api.schemas.auth import LoginRequest, TokenResponse
from league_api.schemas.common import ErrorResponse, InvalidFieldResponse
from league_api.schemas.game import GameCreate, GamePatch, GameResponse
from league_api.schemas.team import TeamCreate, TeamPatch, TeamResponse

__all__ = [
    "LoginRequest",
    "TokenResponse",
    "ErrorResponse",
    "InvalidFieldResponse",
    "GameCreate",
    "GamePatch",
    "GameResponse",
    "TeamCreate",
    "TeamPatch",
    "TeamResponse",
]
