"""Game Pydantic schemas."""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from league_api.schemas.team import TeamResponse


class GameCreate(BaseModel):
    """
    Game submission body.

    Fields are typed loosely on purpose so malformed values reach the
    game validation pipeline and come back as field errors.
    """

    date: Any = None
    home: Any = Field(default=None, description="Home team slug")
    home_score: Any = None
    away: Any = Field(default=None, description="Away team slug")
    away_score: Any = None


class GamePatch(GameCreate):
    """Sparse game update; omitted or null fields are neither checked nor changed."""


class GameResponse(BaseModel):
    """Game as returned by the API, with both teams embedded."""

    id: int
    date: date
    home: TeamResponse
    away: TeamResponse
    home_score: int = Field(ge=0)
    away_score: int = Field(ge=0)

    model_config = {"from_attributes": True}
