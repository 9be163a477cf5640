"""Team Pydantic schemas."""

from typing import Any

from pydantic import BaseModel, Field


class TeamCreate(BaseModel):
    """Team creation body; values are checked by the league validators, not here."""

    name: Any = None
    description: Any = ""


class TeamPatch(BaseModel):
    """Sparse team update; omitted or null fields keep their current value."""

    name: Any = None
    description: Any = None


class TeamResponse(BaseModel):
    """Team as returned by the API."""

    slug: str = Field(description="URL-safe identifier derived from the name")
    name: str
    description: str

    model_config = {"from_attributes": True}
