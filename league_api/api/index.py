"""API index listing the available resources."""

from fastapi import APIRouter

router = APIRouter()

RESOURCES = [
    {"href": "/login", "methods": ["POST"]},
    {"href": "/logout", "methods": ["POST"]},
    {"href": "/teams", "methods": ["GET", "POST"]},
    {"href": "/teams/:slug", "methods": ["GET", "PATCH", "DELETE"]},
    {"href": "/games", "methods": ["GET", "POST"]},
    {"href": "/games/:id", "methods": ["GET", "PATCH", "DELETE"]},
]


@router.get("/")
async def index() -> list[dict]:
    """Root endpoint."""
    return RESOURCES
