"""Service health: database reachability and the size of the league tables."""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from league_api.database import get_db
from league_api.models import Game, Team
from league_api.services.league import messages

router = APIRouter()

logger = structlog.get_logger()


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    """
    Count teams and games to prove the league tables are readable.

    Answers 503 when the query fails, so load balancers stop routing here.
    """
    try:
        teams = await db.scalar(select(func.count()).select_from(Team))
        games = await db.scalar(select(func.count()).select_from(Game))
    except SQLAlchemyError as e:
        logger.error("Health check failed", error=str(e))
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "error": messages.STORAGE_ERROR},
        )

    return {
        "status": "healthy",
        "checked_at": datetime.now(timezone.utc).isoformat(),
        "teams": teams,
        "games": games,
    }
