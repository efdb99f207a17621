import logging
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from leavedesk.config import get_settings
from leavedesk.db import SessionDep

logger = logging.getLogger(__name__)

health_router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: Literal["ok", "degraded"]
    database: Literal["up", "down"]
    version: str
    environment: str


async def _database_reachable(session: SessionDep) -> bool:
    try:
        await session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError):
        logger.exception("Leave request database unreachable")
        return False
    return True


@health_router.get("/health", response_model=HealthResponse)
async def health(session: SessionDep) -> HealthResponse:
    """Liveness probe. Needs no caller identity; reports ``degraded`` when the database is down."""
    settings = get_settings()
    up = await _database_reachable(session)
    return HealthResponse(
        status="ok" if up else "degraded",
        database="up" if up else "down",
        version=settings.app_version,
        environment=settings.environment,
    )
