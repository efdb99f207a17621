from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from leavedesk.api.router import api_router
from leavedesk.config import get_settings
from leavedesk.db import dispose_engine
from leavedesk.exceptions import setup_exception_handlers
from leavedesk.logging import configure_logging
from leavedesk.middleware import setup_middleware

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    configure_logging(settings)
    logger.info("%s v%s starting (%s)", settings.app_name, settings.app_version, settings.environment)
    try:
        yield
    finally:
        await dispose_engine()
        logger.info("%s stopped", settings.app_name)


def create_app() -> FastAPI:
    """Build the Leave Desk API: leave requests, the employee directory and a health probe."""
    settings = get_settings()
    docs = settings.docs_enabled

    application = FastAPI(
        title=settings.app_name,
        description="Submit, edit, approve and reject employee leave requests.",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
    )
    setup_middleware(application, settings)
    setup_exception_handlers(application)
    application.include_router(api_router)
    return application


app = create_app()
