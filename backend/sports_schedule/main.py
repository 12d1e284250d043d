"""Sports Schedule API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ScheduleError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from sports_schedule.api.error_handlers import register_error_handlers
from sports_schedule.api.routes import (
    auth, events, health, leagues, maps, protected, teams,
)
from sports_schedule.config import get_settings
from sports_schedule.infrastructure.database import close_db, init_db
from sports_schedule.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Sports Schedule API started")
    yield
    await close_db()
    logger.info("Sports Schedule API shutting down")


app = FastAPI(
    title="Sports Schedule API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(protected.router)
app.include_router(leagues.router)
app.include_router(teams.router)
app.include_router(events.router)
app.include_router(maps.router)

register_error_handlers(app)

# Static files (built frontend) mounted AFTER API routes so /api/* takes precedence
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
