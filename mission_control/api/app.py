"""FastAPI application factory for the Mission Control API."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mission_control import __version__
from mission_control.api.errors import register_error_handlers
from mission_control.api.routes import (
    agents_router,
    events_router,
    messages_router,
    monitoring_router,
    tasks_router,
)
from mission_control.db.database import DEFAULT_DB_PATH, init_db_manager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application startup and shutdown lifecycle."""
    # Startup: Initialize database
    db_path = app.state.config.get("db_path", DEFAULT_DB_PATH)
    db_manager = init_db_manager(db_path)
    await db_manager.init_db()
    app.state.db_manager = db_manager
    logger.info(f"Database ready at {db_path}")

    yield

    # Shutdown: Cleanup resources
    await db_manager.close()


def create_app(config: dict[str, Any] | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Application configuration dictionary. Expected keys:
            - db_path: Path to SQLite database (default: "mission_control.db")
            - cors_origins: List of allowed CORS origins (default: ["*"])

    Returns:
        Configured FastAPI application instance
    """
    default_config = {
        "db_path": DEFAULT_DB_PATH,
        "cors_origins": ["*"],  # Dashboard runs from another origin in dev
    }
    app_config = {**default_config, **(config or {})}

    app = FastAPI(
        title="Mission Control API",
        description="REST API for monitoring agents, their tasks, events and messages",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = app_config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config["cors_origins"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount routes at /api
    api = FastAPI()
    api.include_router(agents_router)
    api.include_router(tasks_router)
    api.include_router(events_router)
    api.include_router(messages_router)
    api.include_router(monitoring_router)
    register_error_handlers(api)

    # Share state with sub-app
    api.state = app.state

    app.mount("/api", api)

    return app
