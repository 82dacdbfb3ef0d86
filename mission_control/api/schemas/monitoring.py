"""Pydantic schemas for dashboard and health endpoints."""

from pydantic import BaseModel

from mission_control.api.schemas.common import CamelModel


class HealthResponse(BaseModel):
    """Response model for GET /health.

    Attributes:
        status: Overall health status (e.g., "healthy")
        version: API version string
        database: Database connection status (e.g., "connected")
    """

    status: str
    version: str
    database: str


class StatsResponse(CamelModel):
    """Response model for GET /stats (dashboard header counters)."""

    total_tasks: int
    in_progress: int
    completed: int
    active_agents: int
