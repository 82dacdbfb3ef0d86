"""Dashboard counters and health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from mission_control.api.dependencies import get_monitoring_service
from mission_control.api.schemas.monitoring import HealthResponse, StatsResponse
from mission_control.api.services.monitoring_service import MonitoringService

router = APIRouter(tags=["monitoring"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    service: Annotated[MonitoringService, Depends(get_monitoring_service)],
) -> HealthResponse:
    """System health check endpoint."""
    health = await service.get_health()
    return HealthResponse(**health)


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    service: Annotated[MonitoringService, Depends(get_monitoring_service)],
) -> StatsResponse:
    """Counters for the dashboard header.

    Returns:
        StatsResponse: Total tasks, tasks in progress, completed tasks and
        active agents
    """
    stats = await service.get_stats()
    return StatsResponse(**stats)
