"""Business logic for dashboard counters and health checks."""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mission_control import __version__
from mission_control.db.models import Agent, AgentStatus, Task, TaskStatus


class MonitoringService:
    """Business logic for dashboard counters and health checks."""

    def __init__(self, session: AsyncSession):
        """Initialize MonitoringService.

        Args:
            session: Database session
        """
        self.session = session

    async def get_health(self) -> dict[str, Any]:
        """Get system health status.

        Runs a trivial query so a broken database surfaces as a failure.

        Returns:
            dict: Health status with version and database state
        """
        await self.session.execute(select(func.count(Agent.id)))
        return {
            "status": "healthy",
            "version": __version__,
            "database": "connected",
        }

    async def get_stats(self) -> dict[str, int]:
        """Compute the dashboard header counters.

        Returns:
            dict: total_tasks, in_progress, completed and active_agents
        """
        total_tasks = await self._count(select(func.count(Task.id)))
        in_progress = await self._count(
            select(func.count(Task.id)).where(Task.status == TaskStatus.IN_PROGRESS.value)
        )
        completed = await self._count(
            select(func.count(Task.id)).where(Task.status == TaskStatus.DONE.value)
        )
        active_agents = await self._count(
            select(func.count(Agent.id)).where(Agent.status == AgentStatus.ACTIVE.value)
        )

        return {
            "total_tasks": total_tasks,
            "in_progress": in_progress,
            "completed": completed,
            "active_agents": active_agents,
        }

    async def _count(self, stmt: Any) -> int:
        result = await self.session.execute(stmt)
        return result.scalar() or 0
