"""Repository for task operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from mission_control.db.models import Task
from mission_control.db.repositories.base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Repository for task operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Task)

    async def list_filtered(
        self,
        status: str | None = None,
        priority: str | None = None,
        assigned_to: str | None = None,
    ) -> list[Task]:
        """List tasks matching every supplied filter, newest first.

        Args:
            status: Exact status to match (optional)
            priority: Exact priority to match (optional)
            assigned_to: Assignee agent ID to match (optional)

        Returns:
            List of Task instances with the assigned agent loaded
        """
        stmt = select(Task).options(selectinload(Task.agent))

        if status:
            stmt = stmt.where(Task.status == status)
        if priority:
            stmt = stmt.where(Task.priority == priority)
        if assigned_to:
            stmt = stmt.where(Task.assigned_to == assigned_to)

        stmt = stmt.order_by(Task.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
