"""Business logic for task management."""

import logging
from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.api.services.records import agent_record, task_record
from mission_control.db.models import Task, TaskPriority, TaskStatus
from mission_control.db.repositories.task_repo import TaskRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "status", "priority", "assigned_to", "due_date")


class TaskService:
    """Business logic for the kanban task board.

    Every operation is a single store read or write; moving a card between
    columns is just an update of ``status``.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = TaskRepository(session)

    # =========================================================================
    # Task Listing
    # =========================================================================

    async def list_all(
        self,
        status: str | None = None,
        priority: str | None = None,
        assigned_to: str | None = None,
    ) -> list[dict[str, Any]]:
        """List tasks with optional filters, newest first.

        Args:
            status: Filter by status (optional)
            priority: Filter by priority (optional)
            assigned_to: Filter by assignee agent ID (optional)

        Returns:
            List of task dictionaries with the assigned agent embedded.
        """
        tasks = await self.repo.list_filtered(
            status=status,
            priority=priority,
            assigned_to=assigned_to,
        )
        return [self._task_to_dict(task) for task in tasks]

    # =========================================================================
    # Task Creation
    # =========================================================================

    async def create(
        self,
        title: str,
        description: str = "",
        status: str = TaskStatus.BACKLOG.value,
        priority: str = TaskPriority.MEDIUM.value,
        assigned_to: str | None = None,
        due_date: datetime | None = None,
    ) -> dict[str, Any]:
        """Create a new task.

        Args:
            title: Task title
            description: Task description
            status: Initial kanban column
            priority: Priority level
            assigned_to: Assignee agent ID (optional)
            due_date: Due date (optional)

        Returns:
            Created task dictionary
        """
        task = Task(
            title=title,
            description=description,
            status=status,
            priority=priority,
            assigned_to=assigned_to,
            due_date=due_date,
        )
        task = await self.repo.create(task, "agent")
        logger.info(f"Created task '{task.title}' ({task.id})")
        return self._task_to_dict(task)

    # =========================================================================
    # Task Updates
    # =========================================================================

    async def update(self, task_id: str, changes: dict[str, Any]) -> dict[str, Any] | None:
        """Apply a partial update to a task.

        Only the supplied fields are written; the rest are left untouched.

        Args:
            task_id: Task ID
            changes: Field values keyed by attribute name

        Returns:
            Updated task dictionary or None if not found
        """
        task = await self.repo.get_by_id(task_id)
        if task is None:
            return None

        for field in UPDATABLE_FIELDS:
            if field in changes:
                setattr(task, field, changes[field])

        task = await self.repo.update(task, "agent")
        logger.info(f"Updated task {task_id}: {sorted(changes)}")
        return self._task_to_dict(task)

    async def delete(self, task_id: str) -> bool:
        """Delete a task.

        Args:
            task_id: Task ID

        Returns:
            True if deleted, False if not found
        """
        task = await self.repo.get_by_id(task_id)
        if task is None:
            return False

        await self.repo.delete(task)
        logger.info(f"Deleted task {task_id}")
        return True

    # =========================================================================
    # Private Helpers
    # =========================================================================

    @staticmethod
    def _task_to_dict(task: Task) -> dict[str, Any]:
        """Convert Task to dictionary with the assigned agent embedded."""
        result = task_record(task)
        result["agent"] = agent_record(task.agent) if task.agent else None
        return result
