"""Pydantic schemas for Tasks API endpoints."""

from typing import Annotated

from mission_control.api.schemas.common import (
    AgentRecord,
    CamelModel,
    ClearableDatetime,
    TaskRecord,
    null_as,
)
from mission_control.db.models import TaskPriority, TaskStatus


class TaskResponse(TaskRecord):
    """Response model for a single task.

    Attributes:
        agent: The assigned agent, if any
    """

    agent: AgentRecord | None = None


class TaskCreate(CamelModel):
    """Request model for POST /tasks.

    An explicit null for description, status or priority takes the default.

    Attributes:
        title: Task title (required)
        description: Free-form description (defaults to "")
        status: Kanban column (defaults to "backlog")
        priority: Priority level (defaults to "medium")
        assigned_to: Assignee agent ID (defaults to null)
        due_date: Due date; empty values are stored as null
    """

    title: str
    description: Annotated[str, null_as("")] = ""
    status: Annotated[TaskStatus, null_as(TaskStatus.BACKLOG.value)] = (
        TaskStatus.BACKLOG.value
    )
    priority: Annotated[TaskPriority, null_as(TaskPriority.MEDIUM.value)] = (
        TaskPriority.MEDIUM.value
    )
    assigned_to: str | None = None
    due_date: ClearableDatetime = None


class TaskUpdate(CamelModel):
    """Request model for PATCH /tasks/{id}.

    All fields are optional - provide only what needs updating. An empty
    ``dueDate`` clears the due date.
    """

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    assigned_to: str | None = None
    due_date: ClearableDatetime = None
