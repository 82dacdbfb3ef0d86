"""Pydantic schemas for Agents API endpoints."""

from mission_control.api.schemas.common import (
    AgentRecord,
    CamelModel,
    MessageRecord,
    TaskRecord,
    UtcDatetime,
)
from mission_control.db.models import AgentStatus


class AgentResponse(AgentRecord):
    """Response model for GET /agents items and PATCH /agents/{id}.

    Attributes:
        current_task: The task the agent is working on, if any
    """

    current_task: TaskRecord | None = None


class AgentDetailResponse(AgentResponse):
    """Response model for GET /agents/{id}.

    Attributes:
        assigned_tasks: Every task assigned to this agent
        sent_messages: Every message this agent has sent
    """

    assigned_tasks: list[TaskRecord]
    sent_messages: list[MessageRecord]


class AgentUpdate(CamelModel):
    """Request model for PATCH /agents/{id}.

    Only fields present in the body are written; unknown fields are ignored.
    Sending ``currentTaskId: null`` clears the current task.
    """

    status: AgentStatus | None = None
    current_task_id: str | None = None
    last_activity_at: UtcDatetime | None = None
