"""Pydantic schemas for Events API endpoints."""

from typing import Annotated

from mission_control.api.schemas.common import (
    AgentRecord,
    CamelModel,
    ClearableStr,
    UtcDatetime,
    UtcTimestamp,
    null_as,
)


class EventResponse(CamelModel):
    """Response model for a single calendar event.

    Attributes:
        id: Event ID
        title: Event title
        description: Free-form description
        start_time: When the event starts
        end_time: When the event ends
        recurrence: Cron-like recurrence string, stored verbatim
        assigned_agent_id: Owning agent ID, if any
        created_at: Creation timestamp
        assigned_agent: The owning agent, if any
    """

    id: str
    title: str
    description: str
    start_time: UtcTimestamp
    end_time: UtcTimestamp
    recurrence: str | None = None
    assigned_agent_id: str | None = None
    created_at: UtcTimestamp
    assigned_agent: AgentRecord | None = None


class EventCreate(CamelModel):
    """Request model for POST /events."""

    title: str
    start_time: UtcDatetime
    end_time: UtcDatetime
    description: Annotated[str, null_as("")] = ""
    recurrence: str | None = None
    assigned_agent_id: str | None = None


class EventUpdate(CamelModel):
    """Request model for PATCH /events/{id}.

    Empty ``recurrence`` or ``assignedAgentId`` clears the stored value.
    """

    title: str | None = None
    description: str | None = None
    start_time: UtcDatetime | None = None
    end_time: UtcDatetime | None = None
    recurrence: ClearableStr = None
    assigned_agent_id: ClearableStr = None
