"""Pydantic schemas for Messages API endpoints."""

from typing import Annotated

from mission_control.api.schemas.common import (
    AgentRecord,
    CamelModel,
    MessageRecord,
    null_as,
)
from mission_control.db.models import BROADCAST_LABEL, SYSTEM_LABEL


class MessageResponse(MessageRecord):
    """Response model for a single feed message."""

    from_agent: AgentRecord | None = None
    to_agent: AgentRecord | None = None


class MessageCreate(CamelModel):
    """Request model for POST /messages.

    Attributes:
        content: Message body (required)
        from_agent_id: Sending agent ID (defaults to null)
        to_agent_id: Receiving agent ID (defaults to null)
        from_label: Display name of the sender (defaults to "system")
        to_label: Display name of the recipient; "all" marks a broadcast
    """

    content: str
    from_agent_id: str | None = None
    to_agent_id: str | None = None
    from_label: Annotated[str, null_as(SYSTEM_LABEL)] = SYSTEM_LABEL
    to_label: Annotated[str, null_as(BROADCAST_LABEL)] = BROADCAST_LABEL
