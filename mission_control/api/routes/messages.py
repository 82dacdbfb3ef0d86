"""Messages API routes backing the live feed."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from mission_control.api.dependencies import get_message_service
from mission_control.api.schemas.messages import MessageCreate, MessageResponse
from mission_control.api.services.message_service import MessageService

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("", response_model=list[MessageResponse], name="fetch_messages")
async def list_messages(
    service: Annotated[MessageService, Depends(get_message_service)],
    from_agent_id: str | None = Query(None, alias="fromAgentId", description="Filter by sender"),
    to_agent_id: str | None = Query(None, alias="toAgentId", description="Filter by recipient"),
    take: int | None = Query(None, description="Maximum number of messages"),
    skip: int | None = Query(None, description="Number of messages to skip"),
) -> list[MessageResponse]:
    """List feed messages, newest first.

    The dashboard polls this endpoint with ``take`` to refresh the feed.

    Args:
        service: Message service instance
        from_agent_id: Optional sender filter
        to_agent_id: Optional recipient filter
        take: Optional page size
        skip: Optional page offset

    Returns:
        list[MessageResponse]: Messages with sender and recipient agents
    """
    messages = await service.list_all(
        from_agent_id=from_agent_id,
        to_agent_id=to_agent_id,
        take=take,
        skip=skip,
    )
    return [MessageResponse(**m) for m in messages]


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_message(
    data: MessageCreate,
    service: Annotated[MessageService, Depends(get_message_service)],
) -> MessageResponse:
    """Post a message to the feed.

    Without labels the message reads as from "system" to "all" (broadcast).
    """
    created = await service.create(
        content=data.content,
        from_agent_id=data.from_agent_id,
        to_agent_id=data.to_agent_id,
        from_label=data.from_label,
        to_label=data.to_label,
    )
    return MessageResponse(**created)
