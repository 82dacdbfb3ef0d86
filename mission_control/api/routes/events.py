"""Events API routes backing the calendar."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from mission_control.api.dependencies import get_event_service
from mission_control.api.schemas.common import DeleteResponse
from mission_control.api.schemas.events import EventCreate, EventResponse, EventUpdate
from mission_control.api.services.event_service import EventService

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=list[EventResponse], name="fetch_events")
async def list_events(
    service: Annotated[EventService, Depends(get_event_service)],
    start: datetime | None = Query(None, description="Only events starting at or after this time"),
    end: datetime | None = Query(None, description="Only events starting at or before this time"),
) -> list[EventResponse]:
    """List calendar events, ordered by start time.

    Both bounds apply to the event's start time and are inclusive.

    Args:
        service: Event service instance
        start: Optional lower bound
        end: Optional upper bound

    Returns:
        list[EventResponse]: Matching events with their assigned agent
    """
    events = await service.list_all(start=start, end=end)
    return [EventResponse(**e) for e in events]


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    data: EventCreate,
    service: Annotated[EventService, Depends(get_event_service)],
) -> EventResponse:
    """Create a calendar event.

    ``title``, ``startTime`` and ``endTime`` are required.
    """
    created = await service.create(
        title=data.title,
        start_time=data.start_time,
        end_time=data.end_time,
        description=data.description,
        recurrence=data.recurrence,
        assigned_agent_id=data.assigned_agent_id,
    )
    return EventResponse(**created)


@router.patch("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: str,
    data: EventUpdate,
    service: Annotated[EventService, Depends(get_event_service)],
) -> EventResponse:
    """Update an event.

    All fields are optional. An empty ``recurrence`` or ``assignedAgentId``
    clears the stored value.

    Raises:
        HTTPException: 404 if event not found
    """
    updated = await service.update(event_id, data.model_dump(exclude_unset=True))
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Event not found",
        )
    return EventResponse(**updated)


@router.delete("/{event_id}", response_model=DeleteResponse)
async def delete_event(
    event_id: str,
    service: Annotated[EventService, Depends(get_event_service)],
) -> DeleteResponse:
    """Delete an event.

    Raises:
        HTTPException: 404 if event not found
    """
    deleted = await service.delete(event_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Event not found",
        )
    return DeleteResponse()
