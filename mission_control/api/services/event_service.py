"""Business logic for calendar events."""

import logging
from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.api.services.records import agent_record
from mission_control.core.timezone import to_utc_naive
from mission_control.db.models import Event
from mission_control.db.repositories.event_repo import EventRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "title",
    "description",
    "start_time",
    "end_time",
    "recurrence",
    "assigned_agent_id",
)


class EventService:
    """Business logic for calendar events.

    Recurrence strings are stored as given and never expanded.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = EventRepository(session)

    async def list_all(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[dict[str, Any]]:
        """List events starting within an optional [start, end] window.

        Args:
            start: Inclusive lower bound on start time (optional)
            end: Inclusive upper bound on start time (optional)

        Returns:
            List of event dictionaries ordered by start time ascending.
        """
        events = await self.repo.list_in_range(
            start=to_utc_naive(start),
            end=to_utc_naive(end),
        )
        return [self._event_to_dict(event) for event in events]

    async def create(
        self,
        title: str,
        start_time: datetime,
        end_time: datetime,
        description: str = "",
        recurrence: str | None = None,
        assigned_agent_id: str | None = None,
    ) -> dict[str, Any]:
        """Create a calendar event.

        Args:
            title: Event title
            start_time: Start timestamp
            end_time: End timestamp
            description: Event description
            recurrence: Cron-like recurrence string (optional)
            assigned_agent_id: Owning agent ID (optional)

        Returns:
            Created event dictionary
        """
        event = Event(
            title=title,
            description=description,
            start_time=start_time,
            end_time=end_time,
            recurrence=recurrence,
            assigned_agent_id=assigned_agent_id,
        )
        event = await self.repo.create(event, "assigned_agent")
        logger.info(f"Created event '{event.title}' ({event.id}) at {event.start_time}")
        return self._event_to_dict(event)

    async def update(self, event_id: str, changes: dict[str, Any]) -> dict[str, Any] | None:
        """Apply a partial update to an event.

        Args:
            event_id: Event ID
            changes: Field values keyed by attribute name

        Returns:
            Updated event dictionary or None if not found
        """
        event = await self.repo.get_by_id(event_id)
        if event is None:
            return None

        for field in UPDATABLE_FIELDS:
            if field in changes:
                setattr(event, field, changes[field])

        event = await self.repo.update(event, "assigned_agent")
        logger.info(f"Updated event {event_id}: {sorted(changes)}")
        return self._event_to_dict(event)

    async def delete(self, event_id: str) -> bool:
        """Delete an event.

        Returns:
            True if deleted, False if not found
        """
        event = await self.repo.get_by_id(event_id)
        if event is None:
            return False

        await self.repo.delete(event)
        logger.info(f"Deleted event {event_id}")
        return True

    @staticmethod
    def _event_to_dict(event: Event) -> dict[str, Any]:
        """Convert Event to dictionary with the assigned agent embedded."""
        return {
            "id": event.id,
            "title": event.title,
            "description": event.description,
            "start_time": event.start_time,
            "end_time": event.end_time,
            "recurrence": event.recurrence,
            "assigned_agent_id": event.assigned_agent_id,
            "created_at": event.created_at,
            "assigned_agent": (
                agent_record(event.assigned_agent) if event.assigned_agent else None
            ),
        }
