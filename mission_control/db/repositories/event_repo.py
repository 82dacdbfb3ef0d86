"""Repository for calendar event operations."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from mission_control.db.models import Event
from mission_control.db.repositories.base import BaseRepository


class EventRepository(BaseRepository[Event]):
    """Repository for calendar event operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Event)

    async def list_in_range(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Event]:
        """List events whose start time falls within [start, end].

        Either bound may be omitted to leave that side open.

        Returns:
            List of Event instances ordered by start time, agent loaded
        """
        stmt = select(Event).options(selectinload(Event.assigned_agent))

        if start is not None:
            stmt = stmt.where(Event.start_time >= start)
        if end is not None:
            stmt = stmt.where(Event.start_time <= end)

        stmt = stmt.order_by(Event.start_time.asc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
