"""Repository for message feed operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from mission_control.db.models import Message
from mission_control.db.repositories.base import BaseRepository


class MessageRepository(BaseRepository[Message]):
    """Repository for message feed operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Message)

    async def list_filtered(
        self,
        from_agent_id: str | None = None,
        to_agent_id: str | None = None,
        take: int | None = None,
        skip: int | None = None,
    ) -> list[Message]:
        """List messages newest first, optionally filtered and paginated.

        Args:
            from_agent_id: Sender agent ID to match (optional)
            to_agent_id: Recipient agent ID to match (optional)
            take: Maximum number of messages to return (optional)
            skip: Number of messages to skip before returning (optional)

        Returns:
            List of Message instances with sender and recipient loaded
        """
        stmt = select(Message).options(
            selectinload(Message.from_agent),
            selectinload(Message.to_agent),
        )

        if from_agent_id:
            stmt = stmt.where(Message.from_agent_id == from_agent_id)
        if to_agent_id:
            stmt = stmt.where(Message.to_agent_id == to_agent_id)

        stmt = stmt.order_by(Message.created_at.desc())

        if take is not None:
            stmt = stmt.limit(take)
        if skip is not None:
            stmt = stmt.offset(skip)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())
