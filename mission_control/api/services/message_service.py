"""Business logic for the inter-agent message feed."""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.api.services.records import agent_record, message_record
from mission_control.db.models import BROADCAST_LABEL, SYSTEM_LABEL, Message
from mission_control.db.repositories.message_repo import MessageRepository

logger = logging.getLogger(__name__)


class MessageService:
    """Business logic for the message feed.

    Messages are append-only: there is no update or delete.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = MessageRepository(session)

    async def list_all(
        self,
        from_agent_id: str | None = None,
        to_agent_id: str | None = None,
        take: int | None = None,
        skip: int | None = None,
    ) -> list[dict[str, Any]]:
        """List messages newest first.

        Args:
            from_agent_id: Filter by sender agent ID (optional)
            to_agent_id: Filter by recipient agent ID (optional)
            take: Page size (optional)
            skip: Page offset (optional)

        Returns:
            List of message dictionaries with sender and recipient embedded.
        """
        messages = await self.repo.list_filtered(
            from_agent_id=from_agent_id,
            to_agent_id=to_agent_id,
            take=take,
            skip=skip,
        )
        return [self._message_to_dict(message) for message in messages]

    async def create(
        self,
        content: str,
        from_agent_id: str | None = None,
        to_agent_id: str | None = None,
        from_label: str = SYSTEM_LABEL,
        to_label: str = BROADCAST_LABEL,
    ) -> dict[str, Any]:
        """Post a message to the feed.

        Args:
            content: Message body
            from_agent_id: Sending agent ID (optional)
            to_agent_id: Receiving agent ID (optional)
            from_label: Sender display label
            to_label: Recipient display label ("all" for broadcast)

        Returns:
            Created message dictionary
        """
        message = Message(
            content=content,
            from_agent_id=from_agent_id,
            to_agent_id=to_agent_id,
            from_label=from_label,
            to_label=to_label,
        )
        message = await self.repo.create(message, "from_agent", "to_agent")
        logger.info(f"Message {message.id} posted: {from_label} -> {to_label}")
        return self._message_to_dict(message)

    @staticmethod
    def _message_to_dict(message: Message) -> dict[str, Any]:
        result = message_record(message)
        result["from_agent"] = agent_record(message.from_agent) if message.from_agent else None
        result["to_agent"] = agent_record(message.to_agent) if message.to_agent else None
        return result
