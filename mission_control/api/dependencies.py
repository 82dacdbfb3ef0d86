"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.api.services.agent_service import AgentService
from mission_control.api.services.event_service import EventService
from mission_control.api.services.message_service import MessageService
from mission_control.api.services.monitoring_service import MonitoringService
from mission_control.api.services.task_service import TaskService
from mission_control.db.database import get_db_manager


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide database session.

    The session is rolled back when the route raises.

    Yields:
        AsyncSession: Database session with automatic commit/rollback
    """
    async with get_db_manager().session() as session:
        yield session


# Type alias for annotating dependencies
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_agent_service(session: DbSession) -> AgentService:
    """Get agent service instance."""
    return AgentService(session)


async def get_task_service(session: DbSession) -> TaskService:
    """Get task service instance."""
    return TaskService(session)


async def get_event_service(session: DbSession) -> EventService:
    """Get event service instance."""
    return EventService(session)


async def get_message_service(session: DbSession) -> MessageService:
    """Get message service instance."""
    return MessageService(session)


async def get_monitoring_service(session: DbSession) -> MonitoringService:
    """Get monitoring service instance."""
    return MonitoringService(session)
