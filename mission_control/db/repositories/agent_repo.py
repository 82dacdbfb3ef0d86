"""Repository for agent operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from mission_control.db.models import Agent
from mission_control.db.repositories.base import BaseRepository


class AgentRepository(BaseRepository[Agent]):
    """Repository for agent operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Agent)

    async def list_with_current_task(self) -> list[Agent]:
        """List all agents with their current task loaded."""
        stmt = (
            select(Agent)
            .options(selectinload(Agent.current_task))
            .order_by(Agent.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_detail(self, agent_id: str) -> Agent | None:
        """Get agent with current task, assigned tasks and sent messages."""
        stmt = (
            select(Agent)
            .where(Agent.id == agent_id)
            .options(
                selectinload(Agent.current_task),
                selectinload(Agent.assigned_tasks),
                selectinload(Agent.sent_messages),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Agent | None:
        """Get agent by its unique name."""
        stmt = select(Agent).where(Agent.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
