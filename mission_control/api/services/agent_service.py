"""Business logic for agent management."""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.api.services.records import agent_record, message_record, task_record
from mission_control.db.models import Agent
from mission_control.db.repositories.agent_repo import AgentRepository

logger = logging.getLogger(__name__)

# Fields a PATCH may write; anything else in the body is ignored
UPDATABLE_FIELDS = ("status", "current_task_id", "last_activity_at")


class AgentService:
    """Business logic for agent management.

    Agents are never created or deleted through the API; the seeder owns
    their lifecycle. This service reads them and applies partial updates.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = AgentRepository(session)

    async def list_all(self) -> list[dict[str, Any]]:
        """List all agents with their current task embedded.

        Returns:
            List of agent dictionaries.
        """
        agents = await self.repo.list_with_current_task()
        return [self._agent_to_dict(agent) for agent in agents]

    async def get(self, agent_id: str) -> dict[str, Any] | None:
        """Get one agent with assigned tasks and sent messages embedded.

        Args:
            agent_id: Agent ID

        Returns:
            Agent detail dictionary or None if not found.
        """
        agent = await self.repo.get_detail(agent_id)
        if agent is None:
            return None

        result = self._agent_to_dict(agent)
        result["assigned_tasks"] = [task_record(t) for t in agent.assigned_tasks]
        result["sent_messages"] = [message_record(m) for m in agent.sent_messages]
        return result

    async def update(self, agent_id: str, changes: dict[str, Any]) -> dict[str, Any] | None:
        """Apply a partial update to an agent.

        Args:
            agent_id: Agent ID
            changes: Field values keyed by attribute name; only recognized
                fields are written

        Returns:
            Updated agent dictionary or None if not found.
        """
        agent = await self.repo.get_by_id(agent_id)
        if agent is None:
            return None

        for field in UPDATABLE_FIELDS:
            if field in changes:
                setattr(agent, field, changes[field])

        agent = await self.repo.update(agent, "current_task")
        logger.info(f"Updated agent {agent.name} ({agent_id}): {sorted(changes)}")
        return self._agent_to_dict(agent)

    @staticmethod
    def _agent_to_dict(agent: Agent) -> dict[str, Any]:
        """Convert Agent to dictionary with the current task embedded."""
        result = agent_record(agent)
        result["current_task"] = task_record(agent.current_task) if agent.current_task else None
        return result
