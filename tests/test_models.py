"""Tests for ORM model defaults and constraints."""

import tempfile
from datetime import datetime
from pathlib import Path

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from mission_control.db.database import DatabaseManager
from mission_control.db.models import (
    BROADCAST_LABEL,
    SYSTEM_LABEL,
    Agent,
    AgentStatus,
    Event,
    Message,
    Task,
    TaskPriority,
    TaskStatus,
)


@pytest.fixture
async def db_manager():
    """Provide a temporary database manager."""
    with tempfile.TemporaryDirectory() as tmpdir:
        db_path = Path(tmpdir) / "test.db"
        manager = DatabaseManager(db_path)
        await manager.init_db()
        yield manager
        await manager.close()


class TestAgentModel:
    """Test Agent defaults and constraints."""

    async def test_defaults(self, db_manager):
        """New agents are idle with a generated id and activity timestamp."""
        async with db_manager.session() as session:
            agent = Agent(name="Cody", role="Development", emoji="💻")
            session.add(agent)
            await session.flush()

            assert len(agent.id) == 36
            assert agent.status == AgentStatus.IDLE
            assert isinstance(agent.last_activity_at, datetime)
            assert agent.last_activity_at.tzinfo is None
            assert agent.current_task_id is None

    async def test_name_is_unique(self, db_manager):
        """Two agents cannot share a name."""
        with pytest.raises(IntegrityError):
            async with db_manager.session() as session:
                session.add(Agent(name="Cody", role="Development", emoji="💻"))
                await session.flush()
                session.add(Agent(name="Cody", role="Design", emoji="🎨"))
                await session.flush()

    async def test_current_task_cleared_when_task_deleted(self, db_manager):
        """Deleting an agent's current task leaves the agent with no current task."""
        async with db_manager.session() as session:
            agent = Agent(name="Cody", role="Development", emoji="💻")
            task = Task(title="Ship it")
            session.add_all([agent, task])
            await session.flush()
            agent.current_task_id = task.id
            agent_id, task_id = agent.id, task.id

        async with db_manager.session() as session:
            await session.delete(await session.get(Task, task_id))

        async with db_manager.session() as session:
            agent = await session.get(Agent, agent_id)
            assert agent is not None
            assert agent.current_task_id is None


class TestTaskModel:
    """Test Task defaults and constraints."""

    async def test_defaults(self, db_manager):
        """New tasks land in the backlog at medium priority."""
        async with db_manager.session() as session:
            task = Task(title="Write docs")
            session.add(task)
            await session.flush()

            assert task.status == TaskStatus.BACKLOG
            assert task.priority == TaskPriority.MEDIUM
            assert task.description == ""
            assert task.assigned_to is None
            assert task.due_date is None
            assert task.created_at is not None
            assert task.updated_at is not None

    async def test_unknown_assignee_rejected(self, db_manager):
        """Assigning a task to a missing agent violates the foreign key."""
        with pytest.raises(IntegrityError):
            async with db_manager.session() as session:
                session.add(Task(title="Orphan", assigned_to="no-such-agent"))
                await session.flush()

    async def test_updated_at_changes_on_update(self, db_manager):
        """updated_at moves forward when a task is modified."""
        async with db_manager.session() as session:
            task = Task(title="Write docs", updated_at=datetime(2026, 1, 1))
            session.add(task)
            await session.flush()
            task_id = task.id

        async with db_manager.session() as session:
            task = await session.get(Task, task_id)
            task.title = "Write better docs"

        async with db_manager.session() as session:
            task = await session.get(Task, task_id)
            assert task.updated_at > datetime(2026, 1, 1)


class TestMessageModel:
    """Test Message defaults."""

    async def test_defaults_to_system_broadcast(self, db_manager):
        """A message with no sender or recipient is a system broadcast."""
        async with db_manager.session() as session:
            message = Message(content="Daily standup reminder")
            session.add(message)
            await session.flush()

            assert message.from_label == SYSTEM_LABEL
            assert message.to_label == BROADCAST_LABEL
            assert message.from_agent_id is None
            assert message.to_agent_id is None


class TestEventModel:
    """Test Event persistence."""

    async def test_recurrence_optional(self, db_manager):
        """Events persist without recurrence or owner."""
        async with db_manager.session() as session:
            session.add(
                Event(
                    title="Sprint Review",
                    start_time=datetime(2026, 3, 5, 14, 0),
                    end_time=datetime(2026, 3, 5, 15, 0),
                )
            )

        async with db_manager.session() as session:
            result = await session.execute(select(Event))
            event = result.scalar_one()
            assert event.recurrence is None
            assert event.assigned_agent_id is None
            assert event.description == ""
