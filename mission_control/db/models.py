"""SQLAlchemy ORM models for the Mission Control database."""

import uuid
from datetime import datetime
from enum import StrEnum

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from mission_control.core.timezone import utc_now


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


def new_id() -> str:
    """Generate a primary key for a new row."""
    return str(uuid.uuid4())


# ============================================================================
# Enumerations
# ============================================================================


class AgentStatus(StrEnum):
    """Agent presence status."""

    ACTIVE = "active"
    IDLE = "idle"
    OFFLINE = "offline"


class TaskStatus(StrEnum):
    """Kanban column a task sits in."""

    BACKLOG = "backlog"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    DONE = "done"


class TaskPriority(StrEnum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


BROADCAST_LABEL = "all"
SYSTEM_LABEL = "system"


# ============================================================================
# Agent Table
# ============================================================================


class Agent(Base):
    """A simulated worker on the crew.

    Agents are created by the seeder and only ever mutated afterwards
    (status, current task, last activity). The application never deletes them.
    """

    __tablename__ = "agents"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    role: Mapped[str] = mapped_column(String(100))
    emoji: Mapped[str] = mapped_column(String(16))
    status: Mapped[str] = mapped_column(String(20), default=AgentStatus.IDLE.value)
    last_activity_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)
    current_task_id: Mapped[str | None] = mapped_column(
        ForeignKey(
            "tasks.id",
            ondelete="SET NULL",
            use_alter=True,
            name="fk_agents_current_task_id",
        ),
        nullable=True,
    )

    # agents -> tasks and tasks -> agents form a cycle; post_update breaks it at flush time
    current_task: Mapped["Task | None"] = relationship(
        foreign_keys=[current_task_id],
        post_update=True,
    )
    assigned_tasks: Mapped[list["Task"]] = relationship(
        back_populates="agent",
        foreign_keys="Task.assigned_to",
    )
    sent_messages: Mapped[list["Message"]] = relationship(
        back_populates="from_agent",
        foreign_keys="Message.from_agent_id",
    )
    received_messages: Mapped[list["Message"]] = relationship(
        back_populates="to_agent",
        foreign_keys="Message.to_agent_id",
    )
    events: Mapped[list["Event"]] = relationship(back_populates="assigned_agent")


# ============================================================================
# Task Table
# ============================================================================


class Task(Base):
    """A unit of work on the kanban board."""

    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")
    status: Mapped[str] = mapped_column(
        String(20), default=TaskStatus.BACKLOG.value, index=True
    )
    priority: Mapped[str] = mapped_column(
        String(20), default=TaskPriority.MEDIUM.value, index=True
    )
    assigned_to: Mapped[str | None] = mapped_column(
        ForeignKey("agents.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    due_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, onupdate=utc_now
    )

    agent: Mapped["Agent | None"] = relationship(
        back_populates="assigned_tasks",
        foreign_keys=[assigned_to],
    )


# ============================================================================
# Event Table
# ============================================================================


class Event(Base):
    """Calendar entry.

    ``recurrence`` is a cron-like string kept for display only; nothing
    expands it into repeat occurrences.
    """

    __tablename__ = "events"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")
    start_time: Mapped[datetime] = mapped_column(DateTime, index=True)
    end_time: Mapped[datetime] = mapped_column(DateTime)
    recurrence: Mapped[str | None] = mapped_column(String(100), nullable=True)
    assigned_agent_id: Mapped[str | None] = mapped_column(
        ForeignKey("agents.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)

    assigned_agent: Mapped["Agent | None"] = relationship(back_populates="events")


# ============================================================================
# Message Table
# ============================================================================


class Message(Base):
    """Feed entry between agents. Messages are append-only.

    A message addressed to ``BROADCAST_LABEL`` is visible to everyone.
    """

    __tablename__ = "messages"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    content: Mapped[str] = mapped_column(Text)
    from_agent_id: Mapped[str | None] = mapped_column(
        ForeignKey("agents.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    to_agent_id: Mapped[str | None] = mapped_column(
        ForeignKey("agents.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    from_label: Mapped[str] = mapped_column(String(100), default=SYSTEM_LABEL)
    to_label: Mapped[str] = mapped_column(String(100), default=BROADCAST_LABEL)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, index=True
    )

    from_agent: Mapped["Agent | None"] = relationship(
        back_populates="sent_messages",
        foreign_keys=[from_agent_id],
    )
    to_agent: Mapped["Agent | None"] = relationship(
        back_populates="received_messages",
        foreign_keys=[to_agent_id],
    )
