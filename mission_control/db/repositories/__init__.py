"""Repository package for database operations."""

from mission_control.db.repositories.agent_repo import AgentRepository
from mission_control.db.repositories.base import BaseRepository
from mission_control.db.repositories.event_repo import EventRepository
from mission_control.db.repositories.message_repo import MessageRepository
from mission_control.db.repositories.task_repo import TaskRepository

__all__ = [
    "AgentRepository",
    "BaseRepository",
    "EventRepository",
    "MessageRepository",
    "TaskRepository",
]
