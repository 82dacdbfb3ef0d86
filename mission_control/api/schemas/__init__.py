"""Pydantic schemas for API request/response models."""

from mission_control.api.schemas.agents import (
    AgentDetailResponse,
    AgentResponse,
    AgentUpdate,
)
from mission_control.api.schemas.common import (
    AgentRecord,
    DeleteResponse,
    MessageRecord,
    TaskRecord,
)
from mission_control.api.schemas.events import EventCreate, EventResponse, EventUpdate
from mission_control.api.schemas.messages import MessageCreate, MessageResponse
from mission_control.api.schemas.monitoring import HealthResponse, StatsResponse
from mission_control.api.schemas.tasks import TaskCreate, TaskResponse, TaskUpdate

__all__ = [
    # Agent schemas
    "AgentDetailResponse",
    "AgentRecord",
    "AgentResponse",
    "AgentUpdate",
    # Task schemas
    "TaskCreate",
    "TaskRecord",
    "TaskResponse",
    "TaskUpdate",
    # Event schemas
    "EventCreate",
    "EventResponse",
    "EventUpdate",
    # Message schemas
    "MessageCreate",
    "MessageRecord",
    "MessageResponse",
    # Shared
    "DeleteResponse",
    "HealthResponse",
    "StatsResponse",
]
