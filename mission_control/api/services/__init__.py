"""Service layer for business logic."""

from mission_control.api.services.agent_service import AgentService
from mission_control.api.services.event_service import EventService
from mission_control.api.services.message_service import MessageService
from mission_control.api.services.monitoring_service import MonitoringService
from mission_control.api.services.seed_service import SeedResult, SeedService
from mission_control.api.services.task_service import TaskService

__all__ = [
    "AgentService",
    "EventService",
    "MessageService",
    "MonitoringService",
    "SeedResult",
    "SeedService",
    "TaskService",
]
