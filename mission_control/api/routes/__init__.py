"""API route modules."""

from mission_control.api.routes.agents import router as agents_router
from mission_control.api.routes.events import router as events_router
from mission_control.api.routes.messages import router as messages_router
from mission_control.api.routes.monitoring import router as monitoring_router
from mission_control.api.routes.tasks import router as tasks_router

__all__ = [
    "agents_router",
    "events_router",
    "messages_router",
    "monitoring_router",
    "tasks_router",
]
