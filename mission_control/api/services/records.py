"""Model-to-dict converters shared by the services.

Each converter returns only the entity's own columns. Services embed related
entities on top of these where an endpoint includes them.
"""

from typing import Any

from mission_control.db.models import Agent, Message, Task


def agent_record(agent: Agent) -> dict[str, Any]:
    """Convert an Agent to a flat dictionary."""
    return {
        "id": agent.id,
        "name": agent.name,
        "role": agent.role,
        "emoji": agent.emoji,
        "status": agent.status,
        "last_activity_at": agent.last_activity_at,
        "current_task_id": agent.current_task_id,
    }


def task_record(task: Task) -> dict[str, Any]:
    """Convert a Task to a flat dictionary."""
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "status": task.status,
        "priority": task.priority,
        "assigned_to": task.assigned_to,
        "due_date": task.due_date,
        "created_at": task.created_at,
        "updated_at": task.updated_at,
    }


def message_record(message: Message) -> dict[str, Any]:
    """Convert a Message to a flat dictionary."""
    return {
        "id": message.id,
        "content": message.content,
        "from_agent_id": message.from_agent_id,
        "to_agent_id": message.to_agent_id,
        "from_label": message.from_label,
        "to_label": message.to_label,
        "created_at": message.created_at,
    }
