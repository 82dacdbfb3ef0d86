"""Shared pydantic building blocks for the API schemas."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    PlainSerializer,
)
from pydantic.alias_generators import to_camel

from mission_control.core.timezone import to_utc_iso, to_utc_naive


class CamelModel(BaseModel):
    """Base model exposing snake_case attributes as camelCase JSON fields.

    Accepts either spelling on input; FastAPI serializes responses by alias.
    Enum fields hold their plain string values.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


def _falsy_to_none(value: Any) -> Any:
    """Treat empty strings (and other falsy values) as an explicit null."""
    return value or None


# Timestamp accepted from clients, normalized to naive UTC
UtcDatetime = Annotated[datetime, AfterValidator(to_utc_naive)]

# Optional field where "" (or any falsy value) clears the stored value
ClearableDatetime = Annotated[
    UtcDatetime | None, BeforeValidator(_falsy_to_none)
]
ClearableStr = Annotated[str | None, BeforeValidator(_falsy_to_none)]

# Stored naive UTC, rendered with a "Z" suffix so clients parse it as UTC
UtcTimestamp = Annotated[
    datetime, PlainSerializer(to_utc_iso, return_type=str, when_used="json")
]


def null_as(default: Any) -> BeforeValidator:
    """Substitute ``default`` when a client sends an explicit null.

    Create bodies treat ``"field": null`` the same as leaving the field out.
    """
    return BeforeValidator(lambda value: default if value is None else value)


class DeleteResponse(BaseModel):
    """Response model for DELETE endpoints."""

    success: bool = True


# =============================================================================
# Flat records (embedded inside other responses)
# =============================================================================


class AgentRecord(CamelModel):
    """Agent columns without any related entities."""

    id: str
    name: str
    role: str
    emoji: str
    status: str
    last_activity_at: UtcTimestamp
    current_task_id: str | None = None


class TaskRecord(CamelModel):
    """Task columns without the assigned agent."""

    id: str
    title: str
    description: str
    status: str
    priority: str
    assigned_to: str | None = None
    due_date: UtcTimestamp | None = None
    created_at: UtcTimestamp
    updated_at: UtcTimestamp


class MessageRecord(CamelModel):
    """Message columns without sender/recipient agents."""

    id: str
    content: str
    from_agent_id: str | None = None
    to_agent_id: str | None = None
    from_label: str
    to_label: str
    created_at: UtcTimestamp
