"""Tasks API routes backing the kanban board."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from mission_control.api.dependencies import get_task_service
from mission_control.api.schemas.common import DeleteResponse
from mission_control.api.schemas.tasks import TaskCreate, TaskResponse, TaskUpdate
from mission_control.api.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])


# =============================================================================
# List / Create
# =============================================================================


@router.get("", response_model=list[TaskResponse], name="fetch_tasks")
async def list_tasks(
    service: Annotated[TaskService, Depends(get_task_service)],
    task_status: str | None = Query(None, alias="status", description="Filter by status"),
    priority: str | None = Query(None, description="Filter by priority"),
    assigned_to: str | None = Query(None, alias="assignedTo", description="Filter by assignee agent ID"),
) -> list[TaskResponse]:
    """List tasks with optional filters.

    Filters are exact matches and combine with AND. Results are ordered
    newest first and include the assigned agent.

    Args:
        service: Task service instance
        task_status: Optional status filter
        priority: Optional priority filter
        assigned_to: Optional assignee filter

    Returns:
        list[TaskResponse]: Matching tasks
    """
    tasks = await service.list_all(
        status=task_status,
        priority=priority,
        assigned_to=assigned_to,
    )
    return [TaskResponse(**t) for t in tasks]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    data: TaskCreate,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """Create a new task.

    Only ``title`` is required. Defaults: empty description, status
    "backlog", priority "medium", no assignee, no due date.

    Args:
        data: Task creation data
        service: Task service instance

    Returns:
        TaskResponse: Created task
    """
    created = await service.create(
        title=data.title,
        description=data.description,
        status=data.status,
        priority=data.priority,
        assigned_to=data.assigned_to,
        due_date=data.due_date,
    )
    return TaskResponse(**created)


# =============================================================================
# Single Task Operations
# =============================================================================


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    data: TaskUpdate,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """Update a task.

    All fields are optional - provide only what needs updating. Dropping a
    card into another kanban column sends just ``{"status": ...}``.

    Raises:
        HTTPException: 404 if task not found
    """
    updated = await service.update(task_id, data.model_dump(exclude_unset=True))
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
    return TaskResponse(**updated)


@router.delete("/{task_id}", response_model=DeleteResponse)
async def delete_task(
    task_id: str,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> DeleteResponse:
    """Delete a task.

    Raises:
        HTTPException: 404 if task not found
    """
    deleted = await service.delete(task_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
    return DeleteResponse()
