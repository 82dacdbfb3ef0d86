"""Agents API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from mission_control.api.dependencies import get_agent_service
from mission_control.api.schemas.agents import (
    AgentDetailResponse,
    AgentResponse,
    AgentUpdate,
)
from mission_control.api.services.agent_service import AgentService

router = APIRouter(prefix="/agents", tags=["agents"])


@router.get("", response_model=list[AgentResponse], name="fetch_agents")
async def list_agents(
    service: Annotated[AgentService, Depends(get_agent_service)],
) -> list[AgentResponse]:
    """List every agent with its current task embedded.

    Args:
        service: Agent service instance

    Returns:
        list[AgentResponse]: All agents, ordered by name
    """
    agents = await service.list_all()
    return [AgentResponse(**a) for a in agents]


@router.get("/{agent_id}", response_model=AgentDetailResponse, name="fetch_agent")
async def get_agent(
    agent_id: str,
    service: Annotated[AgentService, Depends(get_agent_service)],
) -> AgentDetailResponse:
    """Get one agent with its assigned tasks and sent messages.

    Raises:
        HTTPException: 404 if agent not found
    """
    agent = await service.get(agent_id)
    if agent is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Agent not found",
        )
    return AgentDetailResponse(**agent)


@router.patch("/{agent_id}", response_model=AgentResponse)
async def update_agent(
    agent_id: str,
    data: AgentUpdate,
    service: Annotated[AgentService, Depends(get_agent_service)],
) -> AgentResponse:
    """Update an agent's status, current task and/or last activity.

    Only fields present in the body are written.

    Args:
        agent_id: Agent ID
        data: Partial update
        service: Agent service instance

    Returns:
        AgentResponse: Updated agent with current task embedded

    Raises:
        HTTPException: 404 if agent not found
    """
    updated = await service.update(agent_id, data.model_dump(exclude_unset=True))
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Agent not found",
        )
    return AgentResponse(**updated)
