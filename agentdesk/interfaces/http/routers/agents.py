"""Agent CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from agentdesk.core.security import get_current_user
from agentdesk.interfaces.http.deps import get_agent_service
from agentdesk.interfaces.http.presenters import agent_to_schema
from agentdesk.modules.agents import (
    AgentCreateInput,
    AgentNotFoundError,
    AgentService,
    AgentUpdateInput,
    AgentValidationError,
)
from agentdesk.schemas import AgentCreate, AgentResponse, AgentUpdate, ApiEnvelope

router = APIRouter(dependencies=[Depends(get_current_user)])


def _create_input(payload: AgentCreate) -> AgentCreateInput:
    return AgentCreateInput(
        first_name=payload.first_name,
        last_name=payload.last_name,
        region=payload.region,
        rating=payload.rating,
        fee=payload.fee,
    )


def _not_found(exc: AgentNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Agent not found: {exc.agent_id}")


@router.get("", response_model=ApiEnvelope[list[AgentResponse]], summary="List agents")
async def list_agents(service: AgentService = Depends(get_agent_service)):
    agents = await service.list_agents()
    return ApiEnvelope(data=[agent_to_schema(agent) for agent in agents])


@router.get("/{agent_id}", response_model=ApiEnvelope[AgentResponse], summary="Get one agent")
async def get_agent(agent_id: str, service: AgentService = Depends(get_agent_service)):
    try:
        agent = await service.get_agent(agent_id)
    except AgentNotFoundError as exc:
        raise _not_found(exc) from exc
    return ApiEnvelope(data=agent_to_schema(agent))


@router.post(
    "",
    response_model=ApiEnvelope[AgentResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create an agent",
)
async def create_agent(payload: AgentCreate, service: AgentService = Depends(get_agent_service)):
    try:
        agent = await service.create_agent(_create_input(payload))
    except AgentValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ApiEnvelope(data=agent_to_schema(agent), message="Agent created successfully")


@router.put("/{agent_id}", response_model=ApiEnvelope[AgentResponse], summary="Replace an agent")
async def replace_agent(
    agent_id: str,
    payload: AgentCreate,
    service: AgentService = Depends(get_agent_service),
):
    try:
        agent = await service.replace_agent(agent_id, _create_input(payload))
    except AgentNotFoundError as exc:
        raise _not_found(exc) from exc
    except AgentValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ApiEnvelope(data=agent_to_schema(agent), message="Agent updated successfully")


@router.patch("/{agent_id}", response_model=ApiEnvelope[AgentResponse], summary="Update some agent fields")
async def update_agent(
    agent_id: str,
    payload: AgentUpdate,
    service: AgentService = Depends(get_agent_service),
):
    changes = AgentUpdateInput(**payload.model_dump(exclude_unset=True))
    try:
        agent = await service.update_agent(agent_id, changes)
    except AgentNotFoundError as exc:
        raise _not_found(exc) from exc
    except AgentValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ApiEnvelope(data=agent_to_schema(agent), message="Agent updated successfully")


@router.delete("/{agent_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an agent")
async def delete_agent(agent_id: str, service: AgentService = Depends(get_agent_service)) -> Response:
    try:
        await service.delete_agent(agent_id)
    except AgentNotFoundError as exc:
        raise _not_found(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
