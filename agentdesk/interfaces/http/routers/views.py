"""Shaped table pages over the listing snapshot."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from agentdesk.core.config import get_settings
from agentdesk.core.security import get_current_user
from agentdesk.interfaces.http.deps import get_agent_service, get_transaction_service
from agentdesk.interfaces.http.presenters import agent_to_schema, page_to_schema, row_to_schema
from agentdesk.modules.agents import AgentService
from agentdesk.modules.transactions import TransactionService
from agentdesk.modules.views import (
    AGENT_TABLE,
    TRANSACTION_TABLE,
    PageSizes,
    SortDirection,
    TableSpec,
    UnknownSortKeyError,
    ViewMode,
    ViewState,
    shape_rows,
    state_for,
)
from agentdesk.schemas import AgentResponse, ApiEnvelope, TransactionRowResponse, ViewPageResponse

router = APIRouter(dependencies=[Depends(get_current_user)])


def configured_page_sizes() -> PageSizes:
    views = get_settings().views
    return PageSizes(paged=views.page_size, scroll=views.scroll_page_size)


class ViewParams:
    """Query parameters shared by every shaped table."""

    def __init__(
        self,
        search: str = Query(default="", max_length=200),
        region: Optional[str] = Query(default=None),
        sort_key: Optional[str] = Query(default=None, alias="sortKey"),
        sort_direction: Optional[SortDirection] = Query(default=None, alias="sortDirection"),
        view_mode: ViewMode = Query(default=ViewMode.PAGED, alias="viewMode"),
        page: int = Query(default=1, ge=1),
    ) -> None:
        self.search = search
        self.region = region
        self.sort_key = sort_key
        self.sort_direction = sort_direction
        self.view_mode = view_mode
        self.page = page

    def state(self, table: TableSpec) -> ViewState:
        try:
            return state_for(
                table,
                configured_page_sizes(),
                search=self.search,
                region=self.region,
                sort_key=self.sort_key,
                sort_direction=self.sort_direction,
                view_mode=self.view_mode,
                page=self.page,
            )
        except UnknownSortKeyError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get(
    "/transactions",
    response_model=ApiEnvelope[ViewPageResponse[TransactionRowResponse]],
    summary="One page of the transaction table",
)
async def transaction_view(
    params: ViewParams = Depends(),
    service: TransactionService = Depends(get_transaction_service),
):
    state = params.state(TRANSACTION_TABLE)
    snapshot = await service.listing_snapshot()
    page = shape_rows(snapshot.transactions, TRANSACTION_TABLE, state)
    return ApiEnvelope(data=page_to_schema(page, [row_to_schema(row) for row in page.rows]))


@router.get(
    "/agents",
    response_model=ApiEnvelope[ViewPageResponse[AgentResponse]],
    summary="One page of the agent table",
)
async def agent_view(
    params: ViewParams = Depends(),
    service: AgentService = Depends(get_agent_service),
):
    state = params.state(AGENT_TABLE)
    agents = await service.list_agents()
    page = shape_rows(agents, AGENT_TABLE, state)
    return ApiEnvelope(data=page_to_schema(page, [agent_to_schema(agent) for agent in page.rows]))
