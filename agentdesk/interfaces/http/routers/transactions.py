"""Transaction endpoints and the listing snapshot."""

from fastapi import APIRouter, Depends, HTTPException, status

from agentdesk.core.security import get_current_user
from agentdesk.interfaces.http.deps import get_transaction_service
from agentdesk.interfaces.http.presenters import agent_to_schema, row_to_schema, transaction_to_schema
from agentdesk.modules.transactions import (
    TransactionInput,
    TransactionNotFoundError,
    TransactionService,
    TransactionValidationError,
)
from agentdesk.schemas import ApiEnvelope, ListingResponse, TransactionCreate, TransactionResponse

router = APIRouter(dependencies=[Depends(get_current_user)])


def _to_input(payload: TransactionCreate) -> TransactionInput:
    return TransactionInput(amount=payload.amount, agent_id=payload.agent_id, date=payload.date)


@router.get(
    "/transaction-data",
    response_model=ApiEnvelope[ListingResponse],
    summary="Every transaction with its agent name, plus every agent",
)
async def transaction_data(service: TransactionService = Depends(get_transaction_service)):
    snapshot = await service.listing_snapshot()
    return ApiEnvelope(
        data=ListingResponse(
            transactions=[row_to_schema(row) for row in snapshot.transactions],
            agents=[agent_to_schema(agent) for agent in snapshot.agents],
        )
    )


@router.get("/transaction/{transaction_id}", response_model=ApiEnvelope[TransactionResponse], summary="Get one transaction")
async def get_transaction(
    transaction_id: str,
    service: TransactionService = Depends(get_transaction_service),
):
    try:
        transaction = await service.get_transaction(transaction_id)
    except TransactionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found") from exc
    return ApiEnvelope(data=transaction_to_schema(transaction))


@router.post(
    "/transaction",
    response_model=ApiEnvelope[TransactionResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Record a transaction",
)
async def create_transaction(
    payload: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
):
    try:
        transaction = await service.create_transaction(_to_input(payload))
    except TransactionValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ApiEnvelope(data=transaction_to_schema(transaction), message="Transaction successful!")


@router.put("/transaction/{transaction_id}", response_model=ApiEnvelope[TransactionResponse], summary="Edit a transaction")
async def update_transaction(
    transaction_id: str,
    payload: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
):
    try:
        transaction = await service.update_transaction(transaction_id, _to_input(payload))
    except TransactionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found") from exc
    except TransactionValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ApiEnvelope(data=transaction_to_schema(transaction), message="Transaction updated successfully!")
