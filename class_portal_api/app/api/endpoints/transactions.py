"""
Transaction endpoints.

CRUD routes for the class ledger, newest transaction first.  The
finance summary is also exposed here as ``/transactions/summary``;
that route is declared before ``/{transaction_id}`` so the literal
path segment is not parsed as an identifier.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from class_portal_api.app.api.deps import get_finance_service, get_transaction_service
from class_portal_api.app.schemas.transaction import (
    FinanceSummary,
    TransactionCreate,
    TransactionRead,
    TransactionUpdate,
)
from class_portal_api.app.services.finance_service import FinanceService
from class_portal_api.app.services.transaction_service import TransactionService

router = APIRouter()


@router.get("", response_model=List[TransactionRead])
async def list_transactions(
    service: TransactionService = Depends(get_transaction_service),
) -> List[TransactionRead]:
    """Return all transactions, newest first."""
    return await service.list()


@router.get("/summary", response_model=FinanceSummary)
async def transactions_summary(service: FinanceService = Depends(get_finance_service)) -> FinanceSummary:
    """Same figures as ``GET /finance-summary``."""
    return await service.summarize()


@router.get("/{transaction_id}", response_model=TransactionRead)
async def get_transaction(
    transaction_id: int,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionRead:
    transaction = await service.get(transaction_id)
    if transaction is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    return transaction


@router.post("", response_model=TransactionRead, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction_in: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionRead:
    """Record an income or expense.  ``amount`` must not be negative."""
    return await service.create(transaction_in)


@router.put("/{transaction_id}", response_model=TransactionRead)
async def update_transaction(
    transaction_id: int,
    transaction_in: TransactionUpdate,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionRead:
    transaction = await service.update(transaction_id, transaction_in)
    if transaction is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    return transaction


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: int,
    service: TransactionService = Depends(get_transaction_service),
) -> None:
    deleted = await service.delete(transaction_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    return None
