"""
Financial Transaction API Endpoints.

Transactions are immutable: there are no update or delete routes.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from umrah_backend.app.db.session import get_db
from umrah_backend.app.domain.ledger.ledger_service import LedgerService
from umrah_backend.app.schemas.ledger import (
    TransactionCreate, TransactionResponse, TransactionEntryResponse
)
from umrah_backend.app.core.guards import require_staff
from umrah_backend.app.services.audit import log_event, AuditAction

router = APIRouter(prefix="/transactions", tags=["Financial Transactions"])


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction_data: TransactionCreate,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    """
    Post a transaction with its debit/credit entries.

    total_amount is derived from the entries. created_by defaults to the
    authenticated user.
    """
    created_by = transaction_data.created_by
    if created_by is None:
        created_by = current_user["user_id"]

    transaction = await LedgerService(db).create_transaction(
        reference=transaction_data.reference,
        description=transaction_data.description,
        entries=transaction_data.entries,
        created_by=created_by,
        booking_id=transaction_data.booking_id,
        transaction_date=transaction_data.transaction_date,
    )

    await log_event(
        db=db,
        action=AuditAction.TRANSACTION_POSTED,
        actor_id=current_user["user_id"],
        actor_username=current_user["sub"],
        metadata={
            "transaction_id": transaction.id,
            "reference": transaction.reference,
            "total_amount": str(transaction.total_amount),
        }
    )

    return TransactionResponse.model_validate(transaction)


@router.get("", response_model=List[TransactionResponse])
async def list_transactions(
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    """List transactions in chronological order."""
    transactions = await LedgerService(db).list_transactions()
    return [TransactionResponse.model_validate(t) for t in transactions]


@router.get("/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: int,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    transaction = await LedgerService(db).get_transaction(transaction_id)
    return TransactionResponse.model_validate(transaction)


@router.get("/{transaction_id}/entries", response_model=List[TransactionEntryResponse])
async def list_transaction_entries(
    transaction_id: int,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    entries = await LedgerService(db).list_entries(transaction_id)
    return [TransactionEntryResponse.model_validate(e) for e in entries]
