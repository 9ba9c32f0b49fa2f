"""
Chart of Accounts API Endpoints.

Any staff user can create and read accounts. Balance overrides are
restricted to admins.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from umrah_backend.app.db.session import get_db
from umrah_backend.app.domain.ledger.ledger_service import LedgerService
from umrah_backend.app.schemas.ledger import AccountCreate, AccountBalanceUpdate, AccountResponse
from umrah_backend.app.core.guards import require_staff, require_admin
from umrah_backend.app.services.audit import log_event, AuditAction

router = APIRouter(prefix="/accounts", tags=["Chart of Accounts"])


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
async def create_account(
    account_data: AccountCreate,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    """
    Create an account with a zero balance.

    404 if parent_account_id does not exist, 409 if account_code is taken.
    """
    account = await LedgerService(db).create_account(
        account_code=account_data.account_code,
        account_name=account_data.account_name,
        account_type=account_data.account_type,
        parent_account_id=account_data.parent_account_id,
    )

    await log_event(
        db=db,
        action=AuditAction.ACCOUNT_CREATED,
        actor_id=current_user["user_id"],
        actor_username=current_user["sub"],
        metadata={"account_id": account.id, "account_code": account.account_code}
    )

    return AccountResponse.model_validate(account)


@router.get("", response_model=List[AccountResponse])
async def list_accounts(
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    """List the chart of accounts ordered by code."""
    accounts = await LedgerService(db).list_accounts()
    return [AccountResponse.model_validate(account) for account in accounts]


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(
    account_id: int,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    account = await LedgerService(db).get_account(account_id)
    return AccountResponse.model_validate(account)


@router.patch("/{account_id}/balance", response_model=AccountResponse)
async def set_account_balance(
    account_id: int,
    balance_data: AccountBalanceUpdate,
    current_user: dict = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """
    Overwrite an account balance (Admin only).

    Manual override; posting transactions does not change balances.
    """
    account = await LedgerService(db).set_account_balance(account_id, balance_data.balance)

    await log_event(
        db=db,
        action=AuditAction.ACCOUNT_BALANCE_SET,
        actor_id=current_user["user_id"],
        actor_username=current_user["sub"],
        metadata={"account_id": account.id, "balance": str(account.balance)}
    )

    return AccountResponse.model_validate(account)
