"""
Ledger Service (Domain Logic).

Maintains the chart of accounts, records financial transactions as a header
plus debit/credit entry lines, and produces the chronological journal.

A transaction and its entries are written in ONE database transaction:
either every row is committed or none is.
"""

import logging
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from umrah_backend.app.core.exceptions import ConflictError, ResourceNotFoundError
from umrah_backend.app.domain.money import to_money
from umrah_backend.app.domain.periods import day_bounds
from umrah_backend.app.models.account import Account
from umrah_backend.app.models.financial_transaction import FinancialTransaction
from umrah_backend.app.models.package_booking import PackageBooking
from umrah_backend.app.models.transaction_entry import TransactionEntry
from umrah_backend.app.schemas.ledger import JournalEntry, TransactionEntryInput

logger = logging.getLogger("umrah.ledger")


def _as_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class LedgerService:
    """Chart of accounts, transaction posting and journal queries."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ------------------------------------------------------------------
    # Chart of accounts
    # ------------------------------------------------------------------

    async def create_account(
        self,
        account_code: str,
        account_name: str,
        account_type: str,
        parent_account_id: Optional[int] = None,
    ) -> Account:
        """
        Create an account with balance 0.

        Raises:
            ResourceNotFoundError: parent account does not exist
            ConflictError: account_code already used
        """
        if parent_account_id is not None:
            parent = await self.db.get(Account, parent_account_id)
            if not parent:
                raise ResourceNotFoundError("Parent account", parent_account_id)

        account = Account(
            account_code=account_code,
            account_name=account_name,
            account_type=account_type,
            parent_account_id=parent_account_id,
            balance=to_money(0),
            is_active=True,
        )
        self.db.add(account)

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError("Account", "account_code", account_code)

        await self.db.refresh(account)
        logger.info("Account created", extra={"account_id": account.id, "account_code": account_code})
        return account

    async def set_account_balance(self, account_id: int, new_balance: Decimal) -> Account:
        """
        Overwrite an account's balance. Negative values are accepted.

        This is an administrative override; posted entries never move it.
        """
        account = await self.db.get(Account, account_id)
        if not account:
            raise ResourceNotFoundError("Account", account_id)

        previous = account.balance
        account.balance = to_money(new_balance)
        await self.db.commit()
        await self.db.refresh(account)

        logger.info(
            "Account balance set",
            extra={"account_id": account_id, "previous": str(previous), "balance": str(account.balance)},
        )
        return account

    async def list_accounts(self) -> Sequence[Account]:
        result = await self.db.execute(select(Account).order_by(Account.account_code))
        return result.scalars().all()

    async def get_account(self, account_id: int) -> Account:
        account = await self.db.get(Account, account_id)
        if not account:
            raise ResourceNotFoundError("Account", account_id)
        return account

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    async def create_transaction(
        self,
        reference: str,
        description: str,
        entries: List[TransactionEntryInput],
        created_by: int,
        booking_id: Optional[int] = None,
        transaction_date: Optional[datetime] = None,
    ) -> FinancialTransaction:
        """
        Post a financial transaction with its entry lines.

        Flow:
        1. Validate every referenced account (one set-membership query)
        2. Validate the optional booking link
        3. Derive total_amount = max(sum of debits, sum of credits)
        4. Write header + entries, commit once

        Debits and credits are NOT required to balance.

        Raises:
            ResourceNotFoundError: an account or the linked booking is missing
            ConflictError: reference already used
        """
        # 1. Accounts
        account_ids = {entry.account_id for entry in entries}
        if account_ids:
            result = await self.db.execute(select(Account.id).where(Account.id.in_(account_ids)))
            found = set(result.scalars().all())
            if found != account_ids:
                raise ResourceNotFoundError("One or more accounts", sorted(account_ids - found))

        # 2. Booking link
        if booking_id is not None:
            booking = await self.db.get(PackageBooking, booking_id)
            if not booking:
                raise ResourceNotFoundError("Booking", booking_id)

        # 3. Totals
        total_debit = sum((to_money(e.debit_amount) for e in entries), Decimal("0.00"))
        total_credit = sum((to_money(e.credit_amount) for e in entries), Decimal("0.00"))
        total_amount = max(total_debit, total_credit)

        # 4. Single unit of work
        transaction = FinancialTransaction(
            transaction_date=_as_naive_utc(transaction_date) if transaction_date else datetime.utcnow(),
            reference=reference,
            description=description,
            total_amount=total_amount,
            created_by=created_by,
            booking_id=booking_id,
        )

        try:
            self.db.add(transaction)
            try:
                await self.db.flush()  # To get transaction.id
            except IntegrityError:
                raise ConflictError("Transaction", "reference", reference)

            self.db.add_all(self._build_entries(transaction.id, entries))
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        await self.db.refresh(transaction)
        logger.info(
            "Transaction posted",
            extra={
                "transaction_id": transaction.id,
                "reference": reference,
                "entries": len(entries),
                "total_amount": str(total_amount),
            },
        )
        return transaction

    @staticmethod
    def _build_entries(transaction_id: int, entries: List[TransactionEntryInput]) -> List[TransactionEntry]:
        return [
            TransactionEntry(
                transaction_id=transaction_id,
                account_id=entry.account_id,
                debit_amount=to_money(entry.debit_amount),
                credit_amount=to_money(entry.credit_amount),
                description=entry.description,
            )
            for entry in entries
        ]

    async def list_transactions(self) -> Sequence[FinancialTransaction]:
        result = await self.db.execute(
            select(FinancialTransaction).order_by(
                FinancialTransaction.transaction_date.asc(),
                FinancialTransaction.id.asc(),
            )
        )
        return result.scalars().all()

    async def get_transaction(self, transaction_id: int) -> FinancialTransaction:
        transaction = await self.db.get(FinancialTransaction, transaction_id)
        if not transaction:
            raise ResourceNotFoundError("Transaction", transaction_id)
        return transaction

    async def list_entries(self, transaction_id: int) -> Sequence[TransactionEntry]:
        await self.get_transaction(transaction_id)
        result = await self.db.execute(
            select(TransactionEntry)
            .where(TransactionEntry.transaction_id == transaction_id)
            .order_by(TransactionEntry.id)
        )
        return result.scalars().all()

    # ------------------------------------------------------------------
    # Journal
    # ------------------------------------------------------------------

    async def get_journal_report(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[JournalEntry]:
        """
        One row per entry, newest transaction first.

        Both bounds are inclusive calendar days. Ties on transaction_date are
        ordered by reference, then by entry insertion order.
        """
        query = (
            select(
                FinancialTransaction.id,
                FinancialTransaction.transaction_date,
                FinancialTransaction.reference,
                Account.account_name,
                Account.account_code,
                TransactionEntry.debit_amount,
                TransactionEntry.credit_amount,
                TransactionEntry.description,
            )
            .join(FinancialTransaction, TransactionEntry.transaction_id == FinancialTransaction.id)
            .join(Account, TransactionEntry.account_id == Account.id)
        )

        lower, upper = day_bounds(start_date, end_date)
        if lower is not None:
            query = query.where(FinancialTransaction.transaction_date >= lower)
        if upper is not None:
            query = query.where(FinancialTransaction.transaction_date < upper)

        query = query.order_by(
            FinancialTransaction.transaction_date.desc(),
            FinancialTransaction.reference.asc(),
            TransactionEntry.id.asc(),
        )

        result = await self.db.execute(query)
        return [
            JournalEntry(
                transaction_id=row.id,
                transaction_date=row.transaction_date,
                reference=row.reference,
                account_name=row.account_name,
                account_code=row.account_code,
                debit_amount=to_money(row.debit_amount),
                credit_amount=to_money(row.credit_amount),
                description=row.description or "",
            )
            for row in result.all()
        ]
