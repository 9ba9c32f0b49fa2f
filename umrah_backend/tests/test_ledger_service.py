"""
Ledger Service tests.

Chart of accounts, transaction posting and the journal query, exercised
directly against the service with a test session.
"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from umrah_backend.app.core.exceptions import ConflictError, ResourceNotFoundError
from umrah_backend.app.domain.ledger.ledger_service import LedgerService
from umrah_backend.app.models.account import Account
from umrah_backend.app.models.financial_transaction import FinancialTransaction
from umrah_backend.app.models.transaction_entry import TransactionEntry
from umrah_backend.app.schemas.ledger import TransactionEntryInput


@pytest.fixture
async def cash_and_revenue(db_session):
    ledger = LedgerService(db_session)
    cash = await ledger.create_account("1100", "Cash", "Asset")
    revenue = await ledger.create_account("4100", "Umrah Package Sales", "Revenue")
    return cash, revenue


def _entry(account_id, debit="0", credit="0", description=None):
    return TransactionEntryInput(
        account_id=account_id,
        debit_amount=Decimal(debit),
        credit_amount=Decimal(credit),
        description=description,
    )


async def _count(db_session, model) -> int:
    return (await db_session.execute(select(func.count(model.id)))).scalar()


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------

async def test_create_account_starts_at_zero(db_session):
    account = await LedgerService(db_session).create_account("1000", "Assets", "Asset")

    assert account.id is not None
    assert account.balance == Decimal("0.00")
    assert account.is_active is True
    assert account.parent_account_id is None


async def test_create_child_account(db_session):
    ledger = LedgerService(db_session)
    parent = await ledger.create_account("1000", "Assets", "Asset")
    child = await ledger.create_account("1100", "Cash", "Asset", parent_account_id=parent.id)

    assert child.parent_account_id == parent.id


async def test_missing_parent_inserts_nothing(db_session):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await LedgerService(db_session).create_account("1100", "Cash", "Asset", parent_account_id=999)

    assert exc_info.value.details["resource"] == "Parent account"
    assert await _count(db_session, Account) == 0


async def test_duplicate_account_code_conflicts(db_session):
    ledger = LedgerService(db_session)
    await ledger.create_account("1100", "Cash", "Asset")

    with pytest.raises(ConflictError):
        await ledger.create_account("1100", "Petty Cash", "Asset")

    assert await _count(db_session, Account) == 1


async def test_set_balance_overwrites_and_accepts_negative(db_session, cash_and_revenue):
    cash, _ = cash_and_revenue
    ledger = LedgerService(db_session)

    updated = await ledger.set_account_balance(cash.id, Decimal("1500.5"))
    assert updated.balance == Decimal("1500.50")

    updated = await ledger.set_account_balance(cash.id, Decimal("-20"))
    assert updated.balance == Decimal("-20.00")


async def test_set_balance_missing_account(db_session):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await LedgerService(db_session).set_account_balance(42, Decimal("1"))
    assert exc_info.value.details["resource"] == "Account"


async def test_posting_does_not_move_balances(db_session, cash_and_revenue):
    cash, revenue = cash_and_revenue
    ledger = LedgerService(db_session)

    await ledger.create_transaction(
        reference="TRX-001",
        description="Deposit",
        entries=[_entry(cash.id, debit="500"), _entry(revenue.id, credit="500")],
        created_by=1,
    )

    account = await ledger.get_account(cash.id)
    assert account.balance == Decimal("0.00")


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------

async def test_balanced_total(db_session, cash_and_revenue):
    cash, revenue = cash_and_revenue
    transaction = await LedgerService(db_session).create_transaction(
        reference="TRX-001",
        description="Package payment",
        entries=[_entry(cash.id, debit="1000"), _entry(revenue.id, credit="1000")],
        created_by=1,
    )

    assert transaction.total_amount == Decimal("1000.00")


async def test_unbalanced_total_takes_larger_side(db_session, cash_and_revenue):
    cash, revenue = cash_and_revenue
    transaction = await LedgerService(db_session).create_transaction(
        reference="TRX-002",
        description="Partial adjustment",
        entries=[_entry(cash.id, debit="600"), _entry(revenue.id, credit="400")],
        created_by=1,
    )

    assert transaction.total_amount == Decimal("600.00")


async def test_empty_entries(db_session):
    transaction = await LedgerService(db_session).create_transaction(
        reference="TRX-EMPTY", description="Memo", entries=[], created_by=1
    )

    assert transaction.total_amount == Decimal("0.00")
    assert await _count(db_session, TransactionEntry) == 0


async def test_unknown_account_writes_nothing(db_session, cash_and_revenue):
    cash, _ = cash_and_revenue

    with pytest.raises(ResourceNotFoundError) as exc_info:
        await LedgerService(db_session).create_transaction(
            reference="TRX-003",
            description="Bad entry",
            entries=[_entry(cash.id, debit="10"), _entry(999, credit="10")],
            created_by=1,
        )

    assert exc_info.value.details["resource"] == "One or more accounts"
    assert await _count(db_session, FinancialTransaction) == 0
    assert await _count(db_session, TransactionEntry) == 0


async def test_unknown_booking_link(db_session, cash_and_revenue):
    cash, revenue = cash_and_revenue

    with pytest.raises(ResourceNotFoundError) as exc_info:
        await LedgerService(db_session).create_transaction(
            reference="TRX-004",
            description="Linked",
            entries=[_entry(cash.id, debit="10"), _entry(revenue.id, credit="10")],
            created_by=1,
            booking_id=555,
        )

    assert exc_info.value.details["resource"] == "Booking"
    assert await _count(db_session, FinancialTransaction) == 0


async def test_duplicate_reference_conflicts(db_session, cash_and_revenue):
    cash, revenue = cash_and_revenue
    ledger = LedgerService(db_session)
    entries = [_entry(cash.id, debit="10"), _entry(revenue.id, credit="10")]

    await ledger.create_transaction(reference="TRX-005", description="First", entries=entries, created_by=1)

    with pytest.raises(ConflictError):
        await ledger.create_transaction(reference="TRX-005", description="Again", entries=entries, created_by=1)

    assert await _count(db_session, FinancialTransaction) == 1
    assert await _count(db_session, TransactionEntry) == 2


async def test_entry_failure_rolls_back_header(db_session, cash_and_revenue, mocker):
    cash, revenue = cash_and_revenue
    mocker.patch.object(LedgerService, "_build_entries", side_effect=RuntimeError("store unavailable"))

    with pytest.raises(RuntimeError):
        await LedgerService(db_session).create_transaction(
            reference="TRX-006",
            description="Interrupted",
            entries=[_entry(cash.id, debit="10"), _entry(revenue.id, credit="10")],
            created_by=1,
        )

    assert await _count(db_session, FinancialTransaction) == 0
    assert await _count(db_session, TransactionEntry) == 0


async def test_entry_write_failure_rolls_back_header(db_session, cash_and_revenue, mocker):
    """An entry rejected by the database takes the header down with it."""
    cash, _ = cash_and_revenue
    dangling = TransactionEntry(account_id=12345, debit_amount=Decimal("1.00"), credit_amount=Decimal("0.00"))

    def build(transaction_id, entries):
        dangling.transaction_id = transaction_id
        return [dangling]

    mocker.patch.object(LedgerService, "_build_entries", side_effect=build)

    with pytest.raises(IntegrityError):
        await LedgerService(db_session).create_transaction(
            reference="TRX-007",
            description="Dangling account",
            entries=[_entry(cash.id, debit="1")],
            created_by=1,
        )

    assert await _count(db_session, FinancialTransaction) == 0


async def test_list_entries(db_session, cash_and_revenue):
    cash, revenue = cash_and_revenue
    ledger = LedgerService(db_session)
    transaction = await ledger.create_transaction(
        reference="TRX-008",
        description="Two lines",
        entries=[_entry(cash.id, debit="25.5"), _entry(revenue.id, credit="25.5", description="Sale")],
        created_by=3,
    )

    entries = await ledger.list_entries(transaction.id)

    assert [e.account_id for e in entries] == [cash.id, revenue.id]
    assert entries[0].debit_amount == Decimal("25.50")
    assert entries[1].description == "Sale"

    with pytest.raises(ResourceNotFoundError):
        await ledger.list_entries(transaction.id + 100)


# ---------------------------------------------------------------------------
# Journal
# ---------------------------------------------------------------------------

async def test_journal_round_trip(db_session, cash_and_revenue):
    cash, revenue = cash_and_revenue
    entries = [
        _entry(cash.id, debit="750.25", description="Cash in"),
        _entry(revenue.id, credit="700.00"),
        _entry(revenue.id, credit="50.25", description="Fee"),
    ]
    await LedgerService(db_session).create_transaction(
        reference="TRX-009",
        description="Round trip",
        entries=entries,
        created_by=1,
        transaction_date=datetime(2024, 2, 1, 9, 30),
    )

    rows = await LedgerService(db_session).get_journal_report(date(2024, 2, 1), date(2024, 2, 1))

    assert len(rows) == len(entries)
    assert [(r.debit_amount, r.credit_amount, r.description) for r in rows] == [
        (Decimal("750.25"), Decimal("0.00"), "Cash in"),
        (Decimal("0.00"), Decimal("700.00"), ""),
        (Decimal("0.00"), Decimal("50.25"), "Fee"),
    ]
    assert rows[0].account_code == "1100"
    assert rows[0].account_name == "Cash"
    assert rows[0].reference == "TRX-009"


async def test_journal_start_date_filter(db_session, cash_and_revenue):
    cash, revenue = cash_and_revenue
    ledger = LedgerService(db_session)
    for reference, when in (("TRX-DEC", datetime(2023, 12, 15)), ("TRX-JAN", datetime(2024, 1, 15))):
        await ledger.create_transaction(
            reference=reference,
            description=reference,
            entries=[_entry(cash.id, debit="100"), _entry(revenue.id, credit="100")],
            created_by=1,
            transaction_date=when,
        )

    rows = await ledger.get_journal_report(start_date=date(2024, 1, 1))

    assert len(rows) == 2
    assert {r.reference for r in rows} == {"TRX-JAN"}


async def test_journal_end_date_includes_whole_day(db_session, cash_and_revenue):
    cash, _ = cash_and_revenue
    ledger = LedgerService(db_session)
    await ledger.create_transaction(
        reference="TRX-LATE",
        description="Evening posting",
        entries=[_entry(cash.id, debit="1")],
        created_by=1,
        transaction_date=datetime(2024, 1, 31, 23, 59, 59),
    )
    await ledger.create_transaction(
        reference="TRX-NEXT",
        description="Next day",
        entries=[_entry(cash.id, debit="1")],
        created_by=1,
        transaction_date=datetime(2024, 2, 1, 0, 0, 0),
    )

    rows = await ledger.get_journal_report(end_date=date(2024, 1, 31))

    assert [r.reference for r in rows] == ["TRX-LATE"]


async def test_journal_ordering(db_session, cash_and_revenue):
    cash, _ = cash_and_revenue
    ledger = LedgerService(db_session)
    same_day = datetime(2024, 5, 5, 10, 0)
    for reference, when in (
        ("B-REF", same_day),
        ("A-REF", same_day),
        ("OLDEST", datetime(2024, 5, 1)),
        ("NEWEST", datetime(2024, 5, 9)),
    ):
        await ledger.create_transaction(
            reference=reference,
            description=reference,
            entries=[_entry(cash.id, debit="1")],
            created_by=1,
            transaction_date=when,
        )

    rows = await ledger.get_journal_report()

    assert [r.reference for r in rows] == ["NEWEST", "A-REF", "B-REF", "OLDEST"]
