"""
Database seeding script for the initial admin user and chart of accounts.

Creates one ADMIN and one OWNER user plus a starter chart of accounts.
Run this script after database is set up but before first use.
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from umrah_backend.app.db.session import AsyncSessionLocal, engine, Base
from umrah_backend.app.models.user import User
from umrah_backend.app.models.account import Account
from umrah_backend.app.models.enums import UserRole
from umrah_backend.app.core.security import get_password_hash
from umrah_backend.app.domain.ledger.ledger_service import LedgerService
import umrah_backend.app.main  # noqa: F401  registers every model with Base
from sqlalchemy import select

# (code, name, type, parent code)
STARTER_ACCOUNTS = [
    ("1000", "Assets", "Asset", None),
    ("1100", "Cash", "Asset", "1000"),
    ("1200", "Bank", "Asset", "1000"),
    ("1300", "Receivable from Pilgrims", "Asset", "1000"),
    ("2000", "Liabilities", "Liability", None),
    ("2100", "Pilgrim Deposits", "Liability", "2000"),
    ("2200", "Payable to Suppliers", "Liability", "2000"),
    ("3000", "Equity", "Equity", None),
    ("4000", "Revenue", "Revenue", None),
    ("4100", "Umrah Package Sales", "Revenue", "4000"),
    ("4200", "Haji Package Sales", "Revenue", "4000"),
    ("5000", "Expenses", "Expense", None),
    ("5100", "Land Arrangement Cost", "Expense", "5000"),
    ("5200", "Airline Tickets", "Expense", "5000"),
]


async def seed_users():
    """
    Seed initial users.

    Creates:
    - 1 ADMIN user
    - 1 OWNER user
    """
    async with AsyncSessionLocal() as db:
        print("🌱 Starting user seeding...")

        result = await db.execute(
            select(User).where(User.username == "admin")
        )
        if result.scalar_one_or_none():
            print("ℹ️  ADMIN user already exists, skipping user seeding")
            return

        db.add(User(
            email="admin@umrah-travel.com",
            username="admin",
            hashed_password=get_password_hash("admin123"),
            role=UserRole.ADMIN,
            is_active=True,
        ))
        print("✅ Created ADMIN user (username: admin, password: admin123)")

        db.add(User(
            email="owner@umrah-travel.com",
            username="owner",
            hashed_password=get_password_hash("owner123"),
            role=UserRole.OWNER,
            is_active=True,
        ))
        print("✅ Created OWNER user (username: owner, password: owner123)")

        await db.commit()


async def seed_accounts():
    """Create the starter chart of accounts, skipping codes that exist."""
    async with AsyncSessionLocal() as db:
        ledger = LedgerService(db)
        result = await db.execute(select(Account.account_code, Account.id))
        ids_by_code = dict(result.all())

        created = 0
        for code, name, account_type, parent_code in STARTER_ACCOUNTS:
            if code in ids_by_code:
                continue
            account = await ledger.create_account(
                account_code=code,
                account_name=name,
                account_type=account_type,
                parent_account_id=ids_by_code.get(parent_code),
            )
            ids_by_code[code] = account.id
            created += 1

        print(f"✅ Chart of accounts: {created} created, {len(STARTER_ACCOUNTS) - created} already present")


async def main():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    await seed_users()
    await seed_accounts()
    await engine.dispose()

    print("\n🎉 Seeding completed successfully!")
    print("\nSeeded users:")
    print("  - ADMIN: admin / admin123")
    print("  - OWNER: owner / owner123")


if __name__ == "__main__":
    asyncio.run(main())
