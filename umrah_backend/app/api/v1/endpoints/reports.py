"""
Report API Endpoints.

Only the journal is produced here.
"""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from umrah_backend.app.db.session import get_db
from umrah_backend.app.domain.ledger.ledger_service import LedgerService
from umrah_backend.app.schemas.ledger import JournalEntry
from umrah_backend.app.core.guards import require_staff

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/journal", response_model=List[JournalEntry])
async def get_journal(
    start_date: Optional[date] = Query(None, description="First day included (YYYY-MM-DD)"),
    end_date: Optional[date] = Query(None, description="Last day included (YYYY-MM-DD)"),
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    """
    Journal rows, newest transaction first.

    One row per entry; a transaction with N entries yields N rows.
    """
    return await LedgerService(db).get_journal_report(start_date=start_date, end_date=end_date)
