"""
Dashboard API Endpoints.

Read-only aggregates over bookings.
"""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from umrah_backend.app.db.session import get_db
from umrah_backend.app.services.dashboard import DashboardService
from umrah_backend.app.schemas.dashboard import (
    DashboardStats, UnpaidPilgrimListResponse, SalesTrend, PackageDistribution
)
from umrah_backend.app.core.guards import require_staff

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    return await DashboardService.get_stats(db)


@router.get("/unpaid-pilgrims", response_model=UnpaidPilgrimListResponse)
async def get_unpaid_pilgrims(
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    """Bookings with an outstanding balance, most overdue first."""
    items = await DashboardService.get_unpaid_pilgrims(db)
    return UnpaidPilgrimListResponse(items=items, total=len(items))


@router.get("/sales-trends", response_model=List[SalesTrend])
async def get_sales_trends(
    start_date: Optional[date] = Query(None, description="First booking day included (YYYY-MM-DD)"),
    end_date: Optional[date] = Query(None, description="Last booking day included (YYYY-MM-DD)"),
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    return await DashboardService.get_sales_trends(db, start_date=start_date, end_date=end_date)


@router.get("/package-distribution", response_model=List[PackageDistribution])
async def get_package_distribution(
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    return await DashboardService.get_package_distribution(db)
