"""
Dashboard Pydantic schemas.
"""

from pydantic import BaseModel
from datetime import datetime
from decimal import Decimal
from typing import List
from umrah_backend.app.models.package_enums import PackageKind


class DashboardStats(BaseModel):
    total_revenue: Decimal  # Sum of paid_amount over all bookings
    total_bookings: int
    total_pilgrims: int  # Distinct pilgrims with at least one booking
    pending_payments: int  # Bookings with remaining_amount > 0


class UnpaidPilgrim(BaseModel):
    booking_id: int
    pilgrim_id: int
    full_name: str
    phone: str
    package_name: str
    total_amount: Decimal
    paid_amount: Decimal
    remaining_amount: Decimal
    booking_date: datetime
    days_overdue: int


class UnpaidPilgrimListResponse(BaseModel):
    items: List[UnpaidPilgrim]
    total: int


class SalesTrend(BaseModel):
    period: str  # YYYY-MM of booking_date
    total_sales: Decimal  # Sum of total_amount booked in the period
    package_count: int
    pilgrim_count: int


class PackageDistribution(BaseModel):
    package_kind: PackageKind
    count: int
    percentage: Decimal  # Share of all bookings, 1 decimal place
