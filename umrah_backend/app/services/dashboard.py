"""
Dashboard Service.

Handles aggregation over bookings for the back-office dashboard.
Focused on READ-ONLY operations.
"""

from datetime import date, datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, distinct, extract

from umrah_backend.app.domain.money import to_money
from umrah_backend.app.domain.periods import day_bounds
from umrah_backend.app.models.package import Package
from umrah_backend.app.models.package_booking import PackageBooking
from umrah_backend.app.models.pilgrim import Pilgrim
from umrah_backend.app.schemas.dashboard import (
    DashboardStats, UnpaidPilgrim, SalesTrend, PackageDistribution
)

ONEPLACE = Decimal("0.1")


def _days_since(moment: datetime, now: datetime) -> int:
    # SQLite hands back naive UTC timestamps
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return max((now - moment).days, 0)


class DashboardService:

    @staticmethod
    async def get_stats(db: AsyncSession) -> DashboardStats:
        """Headline figures across all bookings."""
        revenue = (await db.execute(select(func.sum(PackageBooking.paid_amount)))).scalar()
        total_bookings = (await db.execute(select(func.count(PackageBooking.id)))).scalar() or 0
        total_pilgrims = (
            await db.execute(select(func.count(distinct(PackageBooking.pilgrim_id))))
        ).scalar() or 0
        pending_payments = (
            await db.execute(
                select(func.count(PackageBooking.id)).where(PackageBooking.remaining_amount > 0)
            )
        ).scalar() or 0

        return DashboardStats(
            total_revenue=to_money(revenue),
            total_bookings=total_bookings,
            total_pilgrims=total_pilgrims,
            pending_payments=pending_payments,
        )

    @staticmethod
    async def get_unpaid_pilgrims(db: AsyncSession) -> list[UnpaidPilgrim]:
        """Bookings with an outstanding balance, oldest booking first."""
        query = (
            select(
                PackageBooking.id,
                PackageBooking.pilgrim_id,
                Pilgrim.full_name,
                Pilgrim.phone,
                Package.package_name,
                PackageBooking.total_amount,
                PackageBooking.paid_amount,
                PackageBooking.remaining_amount,
                PackageBooking.booking_date,
            )
            .join(Pilgrim, PackageBooking.pilgrim_id == Pilgrim.id)
            .join(Package, PackageBooking.package_id == Package.id)
            .where(PackageBooking.remaining_amount > 0)
            .order_by(PackageBooking.booking_date.asc(), PackageBooking.id.asc())
        )
        rows = (await db.execute(query)).all()
        now = datetime.now(timezone.utc)

        return [
            UnpaidPilgrim(
                booking_id=row.id,
                pilgrim_id=row.pilgrim_id,
                full_name=row.full_name,
                phone=row.phone,
                package_name=row.package_name,
                total_amount=to_money(row.total_amount),
                paid_amount=to_money(row.paid_amount),
                remaining_amount=to_money(row.remaining_amount),
                booking_date=row.booking_date,
                days_overdue=_days_since(row.booking_date, now),
            )
            for row in rows
        ]

    @staticmethod
    async def get_sales_trends(
        db: AsyncSession,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[SalesTrend]:
        """Monthly booking totals, oldest month first. Both dates are inclusive."""
        year = extract("year", PackageBooking.booking_date).label("year")
        month = extract("month", PackageBooking.booking_date).label("month")

        query = select(
            year,
            month,
            func.coalesce(func.sum(PackageBooking.total_amount), 0).label("total_sales"),
            func.count(distinct(PackageBooking.package_id)).label("package_count"),
            func.count(distinct(PackageBooking.pilgrim_id)).label("pilgrim_count"),
        )

        lower, upper = day_bounds(start_date, end_date)
        if lower is not None:
            query = query.where(PackageBooking.booking_date >= lower)
        if upper is not None:
            query = query.where(PackageBooking.booking_date < upper)

        query = query.group_by(year, month).order_by(year, month)
        rows = (await db.execute(query)).all()

        return [
            SalesTrend(
                period=f"{int(row.year):04d}-{int(row.month):02d}",
                total_sales=to_money(row.total_sales),
                package_count=row.package_count,
                pilgrim_count=row.pilgrim_count,
            )
            for row in rows
        ]

    @staticmethod
    async def get_package_distribution(db: AsyncSession) -> List[PackageDistribution]:
        """Booking count per package kind with its share of all bookings."""
        query = (
            select(Package.package_kind, func.count(PackageBooking.id).label("booking_count"))
            .join(Package, PackageBooking.package_id == Package.id)
            .group_by(Package.package_kind)
        )
        # native and string-backed enums sort differently in SQL
        rows = sorted((await db.execute(query)).all(), key=lambda row: row.package_kind.value)
        total = sum(row.booking_count for row in rows)

        return [
            PackageDistribution(
                package_kind=row.package_kind,
                count=row.booking_count,
                percentage=(Decimal(row.booking_count) * 100 / total).quantize(ONEPLACE, rounding=ROUND_HALF_UP),
            )
            for row in rows
        ]
