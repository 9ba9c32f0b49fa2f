"""
Booking Service (Domain Logic).

Creates package bookings and applies payments to them. Payments are applied
with a single in-database UPDATE so concurrent payments on the same booking
never lose an increment.
"""

import logging
from decimal import Decimal
from typing import Optional, Sequence

from sqlalchemy import Numeric, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from umrah_backend.app.core.exceptions import ResourceNotFoundError
from umrah_backend.app.domain.booking.payment_status import derive_payment_status, payment_status_case
from umrah_backend.app.domain.money import to_money
from umrah_backend.app.models.booking_enums import PilgrimStatus
from umrah_backend.app.models.package import Package
from umrah_backend.app.models.package_booking import PackageBooking
from umrah_backend.app.models.pilgrim import Pilgrim

logger = logging.getLogger("umrah.booking")


def _round2(expr):
    return func.round(expr, 2, type_=Numeric(10, 2))


class BookingService:
    """Package bookings and their payment progress."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_booking(
        self,
        package_id: int,
        pilgrim_id: int,
        total_amount: Decimal,
        paid_amount: Decimal = Decimal("0"),
        marketing_partner_id: Optional[int] = None,
        special_requests: Optional[str] = None,
    ) -> PackageBooking:
        """
        Book a pilgrim onto a package.

        Both references are checked before anything is written.
        marketing_partner_id is stored as given.

        Raises:
            ResourceNotFoundError: package or pilgrim does not exist
        """
        if not await self.db.get(Package, package_id):
            raise ResourceNotFoundError("Package", package_id)
        if not await self.db.get(Pilgrim, pilgrim_id):
            raise ResourceNotFoundError("Pilgrim", pilgrim_id)

        total = to_money(total_amount)
        paid = to_money(paid_amount)

        booking = PackageBooking(
            package_id=package_id,
            pilgrim_id=pilgrim_id,
            marketing_partner_id=marketing_partner_id,
            total_amount=total,
            paid_amount=paid,
            remaining_amount=total - paid,
            payment_status=derive_payment_status(paid, total),
            booking_status=PilgrimStatus.REGISTERED,
            special_requests=special_requests,
        )
        self.db.add(booking)
        await self.db.commit()
        await self.db.refresh(booking)

        logger.info(
            "Booking created",
            extra={"booking_id": booking.id, "total_amount": str(total), "paid_amount": str(paid)},
        )
        return booking

    async def apply_payment(self, booking_id: int, amount: Decimal) -> PackageBooking:
        """
        Add amount to a booking's paid_amount.

        paid_amount, remaining_amount and payment_status are recomputed from
        the row's current values inside one UPDATE statement. Any amount is
        accepted (zero, negative, or more than remaining). Calling this twice
        applies the amount twice.

        Raises:
            ResourceNotFoundError: booking does not exist
        """
        amount = to_money(amount)
        new_paid = _round2(PackageBooking.paid_amount + amount)

        stmt = (
            update(PackageBooking)
            .where(PackageBooking.id == booking_id)
            .values(
                paid_amount=new_paid,
                remaining_amount=_round2(PackageBooking.total_amount - new_paid),
                payment_status=payment_status_case(new_paid, PackageBooking.total_amount),
            )
            .execution_options(synchronize_session=False)
        )

        try:
            result = await self.db.execute(stmt)
            if result.rowcount == 0:
                raise ResourceNotFoundError("Booking", booking_id)

            # Re-read inside the same transaction so the caller sees this write
            refreshed = await self.db.execute(
                select(PackageBooking)
                .where(PackageBooking.id == booking_id)
                .execution_options(populate_existing=True)
            )
            booking = refreshed.scalar_one()
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        await self.db.refresh(booking)
        logger.info(
            "Payment applied",
            extra={
                "booking_id": booking_id,
                "amount": str(amount),
                "paid_amount": str(booking.paid_amount),
                "payment_status": booking.payment_status.value,
            },
        )
        return booking

    async def list_bookings(self) -> Sequence[PackageBooking]:
        result = await self.db.execute(select(PackageBooking).order_by(PackageBooking.id.desc()))
        return result.scalars().all()

    async def get_booking(self, booking_id: int) -> PackageBooking:
        booking = await self.db.get(PackageBooking, booking_id)
        if not booking:
            raise ResourceNotFoundError("Booking", booking_id)
        return booking
