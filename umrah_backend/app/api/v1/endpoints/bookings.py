"""
Package Booking API Endpoints.

Bookings and payment application.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from umrah_backend.app.db.session import get_db
from umrah_backend.app.domain.booking.booking_service import BookingService
from umrah_backend.app.schemas.booking import (
    BookingCreate, PaymentApply, BookingResponse, BookingListResponse
)
from umrah_backend.app.core.guards import require_staff
from umrah_backend.app.services.audit import log_event, AuditAction

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    booking_data: BookingCreate,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    """
    Book a pilgrim onto a package.

    remaining_amount and payment_status are derived from the amounts given.
    """
    booking = await BookingService(db).create_booking(
        package_id=booking_data.package_id,
        pilgrim_id=booking_data.pilgrim_id,
        total_amount=booking_data.total_amount,
        paid_amount=booking_data.paid_amount,
        marketing_partner_id=booking_data.marketing_partner_id,
        special_requests=booking_data.special_requests,
    )

    await log_event(
        db=db,
        action=AuditAction.BOOKING_CREATED,
        actor_id=current_user["user_id"],
        actor_username=current_user["sub"],
        metadata={"booking_id": booking.id, "total_amount": str(booking.total_amount)}
    )

    return BookingResponse.model_validate(booking)


@router.get("", response_model=BookingListResponse)
async def list_bookings(
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    bookings = await BookingService(db).list_bookings()
    return BookingListResponse(
        bookings=[BookingResponse.model_validate(b) for b in bookings],
        total=len(bookings)
    )


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: int,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    booking = await BookingService(db).get_booking(booking_id)
    return BookingResponse.model_validate(booking)


@router.post("/{booking_id}/payments", response_model=BookingResponse)
async def apply_payment(
    booking_id: int,
    payment: PaymentApply,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    """
    Add a payment to a booking.

    Not idempotent: submitting the same payment twice records it twice.
    """
    booking = await BookingService(db).apply_payment(booking_id, payment.amount)

    await log_event(
        db=db,
        action=AuditAction.BOOKING_PAYMENT_APPLIED,
        actor_id=current_user["user_id"],
        actor_username=current_user["sub"],
        metadata={
            "booking_id": booking.id,
            "amount": str(payment.amount),
            "paid_amount": str(booking.paid_amount),
            "payment_status": booking.payment_status.value,
        }
    )

    return BookingResponse.model_validate(booking)
