"""
Booking Service tests.

Booking creation and payment application against a test session.
"""

import pytest
from decimal import Decimal
from sqlalchemy import select, func

from umrah_backend.app.core.exceptions import ResourceNotFoundError
from umrah_backend.app.domain.booking.booking_service import BookingService
from umrah_backend.app.domain.booking.payment_status import derive_payment_status
from umrah_backend.app.models.booking_enums import PaymentStatus, PilgrimStatus
from umrah_backend.app.models.package_booking import PackageBooking


async def _booking_count(db_session) -> int:
    return (await db_session.execute(select(func.count(PackageBooking.id)))).scalar()


@pytest.mark.parametrize(
    "paid,total,expected",
    [
        ("0", "2000", PaymentStatus.PENDING),
        ("-5", "2000", PaymentStatus.PENDING),
        ("0.01", "2000", PaymentStatus.PARTIAL),
        ("1999.99", "2000", PaymentStatus.PARTIAL),
        ("2000", "2000", PaymentStatus.COMPLETED),
        ("2500", "2000", PaymentStatus.COMPLETED),
        ("0", "0", PaymentStatus.COMPLETED),
    ],
)
def test_derive_payment_status(paid, total, expected):
    assert derive_payment_status(Decimal(paid), Decimal(total)) == expected


async def test_create_booking_derives_remaining_and_status(db_session, package, pilgrim):
    booking = await BookingService(db_session).create_booking(
        package_id=package.id,
        pilgrim_id=pilgrim.id,
        total_amount=Decimal("2000"),
        paid_amount=Decimal("250.5"),
        marketing_partner_id=77,
        special_requests="Wheelchair at Jeddah airport",
    )

    assert booking.total_amount == Decimal("2000.00")
    assert booking.paid_amount == Decimal("250.50")
    assert booking.remaining_amount == Decimal("1749.50")
    assert booking.payment_status == PaymentStatus.PARTIAL
    assert booking.booking_status == PilgrimStatus.REGISTERED
    assert booking.marketing_partner_id == 77
    assert booking.booking_date is not None


async def test_create_booking_defaults_to_pending(db_session, package, pilgrim):
    booking = await BookingService(db_session).create_booking(
        package_id=package.id, pilgrim_id=pilgrim.id, total_amount=Decimal("2000")
    )

    assert booking.paid_amount == Decimal("0.00")
    assert booking.remaining_amount == Decimal("2000.00")
    assert booking.payment_status == PaymentStatus.PENDING


async def test_missing_package_writes_nothing(db_session, pilgrim):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await BookingService(db_session).create_booking(
            package_id=999, pilgrim_id=pilgrim.id, total_amount=Decimal("2000")
        )

    assert exc_info.value.details["resource"] == "Package"
    assert await _booking_count(db_session) == 0


async def test_missing_pilgrim_writes_nothing(db_session, package):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await BookingService(db_session).create_booking(
            package_id=package.id, pilgrim_id=999, total_amount=Decimal("2000")
        )

    assert exc_info.value.details["resource"] == "Pilgrim"
    assert await _booking_count(db_session) == 0


async def test_sequential_payments(db_session, package, pilgrim):
    service = BookingService(db_session)
    booking = await service.create_booking(
        package_id=package.id, pilgrim_id=pilgrim.id, total_amount=Decimal("2000")
    )

    booking = await service.apply_payment(booking.id, Decimal("500"))
    assert booking.payment_status == PaymentStatus.PARTIAL
    assert booking.remaining_amount == Decimal("1500.00")

    booking = await service.apply_payment(booking.id, Decimal("800"))
    assert booking.payment_status == PaymentStatus.PARTIAL
    assert booking.remaining_amount == Decimal("700.00")

    booking = await service.apply_payment(booking.id, Decimal("700"))
    assert booking.payment_status == PaymentStatus.COMPLETED
    assert booking.remaining_amount == Decimal("0.00")
    assert booking.paid_amount == Decimal("2000.00")


async def test_overpayment_goes_negative(db_session, package, pilgrim):
    service = BookingService(db_session)
    booking = await service.create_booking(
        package_id=package.id, pilgrim_id=pilgrim.id, total_amount=Decimal("1000")
    )

    booking = await service.apply_payment(booking.id, Decimal("1200"))

    assert booking.paid_amount == Decimal("1200.00")
    assert booking.remaining_amount == Decimal("-200.00")
    assert booking.payment_status == PaymentStatus.COMPLETED


async def test_negative_adjustment_reopens_booking(db_session, package, pilgrim):
    service = BookingService(db_session)
    booking = await service.create_booking(
        package_id=package.id, pilgrim_id=pilgrim.id,
        total_amount=Decimal("1000"), paid_amount=Decimal("1000"),
    )
    assert booking.payment_status == PaymentStatus.COMPLETED

    booking = await service.apply_payment(booking.id, Decimal("-400"))
    assert booking.payment_status == PaymentStatus.PARTIAL
    assert booking.remaining_amount == Decimal("400.00")

    booking = await service.apply_payment(booking.id, Decimal("-600"))
    assert booking.payment_status == PaymentStatus.PENDING
    assert booking.paid_amount == Decimal("0.00")


async def test_zero_payment_is_a_no_op(db_session, package, pilgrim):
    service = BookingService(db_session)
    booking = await service.create_booking(
        package_id=package.id, pilgrim_id=pilgrim.id,
        total_amount=Decimal("1000"), paid_amount=Decimal("100"),
    )

    booking = await service.apply_payment(booking.id, Decimal("0"))

    assert booking.paid_amount == Decimal("100.00")
    assert booking.payment_status == PaymentStatus.PARTIAL


async def test_cent_amounts_stay_exact(db_session, package, pilgrim):
    service = BookingService(db_session)
    booking = await service.create_booking(
        package_id=package.id, pilgrim_id=pilgrim.id, total_amount=Decimal("0.30")
    )

    booking = await service.apply_payment(booking.id, Decimal("0.10"))
    booking = await service.apply_payment(booking.id, Decimal("0.20"))

    assert booking.paid_amount == Decimal("0.30")
    assert booking.remaining_amount == Decimal("0.00")
    assert booking.payment_status == PaymentStatus.COMPLETED


async def test_retried_payment_applies_twice(db_session, package, pilgrim):
    service = BookingService(db_session)
    booking = await service.create_booking(
        package_id=package.id, pilgrim_id=pilgrim.id, total_amount=Decimal("2000")
    )

    await service.apply_payment(booking.id, Decimal("500"))
    booking = await service.apply_payment(booking.id, Decimal("500"))

    assert booking.paid_amount == Decimal("1000.00")
    assert booking.remaining_amount == Decimal("1000.00")


async def test_payment_on_missing_booking(db_session):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await BookingService(db_session).apply_payment(404, Decimal("10"))

    assert exc_info.value.details["resource"] == "Booking"
