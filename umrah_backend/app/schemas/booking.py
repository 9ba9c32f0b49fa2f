"""
Package Booking Pydantic schemas.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from umrah_backend.app.models.booking_enums import PaymentStatus, PilgrimStatus


class BookingCreate(BaseModel):
    """Schema for booking a pilgrim onto a package."""
    package_id: int
    pilgrim_id: int
    marketing_partner_id: Optional[int] = None
    total_amount: Decimal = Field(..., max_digits=10, decimal_places=2)
    paid_amount: Decimal = Field(Decimal("0"), max_digits=10, decimal_places=2)
    special_requests: Optional[str] = None


class PaymentApply(BaseModel):
    """
    Payment increment. Any numeric value is accepted, including zero,
    negatives (adjustments) and amounts exceeding the remaining balance.
    """
    amount: Decimal = Field(..., max_digits=10, decimal_places=2)


class BookingResponse(BaseModel):
    id: int
    package_id: int
    pilgrim_id: int
    marketing_partner_id: Optional[int]
    booking_date: datetime
    total_amount: Decimal
    paid_amount: Decimal
    remaining_amount: Decimal
    payment_status: PaymentStatus
    booking_status: PilgrimStatus
    special_requests: Optional[str]
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class BookingListResponse(BaseModel):
    bookings: List[BookingResponse]
    total: int
