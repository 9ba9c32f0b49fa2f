"""
Package Booking database model.

A pilgrim's reservation against a package, carrying its own payment progress.
"""

from sqlalchemy import Column, Integer, Text, DateTime, Numeric, Enum, ForeignKey
from sqlalchemy.sql import func
from umrah_backend.app.db.session import Base
from umrah_backend.app.models.booking_enums import PaymentStatus, PilgrimStatus


class PackageBooking(Base):
    """
    Package Booking model.
    
    remaining_amount == total_amount - paid_amount after every write, and
    payment_status is derived from paid_amount vs total_amount
    (see domain.booking.payment_status).
    """
    __tablename__ = "package_bookings"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    # References (existence-checked at creation, not owned)
    package_id = Column(Integer, ForeignKey('packages.id'), nullable=False, index=True)
    pilgrim_id = Column(Integer, ForeignKey('pilgrims.id'), nullable=False, index=True)
    marketing_partner_id = Column(Integer, nullable=True)
    
    booking_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    
    # Financials
    total_amount = Column(Numeric(10, 2), nullable=False)
    paid_amount = Column(Numeric(10, 2), nullable=False, default=0)
    remaining_amount = Column(Numeric(10, 2), nullable=False)
    
    # Stored as VARCHAR holding the enum values so the payment UPDATE can
    # assign it from a CASE expression on every backend.
    payment_status = Column(
        Enum(
            PaymentStatus,
            native_enum=False,
            length=20,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        default=PaymentStatus.PENDING,
        nullable=False,
        index=True,
    )
    booking_status = Column(Enum(PilgrimStatus), default=PilgrimStatus.REGISTERED, nullable=False)
    
    special_requests = Column(Text, nullable=True)
    
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    def __repr__(self):
        return (
            f"<PackageBooking(id={self.id}, paid={self.paid_amount}/{self.total_amount}, "
            f"status='{self.payment_status.value}')>"
        )
