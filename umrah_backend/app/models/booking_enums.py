"""
Booking enumerations.
"""

import enum


class PaymentStatus(str, enum.Enum):
    """Payment progress of a package booking, derived from paid vs total."""
    PENDING = "pending"  # Nothing paid yet
    PARTIAL = "partial"  # Some but not all of the total paid
    COMPLETED = "completed"  # Paid in full (or over)
    CANCELLED = "cancelled"  # Never derived; reserved for manual cancellation


class PilgrimStatus(str, enum.Enum):
    """Pilgrim lifecycle, shared by pilgrims and their bookings."""
    REGISTERED = "registered"
    CONFIRMED = "confirmed"
    DEPARTED = "departed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
