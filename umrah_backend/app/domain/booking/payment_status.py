"""
Payment status derivation.

payment_status is a pure function of (paid_amount, total_amount):

    paid >= total      -> completed
    0 < paid < total   -> partial
    paid <= 0          -> pending

It is re-evaluated on every write. No transition is ever rejected, so a
negative adjustment can move a completed booking back to partial/pending.
"""

from decimal import Decimal
from sqlalchemy import case
from sqlalchemy.sql.elements import ColumnElement

from umrah_backend.app.models.booking_enums import PaymentStatus


def derive_payment_status(paid_amount: Decimal, total_amount: Decimal) -> PaymentStatus:
    if paid_amount >= total_amount:
        return PaymentStatus.COMPLETED
    if paid_amount > 0:
        return PaymentStatus.PARTIAL
    return PaymentStatus.PENDING


def payment_status_case(paid_amount: ColumnElement, total_amount: ColumnElement) -> ColumnElement:
    """SQL CASE equivalent of derive_payment_status, for in-database updates."""
    return case(
        (paid_amount >= total_amount, PaymentStatus.COMPLETED.value),
        (paid_amount > 0, PaymentStatus.PARTIAL.value),
        else_=PaymentStatus.PENDING.value,
    )
