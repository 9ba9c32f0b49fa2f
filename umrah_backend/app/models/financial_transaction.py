"""
Financial Transaction database model.

Header row of a journal posting. Immutable once written.
"""

from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey
from sqlalchemy.sql import func
from umrah_backend.app.db.session import Base


class FinancialTransaction(Base):
    """
    Financial Transaction model.
    
    Created together with its TransactionEntry rows in a single database
    transaction. total_amount is derived from the entries, never supplied.
    NO updates or deletions allowed.
    """
    __tablename__ = "financial_transactions"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    transaction_date = Column(DateTime, nullable=False, index=True)
    reference = Column(String(100), unique=True, index=True, nullable=False)
    description = Column(String(500), nullable=False)
    
    total_amount = Column(Numeric(15, 2), nullable=False)
    
    # Posting user (resolved by the auth layer, not constrained here)
    created_by = Column(Integer, nullable=False, index=True)
    
    # Optional link to the booking this posting settles
    booking_id = Column(Integer, ForeignKey('package_bookings.id'), nullable=True, index=True)
    
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    def __repr__(self):
        return f"<FinancialTransaction(id={self.id}, ref='{self.reference}', total={self.total_amount})>"
