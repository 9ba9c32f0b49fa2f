"""
Audit Log Database Model.

Tracks authentication events and administrative writes (accounts, postings,
bookings, payments) for compliance.
"""

from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.sql import func
from umrah_backend.app.db.session import Base


class AuditLog(Base):
    """
    Audit log model.
    
    Events logged:
    - LOGIN_SUCCESS / LOGIN_FAILED / USER_CREATED
    - ACCOUNT_CREATED / ACCOUNT_BALANCE_SET
    - TRANSACTION_POSTED
    - BOOKING_CREATED / BOOKING_PAYMENT_APPLIED
    """
    __tablename__ = "audit_logs"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    # Who performed the action (None for system actions)
    actor_id = Column(Integer, index=True, nullable=True)
    actor_username = Column(String(100), nullable=True)
    
    # What action was performed
    action = Column(String(100), nullable=False, index=True)
    
    # Additional context (JSON for flexibility)
    meta_data = Column(JSON, nullable=True)
    
    # IP address for login tracking
    ip_address = Column(String(50), nullable=True)
    
    timestamp = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    
    def __repr__(self):
        return f"<AuditLog(id={self.id}, action='{self.action}', actor={self.actor_username})>"
