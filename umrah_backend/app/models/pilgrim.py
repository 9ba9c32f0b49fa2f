"""
Pilgrim database model.

Master record of a traveller; bookings reference it by id.
"""

from sqlalchemy import Column, Integer, String, Date, DateTime, Enum
from sqlalchemy.sql import func
from umrah_backend.app.db.session import Base
from umrah_backend.app.models.booking_enums import PilgrimStatus


class Pilgrim(Base):
    """
    Pilgrim model.
    
    Passport number is unique across all pilgrims.
    """
    __tablename__ = "pilgrims"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    # Identity
    full_name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=False)
    passport_number = Column(String(50), unique=True, index=True, nullable=False)
    passport_expiry = Column(Date, nullable=False)
    date_of_birth = Column(Date, nullable=False)
    address = Column(String(500), nullable=False)
    
    # Emergency contact
    emergency_contact_name = Column(String(200), nullable=False)
    emergency_contact_phone = Column(String(50), nullable=False)
    
    status = Column(Enum(PilgrimStatus), default=PilgrimStatus.REGISTERED, nullable=False)
    
    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    def __repr__(self):
        return f"<Pilgrim(id={self.id}, name='{self.full_name}', passport='{self.passport_number}')>"
