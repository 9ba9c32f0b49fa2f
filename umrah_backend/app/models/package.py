"""
Package database model.

A sellable Umrah or Haji trip with fixed dates and a base price.
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, Date, DateTime, Numeric, Enum, ForeignKey
from sqlalchemy.sql import func
from umrah_backend.app.db.session import Base
from umrah_backend.app.models.package_enums import PackageKind


class Package(Base):
    """
    Package model.
    
    Belongs to one PackageType. Bookings are made against a package.
    """
    __tablename__ = "packages"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    package_name = Column(String(200), nullable=False)
    package_kind = Column(Enum(PackageKind), nullable=False, index=True)
    package_type_id = Column(Integer, ForeignKey('package_types.id'), nullable=False, index=True)
    description = Column(Text, nullable=True)
    
    # Schedule and capacity
    duration_days = Column(Integer, nullable=False)
    max_participants = Column(Integer, nullable=False)
    departure_date = Column(Date, nullable=False)
    return_date = Column(Date, nullable=False)
    
    # Financials
    base_price = Column(Numeric(10, 2), nullable=False)
    
    # Free-text content
    itinerary = Column(Text, nullable=True)
    inclusions = Column(Text, nullable=True)
    exclusions = Column(Text, nullable=True)
    terms_conditions = Column(Text, nullable=True)
    
    is_active = Column(Boolean, default=True, nullable=False)
    
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    def __repr__(self):
        return f"<Package(id={self.id}, name='{self.package_name}', kind='{self.package_kind.value}')>"
