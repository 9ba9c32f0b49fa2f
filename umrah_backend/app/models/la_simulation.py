"""
LA (land arrangement) Simulation database model.

Stores a costing scenario together with its derived per-pilgrim figures.
"""

from sqlalchemy import Column, Integer, String, DateTime, Numeric, Enum, ForeignKey
from sqlalchemy.sql import func
from umrah_backend.app.db.session import Base
from umrah_backend.app.models.package_enums import PackageKind


class LASimulation(Base):
    __tablename__ = "la_simulations"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    simulation_name = Column(String(200), nullable=False)
    package_kind = Column(Enum(PackageKind), nullable=False)
    duration_days = Column(Integer, nullable=False)
    number_of_pilgrims = Column(Integer, nullable=False)
    
    # Cost lines (inputs)
    accommodation_cost = Column(Numeric(10, 2), nullable=False)
    transportation_cost = Column(Numeric(10, 2), nullable=False)
    meal_cost = Column(Numeric(10, 2), nullable=False)
    guide_cost = Column(Numeric(10, 2), nullable=False)
    miscellaneous_cost = Column(Numeric(10, 2), nullable=False)
    profit_margin = Column(Numeric(5, 2), nullable=False)  # percent
    
    # Derived
    total_cost = Column(Numeric(10, 2), nullable=False)
    cost_per_pilgrim = Column(Numeric(10, 2), nullable=False)
    selling_price_per_pilgrim = Column(Numeric(10, 2), nullable=False)
    
    created_by = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    def __repr__(self):
        return f"<LASimulation(id={self.id}, name='{self.simulation_name}', price={self.selling_price_per_pilgrim})>"
