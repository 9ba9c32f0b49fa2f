"""
Inventory Item database model.

Stock kept for pilgrims (ihram cloth, luggage, prayer books and the like).
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Numeric
from sqlalchemy.sql import func
from umrah_backend.app.db.session import Base


class InventoryItem(Base):
    """
    Inventory item model.
    
    An item is low on stock when current_stock <= minimum_stock.
    """
    __tablename__ = "inventory_items"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    item_name = Column(String(200), nullable=False)
    item_code = Column(String(50), unique=True, index=True, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=True)
    
    # Pricing
    unit_cost = Column(Numeric(10, 2), nullable=False)
    selling_price = Column(Numeric(10, 2), nullable=False)
    
    # Stock levels
    current_stock = Column(Integer, default=0, nullable=False)
    minimum_stock = Column(Integer, default=0, nullable=False)
    
    # Supplier master data is kept outside this service
    supplier_id = Column(Integer, nullable=True)
    
    is_active = Column(Boolean, default=True, nullable=False)
    
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    def __repr__(self):
        return f"<InventoryItem(id={self.id}, code='{self.item_code}', stock={self.current_stock})>"
