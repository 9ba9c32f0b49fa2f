"""
Inventory Pydantic schemas.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import Optional, List


class InventoryItemCreate(BaseModel):
    """Schema for adding an item to inventory."""
    item_name: str = Field(..., min_length=1, max_length=200)
    item_code: str = Field(..., min_length=1, max_length=50, description="Unique item code")
    category: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    unit_cost: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    selling_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    current_stock: int = Field(0, ge=0)
    minimum_stock: int = Field(0, ge=0)
    supplier_id: Optional[int] = None


class InventoryItemResponse(BaseModel):
    id: int
    item_name: str
    item_code: str
    category: str
    description: Optional[str]
    unit_cost: Decimal
    selling_price: Decimal
    current_stock: int
    minimum_stock: int
    supplier_id: Optional[int]
    is_active: bool
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class InventoryItemListResponse(BaseModel):
    items: List[InventoryItemResponse]
    total: int


class InventorySummary(BaseModel):
    total_items: int  # Active items
    total_value: Decimal  # Sum of current_stock * unit_cost over active items
    low_stock_items: int
    categories: List[str]  # Distinct categories of active items, sorted
