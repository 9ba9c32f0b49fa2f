"""
LA (land arrangement) Simulation Pydantic schemas.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import List
from umrah_backend.app.models.package_enums import PackageKind


class LASimulationCreate(BaseModel):
    """
    Costing scenario input.
    
    number_of_pilgrims is checked by the calculator, not here, so a zero
    value surfaces as a domain validation error.
    """
    simulation_name: str = Field(..., min_length=1, max_length=200)
    package_kind: PackageKind
    duration_days: int = Field(..., gt=0)
    number_of_pilgrims: int
    accommodation_cost: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    transportation_cost: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    meal_cost: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    guide_cost: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    miscellaneous_cost: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    profit_margin: Decimal = Field(..., ge=0, max_digits=5, decimal_places=2, description="Percent")


class LASimulationResponse(BaseModel):
    id: int
    simulation_name: str
    package_kind: PackageKind
    duration_days: int
    number_of_pilgrims: int
    accommodation_cost: Decimal
    transportation_cost: Decimal
    meal_cost: Decimal
    guide_cost: Decimal
    miscellaneous_cost: Decimal
    profit_margin: Decimal
    total_cost: Decimal
    cost_per_pilgrim: Decimal
    selling_price_per_pilgrim: Decimal
    created_by: int
    created_at: datetime
    
    class Config:
        from_attributes = True


class LASimulationListResponse(BaseModel):
    simulations: List[LASimulationResponse]
    total: int
