"""
Package and Package Type Pydantic schemas.
"""

from pydantic import BaseModel, Field
from datetime import datetime, date
from decimal import Decimal
from typing import Optional, List
from umrah_backend.app.models.package_enums import PackageKind


class PackageTypeCreate(BaseModel):
    type_name: str = Field(..., min_length=1, max_length=100, description="Unique type name")
    description: Optional[str] = None


class PackageTypeResponse(BaseModel):
    id: int
    type_name: str
    description: Optional[str]
    is_active: bool
    created_at: datetime
    
    class Config:
        from_attributes = True


class PackageCreate(BaseModel):
    """Schema for creating an Umrah or Haji package."""
    package_name: str = Field(..., min_length=1, max_length=200)
    package_kind: PackageKind
    package_type_id: int
    description: Optional[str] = None
    duration_days: int = Field(..., gt=0)
    max_participants: int = Field(..., gt=0)
    departure_date: date
    return_date: date
    base_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    itinerary: Optional[str] = None
    inclusions: Optional[str] = None
    exclusions: Optional[str] = None
    terms_conditions: Optional[str] = None


class PackageResponse(BaseModel):
    id: int
    package_name: str
    package_kind: PackageKind
    package_type_id: int
    description: Optional[str]
    duration_days: int
    max_participants: int
    departure_date: date
    return_date: date
    base_price: Decimal
    itinerary: Optional[str]
    inclusions: Optional[str]
    exclusions: Optional[str]
    terms_conditions: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class PackageListResponse(BaseModel):
    packages: List[PackageResponse]
    total: int
