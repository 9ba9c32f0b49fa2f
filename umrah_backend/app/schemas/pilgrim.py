"""
Pilgrim Pydantic schemas.
"""

from pydantic import BaseModel, EmailStr, Field, model_validator
from datetime import datetime, date
from typing import Optional, List
from umrah_backend.app.models.booking_enums import PilgrimStatus


class PilgrimCreate(BaseModel):
    """Schema for registering a pilgrim."""
    full_name: str = Field(..., min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    phone: str = Field(..., min_length=1, max_length=50)
    passport_number: str = Field(..., min_length=1, max_length=50, description="Unique passport number")
    passport_expiry: date
    date_of_birth: date
    address: str = Field(..., min_length=1, max_length=500)
    emergency_contact_name: str = Field(..., min_length=1, max_length=200)
    emergency_contact_phone: str = Field(..., min_length=1, max_length=50)


class PilgrimUpdate(BaseModel):
    """Partial update; only provided fields are changed."""
    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=50)
    passport_number: Optional[str] = Field(None, min_length=1, max_length=50)
    passport_expiry: Optional[date] = None
    date_of_birth: Optional[date] = None
    address: Optional[str] = Field(None, min_length=1, max_length=500)
    emergency_contact_name: Optional[str] = Field(None, min_length=1, max_length=200)
    emergency_contact_phone: Optional[str] = Field(None, min_length=1, max_length=50)
    status: Optional[PilgrimStatus] = None

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        """email is the only column that may be cleared with null."""
        cleared = [
            field for field in self.model_fields_set
            if field != "email" and getattr(self, field) is None
        ]
        if cleared:
            raise ValueError(f"Fields cannot be null: {', '.join(sorted(cleared))}")
        return self


class PilgrimResponse(BaseModel):
    id: int
    full_name: str
    email: Optional[str]
    phone: str
    passport_number: str
    passport_expiry: date
    date_of_birth: date
    address: str
    emergency_contact_name: str
    emergency_contact_phone: str
    status: PilgrimStatus
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class PilgrimListResponse(BaseModel):
    pilgrims: List[PilgrimResponse]
    total: int
    page: int
    page_size: int
