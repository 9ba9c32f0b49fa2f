"""
Ledger Pydantic schemas.

Chart of accounts, financial transactions and the journal report.
Monetary fields are Decimals and serialize as exact strings.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import Optional, List


class AccountCreate(BaseModel):
    """Schema for creating a chart-of-accounts node."""
    account_code: str = Field(..., min_length=1, max_length=50, description="Unique account code")
    account_name: str = Field(..., min_length=1, max_length=200)
    account_type: str = Field(..., min_length=1, max_length=50, description="Asset, Liability, Revenue, ...")
    parent_account_id: Optional[int] = Field(None, description="Existing parent account")


class AccountBalanceUpdate(BaseModel):
    """Administrative balance override. Negative values are accepted."""
    balance: Decimal = Field(..., max_digits=15, decimal_places=2)


class AccountResponse(BaseModel):
    id: int
    account_code: str
    account_name: str
    account_type: str
    parent_account_id: Optional[int]
    balance: Decimal
    is_active: bool
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class TransactionEntryInput(BaseModel):
    """One debit/credit line of a posting."""
    account_id: int
    debit_amount: Decimal = Field(Decimal("0"), max_digits=15, decimal_places=2)
    credit_amount: Decimal = Field(Decimal("0"), max_digits=15, decimal_places=2)
    description: Optional[str] = Field(None, max_length=500)


class TransactionCreate(BaseModel):
    """
    Schema for posting a financial transaction.
    
    created_by defaults to the authenticated user when omitted.
    transaction_date defaults to now.
    """
    reference: str = Field(..., min_length=1, max_length=100, description="Unique caller-supplied reference")
    description: str = Field(..., min_length=1, max_length=500)
    entries: List[TransactionEntryInput] = Field(default_factory=list)
    created_by: Optional[int] = None
    booking_id: Optional[int] = None
    transaction_date: Optional[datetime] = None


class TransactionResponse(BaseModel):
    id: int
    transaction_date: datetime
    reference: str
    description: str
    total_amount: Decimal
    created_by: int
    booking_id: Optional[int]
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class TransactionEntryResponse(BaseModel):
    id: int
    transaction_id: int
    account_id: int
    debit_amount: Decimal
    credit_amount: Decimal
    description: Optional[str]
    created_at: datetime
    
    class Config:
        from_attributes = True


class JournalEntry(BaseModel):
    """One journal row: an entry joined to its transaction and account."""
    transaction_id: int
    transaction_date: datetime
    reference: str
    account_name: str
    account_code: str
    debit_amount: Decimal
    credit_amount: Decimal
    description: str = ""

