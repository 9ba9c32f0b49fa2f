"""
Chart of Accounts database model.

Accounts form a tree through parent_account_id.
"""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, Numeric, ForeignKey
from sqlalchemy.sql import func
from umrah_backend.app.db.session import Base


class Account(Base):
    """
    Account model (chart-of-accounts node).
    
    balance is an administrative running total. It is only changed through
    the explicit set-balance operation, never recomputed from posted entries.
    """
    __tablename__ = "chart_of_accounts"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    account_code = Column(String(50), unique=True, index=True, nullable=False)
    account_name = Column(String(200), nullable=False)
    account_type = Column(String(50), nullable=False)  # Asset, Liability, Revenue, ...
    
    # Tree structure (validated once at creation)
    parent_account_id = Column(Integer, ForeignKey('chart_of_accounts.id'), nullable=True, index=True)
    
    balance = Column(Numeric(15, 2), nullable=False, default=0)
    is_active = Column(Boolean, default=True, nullable=False)
    
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    def __repr__(self):
        return f"<Account(id={self.id}, code='{self.account_code}', balance={self.balance})>"
