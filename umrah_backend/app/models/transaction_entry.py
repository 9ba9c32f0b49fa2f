"""
Transaction Entry database model.

One debit/credit line of a FinancialTransaction.
"""

from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey
from sqlalchemy.sql import func
from umrah_backend.app.db.session import Base


class TransactionEntry(Base):
    """
    Transaction Entry model.
    
    Debit and credit may both be non-zero on one line; the engine does not
    force them to be exclusive. Entries never move between transactions.
    """
    __tablename__ = "transaction_entries"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    transaction_id = Column(Integer, ForeignKey('financial_transactions.id'), nullable=False, index=True)
    account_id = Column(Integer, ForeignKey('chart_of_accounts.id'), nullable=False, index=True)
    
    debit_amount = Column(Numeric(15, 2), nullable=False, default=0)
    credit_amount = Column(Numeric(15, 2), nullable=False, default=0)
    description = Column(String(500), nullable=True)
    
    # Immutable - no updated_at
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    
    def __repr__(self):
        return (
            f"<TransactionEntry(id={self.id}, account_id={self.account_id}, "
            f"debit={self.debit_amount}, credit={self.credit_amount})>"
        )
