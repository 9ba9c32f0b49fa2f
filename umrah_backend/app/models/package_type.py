"""
Package Type database model.

Named grouping for packages (e.g. "Umrah Reguler", "Haji Plus").
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from sqlalchemy.sql import func
from umrah_backend.app.db.session import Base


class PackageType(Base):
    __tablename__ = "package_types"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    type_name = Column(String(100), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    def __repr__(self):
        return f"<PackageType(id={self.id}, name='{self.type_name}')>"
