"""
User roles enumeration.

Defines the role types for the travel back-office.
"""

import enum


class UserRole(str, enum.Enum):
    """
    User role enumeration.
    
    Roles:
        ADMIN: Full access, including user management and balance overrides
        OWNER: Agency staff operating bookings and the ledger
    """
    ADMIN = "admin"
    OWNER = "owner"
