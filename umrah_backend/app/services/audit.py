"""
Audit logging service for tracking security events and back-office writes.

Provides centralized logging for compliance and security monitoring.
"""

from typing import Optional, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc
from umrah_backend.app.models.audit_log import AuditLog


# Audit event constants
class AuditAction:
    """Standardized audit action constants."""
    USER_CREATED = "USER_CREATED"
    LOGIN_SUCCESS = "LOGIN_SUCCESS"
    LOGIN_FAILED = "LOGIN_FAILED"

    # Ledger
    ACCOUNT_CREATED = "ACCOUNT_CREATED"
    ACCOUNT_BALANCE_SET = "ACCOUNT_BALANCE_SET"
    TRANSACTION_POSTED = "TRANSACTION_POSTED"

    # Bookings
    BOOKING_CREATED = "BOOKING_CREATED"
    BOOKING_PAYMENT_APPLIED = "BOOKING_PAYMENT_APPLIED"

    # Catalog
    PILGRIM_CREATED = "PILGRIM_CREATED"
    PILGRIM_UPDATED = "PILGRIM_UPDATED"
    PACKAGE_TYPE_CREATED = "PACKAGE_TYPE_CREATED"
    PACKAGE_CREATED = "PACKAGE_CREATED"

    # Inventory
    INVENTORY_ITEM_CREATED = "INVENTORY_ITEM_CREATED"


async def log_event(
    db: AsyncSession,
    action: str,
    actor_id: Optional[int] = None,
    actor_username: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
    ip_address: Optional[str] = None
) -> AuditLog:
    """
    Log a security or back-office event to the audit log.

    Args:
        db: Database session
        action: Action being performed (use AuditAction constants)
        actor_id: ID of user performing the action
        actor_username: Username of actor
        metadata: Additional context as JSON (amounts as strings)
        ip_address: IP address of the request

    Returns:
        Created AuditLog instance
    """
    audit_log = AuditLog(
        actor_id=actor_id,
        actor_username=actor_username,
        action=action,
        meta_data=metadata,
        ip_address=ip_address
    )

    db.add(audit_log)
    await db.commit()
    await db.refresh(audit_log)

    return audit_log


async def log_auth_event(
    db: AsyncSession,
    action: str,
    user_id: Optional[int],
    username: Optional[str],
    ip_address: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None
) -> AuditLog:
    """
    Log an authentication event (login success/failure).

    Args:
        db: Database session
        action: AuditAction.LOGIN_SUCCESS or AuditAction.LOGIN_FAILED
        user_id: ID of user attempting login
        username: Username attempting login
        ip_address: IP address of login attempt
        metadata: Additional context (e.g., failure reason)
    """
    return await log_event(
        db=db,
        action=action,
        actor_id=user_id,
        actor_username=username,
        ip_address=ip_address,
        metadata=metadata
    )


async def get_audit_trail(
    db: AsyncSession,
    actor_id: Optional[int] = None,
    action: Optional[str] = None,
    limit: int = 100
) -> list[AuditLog]:
    """
    Retrieve audit trail with optional filtering, most recent first.
    """
    query = select(AuditLog).order_by(desc(AuditLog.timestamp), desc(AuditLog.id))

    if actor_id:
        query = query.where(AuditLog.actor_id == actor_id)

    if action:
        query = query.where(AuditLog.action == action)

    query = query.limit(limit)

    result = await db.execute(query)
    return result.scalars().all()
