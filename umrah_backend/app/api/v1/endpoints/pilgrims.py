"""
Pilgrim API Endpoints.

Master data for travellers referenced by bookings.
"""

from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from umrah_backend.app.db.session import get_db
from umrah_backend.app.models.pilgrim import Pilgrim
from umrah_backend.app.schemas.pilgrim import (
    PilgrimCreate, PilgrimUpdate, PilgrimResponse, PilgrimListResponse
)
from umrah_backend.app.core.guards import require_staff
from umrah_backend.app.core.exceptions import ConflictError, ResourceNotFoundError
from umrah_backend.app.services.audit import log_event, AuditAction

router = APIRouter(prefix="/pilgrims", tags=["Pilgrims"])


async def _get_pilgrim_or_404(db: AsyncSession, pilgrim_id: int) -> Pilgrim:
    pilgrim = await db.get(Pilgrim, pilgrim_id)
    if not pilgrim:
        raise ResourceNotFoundError("Pilgrim", pilgrim_id)
    return pilgrim


@router.post("", response_model=PilgrimResponse, status_code=status.HTTP_201_CREATED)
async def create_pilgrim(
    pilgrim_data: PilgrimCreate,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    """
    Register a pilgrim.

    Passport numbers are unique (409 on duplicate).
    """
    new_pilgrim = Pilgrim(**pilgrim_data.model_dump())

    db.add(new_pilgrim)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("Pilgrim", "passport_number", pilgrim_data.passport_number)
    await db.refresh(new_pilgrim)

    await log_event(
        db=db,
        action=AuditAction.PILGRIM_CREATED,
        actor_id=current_user["user_id"],
        actor_username=current_user["sub"],
        metadata={"pilgrim_id": new_pilgrim.id, "passport_number": new_pilgrim.passport_number}
    )

    return PilgrimResponse.model_validate(new_pilgrim)


@router.get("", response_model=PilgrimListResponse)
async def list_pilgrims(
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(50, ge=1, le=100, description="Items per page"),
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    """List pilgrims, newest first."""
    total = (await db.execute(select(func.count(Pilgrim.id)))).scalar()

    offset = (page - 1) * page_size
    query = select(Pilgrim).order_by(Pilgrim.created_at.desc(), Pilgrim.id.desc()).offset(offset).limit(page_size)
    result = await db.execute(query)
    pilgrims = result.scalars().all()

    return PilgrimListResponse(
        pilgrims=[PilgrimResponse.model_validate(p) for p in pilgrims],
        total=total,
        page=page,
        page_size=page_size
    )


@router.get("/{pilgrim_id}", response_model=PilgrimResponse)
async def get_pilgrim(
    pilgrim_id: int,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    pilgrim = await _get_pilgrim_or_404(db, pilgrim_id)
    return PilgrimResponse.model_validate(pilgrim)


@router.patch("/{pilgrim_id}", response_model=PilgrimResponse)
async def update_pilgrim(
    pilgrim_id: int,
    pilgrim_data: PilgrimUpdate,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    """Update pilgrim details (only provided fields)."""
    pilgrim = await _get_pilgrim_or_404(db, pilgrim_id)

    update_data = pilgrim_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(pilgrim, field, value)

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        # passport_number is the only unique column a patch can touch
        if "passport_number" not in update_data:
            raise
        raise ConflictError("Pilgrim", "passport_number", update_data["passport_number"])
    await db.refresh(pilgrim)

    await log_event(
        db=db,
        action=AuditAction.PILGRIM_UPDATED,
        actor_id=current_user["user_id"],
        actor_username=current_user["sub"],
        metadata={"pilgrim_id": pilgrim.id, "updated_fields": list(update_data.keys())}
    )

    return PilgrimResponse.model_validate(pilgrim)
