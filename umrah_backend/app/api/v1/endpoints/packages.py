"""
Package Catalog API Endpoints.

Package types and the Umrah/Haji packages bookings are made against.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from umrah_backend.app.db.session import get_db
from umrah_backend.app.domain.money import to_money
from umrah_backend.app.models.package import Package
from umrah_backend.app.models.package_type import PackageType
from umrah_backend.app.models.package_enums import PackageKind
from umrah_backend.app.schemas.package import (
    PackageTypeCreate, PackageTypeResponse,
    PackageCreate, PackageResponse, PackageListResponse
)
from umrah_backend.app.core.guards import require_staff
from umrah_backend.app.core.exceptions import ConflictError, ResourceNotFoundError, ValidationFailureError
from umrah_backend.app.services.audit import log_event, AuditAction

type_router = APIRouter(prefix="/package-types", tags=["Package Types"])
router = APIRouter(prefix="/packages", tags=["Packages"])


@type_router.post("", response_model=PackageTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_package_type(
    type_data: PackageTypeCreate,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    new_type = PackageType(type_name=type_data.type_name, description=type_data.description, is_active=True)

    db.add(new_type)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("Package type", "type_name", type_data.type_name)
    await db.refresh(new_type)

    await log_event(
        db=db,
        action=AuditAction.PACKAGE_TYPE_CREATED,
        actor_id=current_user["user_id"],
        actor_username=current_user["sub"],
        metadata={"package_type_id": new_type.id, "type_name": new_type.type_name}
    )

    return PackageTypeResponse.model_validate(new_type)


@type_router.get("", response_model=List[PackageTypeResponse])
async def list_package_types(
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    result = await db.execute(select(PackageType).order_by(PackageType.type_name))
    return [PackageTypeResponse.model_validate(t) for t in result.scalars().all()]


@type_router.get("/{package_type_id}", response_model=PackageTypeResponse)
async def get_package_type(
    package_type_id: int,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    package_type = await db.get(PackageType, package_type_id)
    if not package_type:
        raise ResourceNotFoundError("Package type", package_type_id)
    return PackageTypeResponse.model_validate(package_type)


@router.post("", response_model=PackageResponse, status_code=status.HTTP_201_CREATED)
async def create_package(
    package_data: PackageCreate,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    """
    Create a package under an existing package type.

    404 if the package type does not exist.
    """
    if not await db.get(PackageType, package_data.package_type_id):
        raise ResourceNotFoundError("Package type", package_data.package_type_id)

    if package_data.return_date < package_data.departure_date:
        raise ValidationFailureError(
            "return_date must not be before departure_date",
            details={
                "departure_date": package_data.departure_date.isoformat(),
                "return_date": package_data.return_date.isoformat(),
            },
        )

    fields = package_data.model_dump()
    fields["base_price"] = to_money(package_data.base_price)
    new_package = Package(**fields, is_active=True)

    db.add(new_package)
    await db.commit()
    await db.refresh(new_package)

    await log_event(
        db=db,
        action=AuditAction.PACKAGE_CREATED,
        actor_id=current_user["user_id"],
        actor_username=current_user["sub"],
        metadata={"package_id": new_package.id, "package_name": new_package.package_name}
    )

    return PackageResponse.model_validate(new_package)


@router.get("", response_model=PackageListResponse)
async def list_packages(
    package_kind: Optional[PackageKind] = Query(None, description="Filter by umrah/haji"),
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    query = select(Package).where(Package.is_active == True).order_by(Package.departure_date, Package.id)
    if package_kind:
        query = query.where(Package.package_kind == package_kind)

    result = await db.execute(query)
    packages = result.scalars().all()

    return PackageListResponse(
        packages=[PackageResponse.model_validate(p) for p in packages],
        total=len(packages)
    )


@router.get("/{package_id}", response_model=PackageResponse)
async def get_package(
    package_id: int,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    package = await db.get(Package, package_id)
    if not package:
        raise ResourceNotFoundError("Package", package_id)
    return PackageResponse.model_validate(package)
