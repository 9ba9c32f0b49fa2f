"""
Inventory API Endpoints.

Items, low-stock alerts and the stock valuation summary.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from umrah_backend.app.db.session import get_db
from umrah_backend.app.services.inventory import InventoryService
from umrah_backend.app.schemas.inventory import (
    InventoryItemCreate, InventoryItemResponse, InventoryItemListResponse, InventorySummary
)
from umrah_backend.app.core.guards import require_staff
from umrah_backend.app.services.audit import log_event, AuditAction

router = APIRouter(prefix="/inventory", tags=["Inventory"])


@router.post("/items", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(
    item_data: InventoryItemCreate,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    """
    Add an item to inventory.

    Item codes are unique (409 on duplicate).
    """
    item = await InventoryService.create_item(db, item_data)

    await log_event(
        db=db,
        action=AuditAction.INVENTORY_ITEM_CREATED,
        actor_id=current_user["user_id"],
        actor_username=current_user["sub"],
        metadata={"item_id": item.id, "item_code": item.item_code}
    )

    return InventoryItemResponse.model_validate(item)


@router.get("/items", response_model=InventoryItemListResponse)
async def list_items(
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    items = await InventoryService.list_items(db)
    return InventoryItemListResponse(
        items=[InventoryItemResponse.model_validate(i) for i in items],
        total=len(items)
    )


@router.get("/items/low-stock", response_model=InventoryItemListResponse)
async def list_low_stock_items(
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    items = await InventoryService.get_low_stock_items(db)
    return InventoryItemListResponse(
        items=[InventoryItemResponse.model_validate(i) for i in items],
        total=len(items)
    )


@router.get("/items/{item_id}", response_model=InventoryItemResponse)
async def get_item(
    item_id: int,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    item = await InventoryService.get_item(db, item_id)
    return InventoryItemResponse.model_validate(item)


@router.get("/summary", response_model=InventorySummary)
async def get_summary(
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    return await InventoryService.get_summary(db)
