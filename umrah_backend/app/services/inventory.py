"""
Inventory Service.

Item registration, stock-level queries and the valuation summary.
Inactive items are excluded from listings and the summary.
"""

import logging
from typing import Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from umrah_backend.app.core.exceptions import ConflictError, ResourceNotFoundError
from umrah_backend.app.domain.money import to_money
from umrah_backend.app.models.inventory_item import InventoryItem
from umrah_backend.app.schemas.inventory import InventoryItemCreate, InventorySummary

logger = logging.getLogger("umrah.inventory")

_is_low_stock = InventoryItem.current_stock <= InventoryItem.minimum_stock


class InventoryService:

    @staticmethod
    async def create_item(db: AsyncSession, data: InventoryItemCreate) -> InventoryItem:
        """
        Raises:
            ConflictError: item_code already exists
        """
        item = InventoryItem(
            item_name=data.item_name,
            item_code=data.item_code,
            category=data.category,
            description=data.description,
            unit_cost=to_money(data.unit_cost),
            selling_price=to_money(data.selling_price),
            current_stock=data.current_stock,
            minimum_stock=data.minimum_stock,
            supplier_id=data.supplier_id,
            is_active=True,
        )
        db.add(item)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise ConflictError("Inventory item", "item_code", data.item_code)
        await db.refresh(item)

        logger.info("Inventory item created", extra={"item_id": item.id, "item_code": item.item_code})
        return item

    @staticmethod
    async def list_items(db: AsyncSession) -> Sequence[InventoryItem]:
        query = (
            select(InventoryItem)
            .where(InventoryItem.is_active.is_(True))
            .order_by(InventoryItem.item_name.asc(), InventoryItem.id.asc())
        )
        result = await db.execute(query)
        return result.scalars().all()

    @staticmethod
    async def get_item(db: AsyncSession, item_id: int) -> InventoryItem:
        item = await db.get(InventoryItem, item_id)
        if not item:
            raise ResourceNotFoundError("Inventory item", item_id)
        return item

    @staticmethod
    async def get_low_stock_items(db: AsyncSession) -> Sequence[InventoryItem]:
        """Active items at or below their minimum stock, scarcest first."""
        query = (
            select(InventoryItem)
            .where(InventoryItem.is_active.is_(True), _is_low_stock)
            .order_by(
                (InventoryItem.current_stock - InventoryItem.minimum_stock).asc(),
                InventoryItem.id.asc(),
            )
        )
        result = await db.execute(query)
        return result.scalars().all()

    @staticmethod
    async def get_summary(db: AsyncSession) -> InventorySummary:
        active = InventoryItem.is_active.is_(True)

        total_items = (
            await db.execute(select(func.count(InventoryItem.id)).where(active))
        ).scalar() or 0
        total_value = (
            await db.execute(
                select(func.sum(InventoryItem.current_stock * InventoryItem.unit_cost)).where(active)
            )
        ).scalar()
        low_stock = (
            await db.execute(select(func.count(InventoryItem.id)).where(active, _is_low_stock))
        ).scalar() or 0
        categories = (
            await db.execute(
                select(InventoryItem.category)
                .where(active)
                .group_by(InventoryItem.category)
                .order_by(InventoryItem.category)
            )
        ).scalars().all()

        return InventorySummary(
            total_items=total_items,
            total_value=to_money(total_value),
            low_stock_items=low_stock,
            categories=list(categories),
        )
