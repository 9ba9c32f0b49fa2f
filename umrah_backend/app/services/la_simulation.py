"""
LA Simulation Service.

Land-arrangement costing: totals the cost lines of a scenario and derives
the per-pilgrim cost and selling price.
"""

import logging
from decimal import Decimal
from typing import Dict, Optional, Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from umrah_backend.app.core.exceptions import ValidationFailureError, ResourceNotFoundError
from umrah_backend.app.domain.money import to_money
from umrah_backend.app.models.la_simulation import LASimulation
from umrah_backend.app.schemas.la_simulation import LASimulationCreate

logger = logging.getLogger("umrah.la_simulation")

COST_FIELDS = (
    "accommodation_cost",
    "transportation_cost",
    "meal_cost",
    "guide_cost",
    "miscellaneous_cost",
)


class LASimulationService:

    @staticmethod
    def calculate_costs(data: LASimulationCreate) -> Dict[str, Decimal]:
        """
        total = sum of cost lines
        cost_per_pilgrim = total / number_of_pilgrims
        selling_price = cost_per_pilgrim * (1 + margin / 100)
        
        Raises:
            ValidationFailureError: number_of_pilgrims is not positive
        """
        if data.number_of_pilgrims <= 0:
            raise ValidationFailureError(
                "number_of_pilgrims must be greater than zero",
                details={"number_of_pilgrims": data.number_of_pilgrims},
            )

        total_cost = sum((to_money(getattr(data, field)) for field in COST_FIELDS), Decimal("0.00"))
        cost_per_pilgrim = to_money(total_cost / data.number_of_pilgrims)
        margin = Decimal(str(data.profit_margin)) / Decimal("100")
        selling_price = to_money(cost_per_pilgrim * (1 + margin))

        return {
            "total_cost": to_money(total_cost),
            "cost_per_pilgrim": cost_per_pilgrim,
            "selling_price_per_pilgrim": selling_price,
        }

    @staticmethod
    async def create_simulation(db: AsyncSession, data: LASimulationCreate, created_by: int) -> LASimulation:
        figures = LASimulationService.calculate_costs(data)

        simulation = LASimulation(
            simulation_name=data.simulation_name,
            package_kind=data.package_kind,
            duration_days=data.duration_days,
            number_of_pilgrims=data.number_of_pilgrims,
            accommodation_cost=to_money(data.accommodation_cost),
            transportation_cost=to_money(data.transportation_cost),
            meal_cost=to_money(data.meal_cost),
            guide_cost=to_money(data.guide_cost),
            miscellaneous_cost=to_money(data.miscellaneous_cost),
            profit_margin=to_money(data.profit_margin),
            created_by=created_by,
            **figures,
        )
        db.add(simulation)
        await db.commit()
        await db.refresh(simulation)

        logger.info(
            "LA simulation saved",
            extra={"simulation_id": simulation.id, "selling_price": str(figures["selling_price_per_pilgrim"])},
        )
        return simulation

    @staticmethod
    async def list_simulations(db: AsyncSession, created_by: Optional[int] = None) -> Sequence[LASimulation]:
        query = select(LASimulation).order_by(LASimulation.created_at.desc(), LASimulation.id.desc())
        if created_by is not None:
            query = query.where(LASimulation.created_by == created_by)
        result = await db.execute(query)
        return result.scalars().all()

    @staticmethod
    async def get_simulation(db: AsyncSession, simulation_id: int) -> LASimulation:
        simulation = await db.get(LASimulation, simulation_id)
        if not simulation:
            raise ResourceNotFoundError("LA simulation", simulation_id)
        return simulation
