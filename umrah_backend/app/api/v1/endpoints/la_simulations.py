"""
LA Simulation API Endpoints.

Land-arrangement costing scenarios.
"""

from typing import Optional
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from umrah_backend.app.db.session import get_db
from umrah_backend.app.services.la_simulation import LASimulationService
from umrah_backend.app.schemas.la_simulation import (
    LASimulationCreate, LASimulationResponse, LASimulationListResponse
)
from umrah_backend.app.core.guards import require_staff

router = APIRouter(prefix="/la-simulations", tags=["LA Simulation"])


@router.post("", response_model=LASimulationResponse, status_code=status.HTTP_201_CREATED)
async def create_simulation(
    simulation_data: LASimulationCreate,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    """Calculate and save a costing scenario for the current user."""
    simulation = await LASimulationService.create_simulation(
        db, simulation_data, created_by=current_user["user_id"]
    )
    return LASimulationResponse.model_validate(simulation)


@router.get("", response_model=LASimulationListResponse)
async def list_simulations(
    mine: bool = Query(False, description="Only simulations created by the current user"),
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    created_by: Optional[int] = current_user["user_id"] if mine else None
    simulations = await LASimulationService.list_simulations(db, created_by=created_by)
    return LASimulationListResponse(
        simulations=[LASimulationResponse.model_validate(s) for s in simulations],
        total=len(simulations)
    )


@router.get("/{simulation_id}", response_model=LASimulationResponse)
async def get_simulation(
    simulation_id: int,
    current_user: dict = Depends(require_staff),
    db: AsyncSession = Depends(get_db)
):
    simulation = await LASimulationService.get_simulation(db, simulation_id)
    return LASimulationResponse.model_validate(simulation)
