"""
API v1 Router.

Aggregates all v1 API endpoints.
"""

from fastapi import APIRouter
from umrah_backend.app.api.v1.endpoints import (
    auth, accounts, transactions, reports,
    bookings, pilgrims, packages,
    dashboard, la_simulations, inventory
)

router = APIRouter()

# Include authentication endpoints
router.include_router(auth.router)

# Ledger
router.include_router(accounts.router)
router.include_router(transactions.router)
router.include_router(reports.router)

# Bookings and the catalog they reference
router.include_router(bookings.router)
router.include_router(pilgrims.router)
router.include_router(packages.type_router)
router.include_router(packages.router)

# Read-only aggregates and calculators
router.include_router(dashboard.router)
router.include_router(la_simulations.router)
router.include_router(inventory.router)
