"""
FastAPI Application Entry Point.

This is the main application file for the Umrah & Haji Travel Back-Office.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from umrah_backend.app.core.config import settings
from umrah_backend.app.core.observability import ObservabilityMiddleware, configure_logging
from umrah_backend.app.api.v1.router import router as api_v1_router
from umrah_backend.app.db.session import engine, Base
from umrah_backend.app.core.exceptions import (
    AppException,
    app_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)

# Import models to ensure they are registered with Base
from umrah_backend.app.models.user import User
from umrah_backend.app.models.audit_log import AuditLog
from umrah_backend.app.models.pilgrim import Pilgrim
from umrah_backend.app.models.package_type import PackageType
from umrah_backend.app.models.package import Package
from umrah_backend.app.models.package_booking import PackageBooking
from umrah_backend.app.models.account import Account
from umrah_backend.app.models.financial_transaction import FinancialTransaction
from umrah_backend.app.models.transaction_entry import TransactionEntry
from umrah_backend.app.models.la_simulation import LASimulation
from umrah_backend.app.models.inventory_item import InventoryItem

configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup/shutdown.

    Creates database tables on startup.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()

# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    debug=settings.debug,
    description="Back-office API for Umrah and Haji travel: ledger, bookings and payments",
    lifespan=lifespan,
)

app.add_middleware(ObservabilityMiddleware)

# Register global exception handlers
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        dict: Status and application information
    """
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.api_version,
    }


# Include API v1 router
app.include_router(api_v1_router, prefix=f"/{settings.api_version}")


@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint.

    Returns:
        dict: Welcome message and API documentation links
    """
    return {
        "message": "Welcome to the Umrah & Haji Travel Back-Office API",
        "docs": "/docs",
        "health": "/health",
    }
