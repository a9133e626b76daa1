"""API routes."""

from autoledger.api.routes.expenses import router as expenses_router
from autoledger.api.routes.health import router as health_router
from autoledger.api.routes.reports import router as reports_router
from autoledger.api.routes.settings import router as settings_router
from autoledger.api.routes.vehicles import router as vehicles_router

__all__ = [
    "health_router",
    "vehicles_router",
    "expenses_router",
    "reports_router",
    "settings_router",
]
