from app.routers.auth import router as auth_router
from app.routers.catalog import router as catalog_router
from app.routers.health import router as health_router
from app.routers.inventory import router as inventory_router
from app.routers.statistics import router as statistics_router
from app.routers.transactions import router as transactions_router

__all__ = [
    "auth_router",
    "catalog_router",
    "health_router",
    "inventory_router",
    "statistics_router",
    "transactions_router",
]
