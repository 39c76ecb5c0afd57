from app.services.catalog_service import create_drink, list_drinks, list_rooms, update_drink
from app.services.export_service import build_statistics_workbook
from app.services.filters import FilterClause, StatisticsFilters, build_filter
from app.services.inventory_service import adjust, inventory_summary, list_history, list_inventory, set_count
from app.services.statistics_service import get_statistics
from app.services.transaction_service import list_recent_transactions, record_tip, record_transaction

__all__ = [
    "FilterClause",
    "StatisticsFilters",
    "adjust",
    "build_filter",
    "build_statistics_workbook",
    "create_drink",
    "get_statistics",
    "inventory_summary",
    "list_drinks",
    "list_history",
    "list_inventory",
    "list_recent_transactions",
    "list_rooms",
    "record_tip",
    "record_transaction",
    "set_count",
    "update_drink",
]
