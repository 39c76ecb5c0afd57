from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.database.executor import QueryExecutor
from app.dependencies import get_executor, require_admin
from app.schemas.inventory import (
    InventoryAdjust,
    InventoryAdjustResult,
    InventoryCount,
    InventoryHistoryRead,
    InventoryRead,
    InventorySummary,
)
from app.schemas.transactions import WriteResult
from app.services.inventory_service import (
    adjust,
    inventory_summary,
    list_history,
    list_inventory,
    set_count,
)

router = APIRouter(prefix="/api/inventory", tags=["Inventory"])


@router.get("", response_model=List[InventoryRead])
def get_inventory(executor: QueryExecutor = Depends(get_executor)):
    return list_inventory(executor)


@router.get("/summary", response_model=InventorySummary)
def get_inventory_summary(executor: QueryExecutor = Depends(get_executor)):
    return inventory_summary(executor)


@router.get("/history/{drink_id}", response_model=List[InventoryHistoryRead])
def get_inventory_history(
    drink_id: int,
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Number of entries (default 100)"),
    executor: QueryExecutor = Depends(get_executor),
):
    return list_history(executor, drink_id, limit)


@router.post("/adjust", response_model=InventoryAdjustResult)
def adjust_inventory(
    payload: InventoryAdjust,
    executor: QueryExecutor = Depends(get_executor),
    _admin=Depends(require_admin),
):
    result = adjust(executor, payload.drink_id, payload.adjustment, payload.notes)
    return InventoryAdjustResult(message="Inventory adjusted", new_quantity=result["new_quantity"])


@router.put("/{inventory_id}", response_model=WriteResult)
def count_inventory(
    inventory_id: int,
    payload: InventoryCount,
    executor: QueryExecutor = Depends(get_executor),
    _admin=Depends(require_admin),
):
    set_count(executor, inventory_id, payload.quantity, payload.notes)
    return WriteResult(message="Inventory updated")


__all__ = ["router"]
