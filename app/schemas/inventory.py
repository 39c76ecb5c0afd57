from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class InventoryRead(BaseModel):
    id: int
    drink_id: int
    drink_name: str
    quantity: int
    price: float
    price_reduced: Optional[float] = None
    color: str
    active: bool
    last_count_date: Optional[datetime] = None
    last_updated: Optional[datetime] = None


class InventoryCount(BaseModel):
    quantity: int = Field(ge=0)
    notes: Optional[str] = None


class InventoryAdjust(BaseModel):
    drink_id: int
    adjustment: int
    notes: Optional[str] = None


class InventoryAdjustResult(BaseModel):
    success: bool = True
    message: str
    new_quantity: int


class InventoryHistoryRead(BaseModel):
    id: int
    drink_id: int
    drink_name: str
    change_type: str
    quantity_before: int
    quantity_after: int
    quantity_change: int
    notes: Optional[str] = None
    created_at: datetime


class InventorySummary(BaseModel):
    total_drinks: int = 0
    total_stock: int = 0
    out_of_stock: int = 0
    low_stock: int = 0
