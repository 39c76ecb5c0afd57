from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class TransactionItem(BaseModel):
    drink_id: int
    quantity: int = Field(ge=0)
    total_price: float
    is_storno: bool = False


class TransactionCreate(BaseModel):
    room_id: int
    items: List[TransactionItem] = Field(min_length=1)
    event_name: Optional[str] = None


class TransactionRead(BaseModel):
    id: int
    room_id: int
    drink_id: int
    room_name: str
    drink_name: str
    quantity: int
    total_price: float
    event_name: str
    is_storno: bool
    timestamp: datetime


class TipCreate(BaseModel):
    room_id: int
    amount: float = Field(gt=0)
    event_name: Optional[str] = None


class WriteResult(BaseModel):
    success: bool = True
    message: str
