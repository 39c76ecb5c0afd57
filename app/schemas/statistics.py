from typing import List

from pydantic import BaseModel, Field


class BreakdownRow(BaseModel):
    room_id: int
    room_name: str
    drink_id: int
    drink_name: str
    event_name: str
    total_quantity: int
    storno_quantity: int
    total_revenue: float
    storno_revenue: float


class StatisticsSummary(BaseModel):
    total_items: int = 0
    storno_items: int = 0
    total_revenue: float = 0.0
    storno_revenue: float = 0.0
    transaction_count: int = 0
    total_tips: float = 0.0
    tip_count: int = 0


class TipsPerRoomRow(BaseModel):
    room_id: int
    room_name: str
    event_name: str
    total_tips: float


class StatisticsReport(BaseModel):
    statistics: List[BreakdownRow] = Field(default_factory=list)
    summary: StatisticsSummary = Field(default_factory=StatisticsSummary)
    tips_per_room: List[TipsPerRoomRow] = Field(default_factory=list)
    events: List[str] = Field(default_factory=list)
