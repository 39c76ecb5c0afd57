from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.transactions import WriteResult


class RoomRead(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class DrinkBase(BaseModel):
    name: str = Field(min_length=1)
    price: float = Field(ge=0)
    price_reduced: Optional[float] = Field(default=None, ge=0)
    color: Optional[str] = None


class DrinkCreate(DrinkBase):
    pass


class DrinkUpdate(DrinkBase):
    active: bool
    sort_order: int


class DrinkRead(BaseModel):
    id: int
    name: str
    price: float
    price_reduced: Optional[float] = None
    color: str
    active: bool
    sort_order: int

    model_config = ConfigDict(from_attributes=True)


class DrinkCreated(WriteResult):
    id: int
