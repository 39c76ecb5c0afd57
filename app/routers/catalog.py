from typing import List

from fastapi import APIRouter, Depends

from app.database.executor import QueryExecutor
from app.dependencies import get_executor, require_admin
from app.schemas.catalog import DrinkCreate, DrinkCreated, DrinkRead, DrinkUpdate, RoomRead
from app.schemas.transactions import WriteResult
from app.services.catalog_service import create_drink, list_drinks, list_rooms, update_drink

router = APIRouter(prefix="/api", tags=["Catalog"])


@router.get("/rooms", response_model=List[RoomRead])
def get_rooms(executor: QueryExecutor = Depends(get_executor)):
    return list_rooms(executor)


@router.get("/drinks", response_model=List[DrinkRead])
def get_active_drinks(executor: QueryExecutor = Depends(get_executor)):
    return list_drinks(executor, active_only=True)


@router.get("/drinks/all", response_model=List[DrinkRead])
def get_all_drinks(
    executor: QueryExecutor = Depends(get_executor),
    _admin=Depends(require_admin),
):
    return list_drinks(executor, active_only=False)


@router.post("/drinks", response_model=DrinkCreated)
def add_drink(
    payload: DrinkCreate,
    executor: QueryExecutor = Depends(get_executor),
    _admin=Depends(require_admin),
):
    drink_id = create_drink(
        executor,
        payload.name,
        payload.price,
        price_reduced=payload.price_reduced,
        color=payload.color,
    )
    return DrinkCreated(message="Drink added successfully", id=drink_id)


@router.put("/drinks/{drink_id}", response_model=WriteResult)
def replace_drink(
    drink_id: int,
    payload: DrinkUpdate,
    executor: QueryExecutor = Depends(get_executor),
    _admin=Depends(require_admin),
):
    update_drink(
        executor,
        drink_id,
        name=payload.name,
        price=payload.price,
        price_reduced=payload.price_reduced,
        active=payload.active,
        color=payload.color,
        sort_order=payload.sort_order,
    )
    return WriteResult(message="Drink updated successfully")


__all__ = ["router"]
