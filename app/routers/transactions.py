from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.database.executor import QueryExecutor
from app.dependencies import get_executor
from app.schemas.transactions import TipCreate, TransactionCreate, TransactionRead, WriteResult
from app.services.transaction_service import list_recent_transactions, record_tip, record_transaction

router = APIRouter(prefix="/api", tags=["Transactions"])


@router.post("/transactions", response_model=WriteResult)
def create_transaction(payload: TransactionCreate, executor: QueryExecutor = Depends(get_executor)):
    record_transaction(
        executor,
        payload.room_id,
        [item.model_dump() for item in payload.items],
        payload.event_name,
    )
    return WriteResult(message="Transaction successful")


@router.get("/transactions", response_model=List[TransactionRead])
def recent_transactions(
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Number of rows (default 50)"),
    executor: QueryExecutor = Depends(get_executor),
):
    return list_recent_transactions(executor, limit)


@router.post("/tips", response_model=WriteResult)
def create_tip(payload: TipCreate, executor: QueryExecutor = Depends(get_executor)):
    record_tip(executor, payload.room_id, payload.amount, payload.event_name)
    return WriteResult(message="Tip added successfully")


__all__ = ["router"]
