import logging
from typing import Mapping, Optional, Sequence

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from app.config import get_settings
from app.core.errors import InvalidInput
from app.database.executor import QueryExecutor

logger = logging.getLogger(__name__)

# noinspection SqlNoDataSourceInspection
_INSERT_TRANSACTION = text(
    """
    INSERT INTO transactions (room_id, drink_id, quantity, total_price, event_name, is_storno)
    VALUES (:room_id, :drink_id, :quantity, :total_price, :event_name, :is_storno)
    """
)

# noinspection SqlNoDataSourceInspection
_INSERT_TIP = text(
    """
    INSERT INTO tips (room_id, amount, event_name)
    VALUES (:room_id, :amount, :event_name)
    """
)

# noinspection SqlNoDataSourceInspection
_RECENT_TRANSACTIONS_SQL = """
    SELECT
        t.id,
        t.room_id,
        t.drink_id,
        t.quantity,
        t.total_price,
        t.event_name,
        t.is_storno,
        t.timestamp,
        r.name AS room_name,
        d.name AS drink_name
    FROM transactions t
    JOIN rooms r ON r.id = t.room_id
    JOIN drinks d ON d.id = t.drink_id
    ORDER BY t.timestamp DESC, t.id DESC
    LIMIT :limit
"""


def _event_or_house(event_name: Optional[str]) -> str:
    if event_name is not None and event_name.strip():
        return event_name.strip()
    return get_settings().HOUSE_EVENT_NAME


def _line_item_params(room_id, item: Mapping, event_name: str) -> dict:
    drink_id = item.get("drink_id")
    quantity = item.get("quantity")
    total_price = item.get("total_price")
    if drink_id is None or quantity is None or total_price is None:
        raise InvalidInput("Each item needs drink_id, quantity and total_price")
    if quantity < 0:
        raise InvalidInput("Item quantity must be non-negative")
    return {
        "room_id": room_id,
        "drink_id": drink_id,
        "quantity": quantity,
        "total_price": float(total_price),
        "event_name": event_name,
        "is_storno": bool(item.get("is_storno") or False),
    }


def record_transaction(
    executor: QueryExecutor,
    room_id: Optional[int],
    items: Optional[Sequence[Mapping]],
    event_name: Optional[str] = None,
) -> int:
    """Insert every line item as its own row, all or nothing.

    Prices are taken as given. Returns the number of rows written.
    """
    if not room_id or not items:
        raise InvalidInput("Room ID and items required")

    event = _event_or_house(event_name)
    rows = [_line_item_params(room_id, item, event) for item in items]

    try:
        with executor.transaction("record transaction") as conn:
            for row in rows:
                conn.execute(_INSERT_TRANSACTION, row)
    except IntegrityError as exc:
        logger.warning("Rejected transaction for room %s: %s", room_id, exc.orig)
        raise InvalidInput("Unknown room or drink") from exc

    storno_count = sum(1 for row in rows if row["is_storno"])
    logger.info(
        "Recorded %d line items for room %s (event %s, %d storno).",
        len(rows),
        room_id,
        event,
        storno_count,
    )
    return len(rows)


def record_tip(executor: QueryExecutor, room_id: Optional[int], amount, event_name: Optional[str] = None) -> None:
    if not room_id or amount is None:
        raise InvalidInput("Room ID and amount required")
    if amount <= 0:
        raise InvalidInput("Tip amount must be positive")

    event = _event_or_house(event_name)
    try:
        with executor.transaction("record tip") as conn:
            conn.execute(_INSERT_TIP, {"room_id": room_id, "amount": float(amount), "event_name": event})
    except IntegrityError as exc:
        raise InvalidInput("Unknown room") from exc
    logger.info("Recorded tip of %s for room %s (event %s).", amount, room_id, event)


def list_recent_transactions(executor: QueryExecutor, limit: Optional[int] = None) -> list[dict]:
    if not limit or limit < 1:
        limit = get_settings().TRANSACTIONS_DEFAULT_LIMIT
    rows = executor.fetch_all(_RECENT_TRANSACTIONS_SQL, {"limit": limit}, action="recent transactions")
    for row in rows:
        row["is_storno"] = bool(row["is_storno"])
        row["total_price"] = float(row["total_price"])
    return rows


__all__ = ["list_recent_transactions", "record_tip", "record_transaction"]
