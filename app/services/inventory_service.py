import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Connection

from app.config import get_settings
from app.core.constants import (
    CHANGE_TYPE_ADJUSTMENT,
    CHANGE_TYPE_MANUAL_COUNT,
    DEFAULT_ADJUSTMENT_NOTE,
    DEFAULT_COUNT_NOTE,
)
from app.core.errors import InvalidInput, NotFound
from app.database.executor import QueryExecutor

logger = logging.getLogger(__name__)

# noinspection SqlNoDataSourceInspection
_SELECT_RECORD_BY_ID = """
    SELECT id, drink_id, quantity
    FROM inventory
    WHERE id = :inventory_id
"""

# noinspection SqlNoDataSourceInspection
_SET_COUNT = text(
    """
    UPDATE inventory
    SET quantity = :quantity,
        last_count_date = CURRENT_TIMESTAMP,
        last_updated = CURRENT_TIMESTAMP
    WHERE id = :inventory_id
    """
)

# Check and write in one statement so concurrent adjustments never act on a
# stale quantity.
# noinspection SqlNoDataSourceInspection
_ADJUST = text(
    """
    UPDATE inventory
    SET quantity = quantity + :delta,
        last_updated = CURRENT_TIMESTAMP
    WHERE drink_id = :drink_id
      AND quantity + :delta >= 0
    RETURNING quantity
    """
)

# noinspection SqlNoDataSourceInspection
_SELECT_QUANTITY_BY_DRINK = text(
    """
    SELECT quantity
    FROM inventory
    WHERE drink_id = :drink_id
    """
)

# noinspection SqlNoDataSourceInspection
_INSERT_HISTORY = text(
    """
    INSERT INTO inventory_history
        (drink_id, change_type, quantity_before, quantity_after, quantity_change, notes)
    VALUES
        (:drink_id, :change_type, :quantity_before, :quantity_after, :quantity_change, :notes)
    """
)

# noinspection SqlNoDataSourceInspection
_INVENTORY_SQL = """
    SELECT
        i.id,
        i.drink_id,
        i.quantity,
        i.last_count_date,
        i.last_updated,
        d.name AS drink_name,
        d.price,
        d.price_reduced,
        d.color,
        d.active
    FROM inventory i
    JOIN drinks d ON d.id = i.drink_id
    ORDER BY d.sort_order ASC, d.name ASC
"""

# noinspection SqlNoDataSourceInspection
_HISTORY_SQL = """
    SELECT
        h.id,
        h.drink_id,
        h.change_type,
        h.quantity_before,
        h.quantity_after,
        h.quantity_change,
        h.notes,
        h.created_at,
        d.name AS drink_name
    FROM inventory_history h
    JOIN drinks d ON d.id = h.drink_id
    WHERE h.drink_id = :drink_id
    ORDER BY h.created_at DESC, h.id DESC
    LIMIT :limit
"""

# noinspection SqlNoDataSourceInspection
_SUMMARY_SQL = """
    SELECT
        COUNT(*) AS total_drinks,
        COALESCE(SUM(quantity), 0) AS total_stock,
        COUNT(CASE WHEN quantity = 0 THEN 1 END) AS out_of_stock,
        COUNT(CASE WHEN quantity < :low_stock_threshold THEN 1 END) AS low_stock
    FROM inventory
"""


def _append_history(
    conn: Connection,
    *,
    drink_id: int,
    change_type: str,
    quantity_before: int,
    quantity_after: int,
    quantity_change: int,
    notes: str,
) -> None:
    conn.execute(
        _INSERT_HISTORY,
        {
            "drink_id": drink_id,
            "change_type": change_type,
            "quantity_before": quantity_before,
            "quantity_after": quantity_after,
            "quantity_change": quantity_change,
            "notes": notes,
        },
    )


def set_count(
    executor: QueryExecutor,
    inventory_id: int,
    new_quantity: Optional[int],
    notes: Optional[str] = None,
) -> None:
    """Record a full recount: replace the quantity and audit the difference."""
    if new_quantity is None or new_quantity < 0:
        raise InvalidInput("Valid quantity required")

    with executor.transaction("inventory count") as conn:
        current = (
            conn.execute(
                text(_SELECT_RECORD_BY_ID + executor.row_lock_clause()),
                {"inventory_id": inventory_id},
            )
            .mappings()
            .first()
        )
        if current is None:
            raise NotFound("Inventory item not found")

        quantity_before = current["quantity"]
        conn.execute(_SET_COUNT, {"quantity": new_quantity, "inventory_id": inventory_id})
        _append_history(
            conn,
            drink_id=current["drink_id"],
            change_type=CHANGE_TYPE_MANUAL_COUNT,
            quantity_before=quantity_before,
            quantity_after=new_quantity,
            quantity_change=new_quantity - quantity_before,
            notes=notes or DEFAULT_COUNT_NOTE,
        )

    logger.info(
        "Inventory %s counted: %s -> %s.",
        inventory_id,
        quantity_before,
        new_quantity,
    )


def adjust(
    executor: QueryExecutor,
    drink_id: Optional[int],
    delta: Optional[int],
    notes: Optional[str] = None,
) -> dict:
    """Add ``delta`` (possibly negative) to a drink's stock.

    The whole adjustment is rejected when stock would drop below zero.
    """
    if not drink_id or delta is None:
        raise InvalidInput("Drink ID and adjustment required")

    with executor.transaction("inventory adjustment") as conn:
        updated = conn.execute(_ADJUST, {"drink_id": drink_id, "delta": delta}).mappings().first()
        if updated is None:
            existing = conn.execute(_SELECT_QUANTITY_BY_DRINK, {"drink_id": drink_id}).mappings().first()
            if existing is None:
                raise NotFound("Inventory item not found")
            logger.warning(
                "Rejected adjustment of %s for drink %s: only %s in stock.",
                delta,
                drink_id,
                existing["quantity"],
            )
            raise InvalidInput("Adjustment would result in negative inventory")

        new_quantity = updated["quantity"]
        _append_history(
            conn,
            drink_id=drink_id,
            change_type=CHANGE_TYPE_ADJUSTMENT,
            quantity_before=new_quantity - delta,
            quantity_after=new_quantity,
            quantity_change=delta,
            notes=notes or DEFAULT_ADJUSTMENT_NOTE,
        )

    logger.info("Drink %s adjusted by %s to %s.", drink_id, delta, new_quantity)
    return {"new_quantity": new_quantity}


def list_inventory(executor: QueryExecutor) -> list[dict]:
    rows = executor.fetch_all(_INVENTORY_SQL, action="inventory list")
    for row in rows:
        row["active"] = bool(row["active"])
        row["price"] = float(row["price"])
        if row["price_reduced"] is not None:
            row["price_reduced"] = float(row["price_reduced"])
    return rows


def list_history(executor: QueryExecutor, drink_id: int, limit: Optional[int] = None) -> list[dict]:
    if not limit or limit < 1:
        limit = get_settings().HISTORY_DEFAULT_LIMIT
    return executor.fetch_all(
        _HISTORY_SQL,
        {"drink_id": drink_id, "limit": limit},
        action="inventory history",
    )


def inventory_summary(executor: QueryExecutor) -> dict:
    row = executor.fetch_one(
        _SUMMARY_SQL,
        {"low_stock_threshold": get_settings().LOW_STOCK_THRESHOLD},
        action="inventory summary",
    ) or {}
    return {
        "total_drinks": int(row.get("total_drinks") or 0),
        "total_stock": int(row.get("total_stock") or 0),
        "out_of_stock": int(row.get("out_of_stock") or 0),
        "low_stock": int(row.get("low_stock") or 0),
    }


__all__ = [
    "adjust",
    "inventory_summary",
    "list_history",
    "list_inventory",
    "set_count",
]
