import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from app.config import get_settings
from app.core.errors import Conflict, InvalidInput, NotFound
from app.database.executor import QueryExecutor

logger = logging.getLogger(__name__)

DUPLICATE_DRINK_MESSAGE = "Drink with this name already exists"

# noinspection SqlNoDataSourceInspection
_ROOMS_SQL = "SELECT id, name FROM rooms ORDER BY id"

# noinspection SqlNoDataSourceInspection
_DRINKS_SQL = """
    SELECT id, name, price, price_reduced, color, active, sort_order
    FROM drinks
    {where}
    ORDER BY sort_order ASC, name ASC
"""

# noinspection SqlNoDataSourceInspection
_NEXT_SORT_ORDER = text("SELECT COALESCE(MAX(sort_order), 0) + 1 AS next_sort FROM drinks")

# noinspection SqlNoDataSourceInspection
_INSERT_DRINK = text(
    """
    INSERT INTO drinks (name, price, price_reduced, color, sort_order)
    VALUES (:name, :price, :price_reduced, :color, :sort_order)
    RETURNING id
    """
)

# noinspection SqlNoDataSourceInspection
_INSERT_INVENTORY = text("INSERT INTO inventory (drink_id, quantity) VALUES (:drink_id, 0)")

# noinspection SqlNoDataSourceInspection
_UPDATE_DRINK = text(
    """
    UPDATE drinks
    SET name = :name,
        price = :price,
        price_reduced = :price_reduced,
        active = :active,
        color = :color,
        sort_order = :sort_order
    WHERE id = :drink_id
    """
)


def _optional_price(value) -> Optional[float]:
    # A zero reduced price means "no reduced price".
    if not value:
        return None
    return float(value)


def _validate_drink(name, price) -> str:
    name = (name or "").strip()
    if not name or price is None:
        raise InvalidInput("Name and price required")
    if price < 0:
        raise InvalidInput("Price must be non-negative")
    return name


def _drink_row(row: dict) -> dict:
    row["price"] = float(row["price"])
    if row["price_reduced"] is not None:
        row["price_reduced"] = float(row["price_reduced"])
    row["active"] = bool(row["active"])
    return row


def list_rooms(executor: QueryExecutor) -> list[dict]:
    return executor.fetch_all(_ROOMS_SQL, action="room list")


def list_drinks(executor: QueryExecutor, *, active_only: bool = True) -> list[dict]:
    where = "WHERE active = :active" if active_only else ""
    params = {"active": True} if active_only else {}
    rows = executor.fetch_all(_DRINKS_SQL.format(where=where), params, action="drink list")
    return [_drink_row(row) for row in rows]


def create_drink(
    executor: QueryExecutor,
    name: Optional[str],
    price,
    price_reduced=None,
    color: Optional[str] = None,
) -> int:
    """Add a drink at the end of the menu together with its empty stock record."""
    name = _validate_drink(name, price)
    try:
        with executor.transaction("create drink") as conn:
            sort_order = conn.execute(_NEXT_SORT_ORDER).scalar_one()
            drink_id = conn.execute(
                _INSERT_DRINK,
                {
                    "name": name,
                    "price": float(price),
                    "price_reduced": _optional_price(price_reduced),
                    "color": color or get_settings().DEFAULT_DRINK_COLOR,
                    "sort_order": sort_order,
                },
            ).scalar_one()
            conn.execute(_INSERT_INVENTORY, {"drink_id": drink_id})
    except IntegrityError as exc:
        raise Conflict(DUPLICATE_DRINK_MESSAGE) from exc

    logger.info("Created drink %s (%s) at position %s.", drink_id, name, sort_order)
    return drink_id


def update_drink(
    executor: QueryExecutor,
    drink_id: int,
    *,
    name: Optional[str],
    price,
    price_reduced=None,
    active: bool = True,
    color: Optional[str] = None,
    sort_order: int = 0,
) -> None:
    name = _validate_drink(name, price)
    try:
        with executor.transaction("update drink") as conn:
            result = conn.execute(
                _UPDATE_DRINK,
                {
                    "drink_id": drink_id,
                    "name": name,
                    "price": float(price),
                    "price_reduced": _optional_price(price_reduced),
                    "active": bool(active),
                    "color": color or get_settings().DEFAULT_DRINK_COLOR,
                    "sort_order": sort_order,
                },
            )
            if result.rowcount == 0:
                raise NotFound("Drink not found")
    except IntegrityError as exc:
        raise Conflict(DUPLICATE_DRINK_MESSAGE) from exc

    logger.info("Updated drink %s (%s, active=%s).", drink_id, name, active)


__all__ = [
    "DUPLICATE_DRINK_MESSAGE",
    "create_drink",
    "list_drinks",
    "list_rooms",
    "update_drink",
]
