import logging

from app.database.executor import QueryExecutor
from app.services.filters import StatisticsFilters, build_filter

logger = logging.getLogger(__name__)

TRANSACTIONS_ALIAS = "t"
TIPS_ALIAS = "ti"

# noinspection SqlNoDataSourceInspection
_BREAKDOWN_SQL = """
    SELECT
        r.id AS room_id,
        r.name AS room_name,
        d.id AS drink_id,
        d.name AS drink_name,
        t.event_name,
        COALESCE(SUM(CASE WHEN t.is_storno THEN 0 ELSE t.quantity END), 0) AS total_quantity,
        COALESCE(SUM(CASE WHEN t.is_storno THEN t.quantity ELSE 0 END), 0) AS storno_quantity,
        COALESCE(SUM(CASE WHEN t.is_storno THEN 0 ELSE t.total_price END), 0) AS total_revenue,
        COALESCE(SUM(CASE WHEN t.is_storno THEN t.total_price ELSE 0 END), 0) AS storno_revenue
    FROM transactions t
    JOIN rooms r ON r.id = t.room_id
    JOIN drinks d ON d.id = t.drink_id
    WHERE {where}
    GROUP BY r.id, r.name, d.id, d.name, t.event_name
    ORDER BY t.event_name, r.name, total_quantity DESC
"""

# noinspection SqlNoDataSourceInspection
_SUMMARY_SQL = """
    SELECT
        COALESCE(SUM(CASE WHEN t.is_storno THEN 0 ELSE t.quantity END), 0) AS total_items,
        COALESCE(SUM(CASE WHEN t.is_storno THEN t.quantity ELSE 0 END), 0) AS storno_items,
        COALESCE(SUM(CASE WHEN t.is_storno THEN 0 ELSE t.total_price END), 0) AS total_revenue,
        COALESCE(SUM(CASE WHEN t.is_storno THEN t.total_price ELSE 0 END), 0) AS storno_revenue,
        COUNT(DISTINCT t.id) AS transaction_count
    FROM transactions t
    WHERE {where}
"""

# noinspection SqlNoDataSourceInspection
_TIPS_SQL = """
    SELECT
        COALESCE(SUM(ti.amount), 0) AS total_tips,
        COUNT(*) AS tip_count
    FROM tips ti
    WHERE {where}
"""

# noinspection SqlNoDataSourceInspection
_TIPS_PER_ROOM_SQL = """
    SELECT
        r.id AS room_id,
        r.name AS room_name,
        ti.event_name,
        COALESCE(SUM(ti.amount), 0) AS total_tips
    FROM tips ti
    JOIN rooms r ON r.id = ti.room_id
    WHERE {where}
    GROUP BY r.id, r.name, ti.event_name
    ORDER BY ti.event_name, r.name
"""

# noinspection SqlNoDataSourceInspection
_EVENTS_SQL = """
    SELECT DISTINCT t.event_name
    FROM transactions t
    WHERE {where}
    ORDER BY t.event_name
"""


def _count(value) -> int:
    return int(value or 0)


def _money(value) -> float:
    return round(float(value or 0), 2)


def _breakdown_row(row):
    return {
        "room_id": row["room_id"],
        "room_name": row["room_name"],
        "drink_id": row["drink_id"],
        "drink_name": row["drink_name"],
        "event_name": row["event_name"],
        "total_quantity": _count(row["total_quantity"]),
        "storno_quantity": _count(row["storno_quantity"]),
        "total_revenue": _money(row["total_revenue"]),
        "storno_revenue": _money(row["storno_revenue"]),
    }


def _tips_per_room_row(row):
    return {
        "room_id": row["room_id"],
        "room_name": row["room_name"],
        "event_name": row["event_name"],
        "total_tips": _money(row["total_tips"]),
    }


def _summary(summary_row, tips_row):
    summary_row = summary_row or {}
    tips_row = tips_row or {}
    return {
        "total_items": _count(summary_row.get("total_items")),
        "storno_items": _count(summary_row.get("storno_items")),
        "total_revenue": _money(summary_row.get("total_revenue")),
        "storno_revenue": _money(summary_row.get("storno_revenue")),
        "transaction_count": _count(summary_row.get("transaction_count")),
        "total_tips": _money(tips_row.get("total_tips")),
        "tip_count": _count(tips_row.get("tip_count")),
    }


def get_statistics(executor: QueryExecutor, filters: StatisticsFilters) -> dict:
    """Build the combined sales, storno and tips report for ``filters``.

    The five reads run independently, without a shared transaction. The event
    list only honours the date range so callers can offer every event of the
    period, whatever room or event is currently selected.
    """
    transactions_filter = build_filter(filters, TRANSACTIONS_ALIAS)
    tips_filter = transactions_filter.for_alias(TIPS_ALIAS)
    events_filter = build_filter(filters.date_range(), TRANSACTIONS_ALIAS)

    breakdown = executor.fetch_all(
        _BREAKDOWN_SQL.format(where=transactions_filter.expression),
        transactions_filter.bind_params(),
        action="statistics breakdown",
    )
    summary = executor.fetch_one(
        _SUMMARY_SQL.format(where=transactions_filter.expression),
        transactions_filter.bind_params(),
        action="statistics summary",
    )
    tips = executor.fetch_one(
        _TIPS_SQL.format(where=tips_filter.expression),
        tips_filter.bind_params(),
        action="tips summary",
    )
    tips_per_room = executor.fetch_all(
        _TIPS_PER_ROOM_SQL.format(where=tips_filter.expression),
        tips_filter.bind_params(),
        action="tips per room",
    )
    events = executor.fetch_all(
        _EVENTS_SQL.format(where=events_filter.expression),
        events_filter.bind_params(),
        action="event list",
    )

    report = {
        "statistics": [_breakdown_row(row) for row in breakdown],
        "summary": _summary(summary, tips),
        "tips_per_room": [_tips_per_room_row(row) for row in tips_per_room],
        "events": [row["event_name"] for row in events if row["event_name"] is not None],
    }
    logger.debug(
        "Statistics built: %d breakdown rows, %d events.",
        len(report["statistics"]),
        len(report["events"]),
    )
    return report


__all__ = ["TIPS_ALIAS", "TRANSACTIONS_ALIAS", "get_statistics"]
