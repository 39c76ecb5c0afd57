from sqlalchemy import text

from app.database import Base, QueryExecutor, build_engine
from app.models import import_all_models

DEFAULT_TIMESTAMP = "2026-07-01 20:00:00"


def make_executor(database_url="sqlite://", **engine_options):
    import_all_models()
    engine = build_engine(database_url, **engine_options)
    Base.metadata.create_all(bind=engine)
    return QueryExecutor(engine)


def add_room(executor, name):
    with executor.transaction() as conn:
        return conn.execute(
            text("INSERT INTO rooms (name) VALUES (:name) RETURNING id"),
            {"name": name},
        ).scalar_one()


def add_drink(executor, name, price=3.5, quantity=0, sort_order=0, active=True):
    with executor.transaction() as conn:
        drink_id = conn.execute(
            text(
                "INSERT INTO drinks (name, price, color, active, sort_order) "
                "VALUES (:name, :price, '#667eea', :active, :sort_order) RETURNING id"
            ),
            {"name": name, "price": price, "active": active, "sort_order": sort_order},
        ).scalar_one()
        conn.execute(
            text("INSERT INTO inventory (drink_id, quantity) VALUES (:drink_id, :quantity)"),
            {"drink_id": drink_id, "quantity": quantity},
        )
    return drink_id


def add_transaction(
    executor,
    room_id,
    drink_id,
    quantity,
    total_price,
    event_name="Hausintern",
    is_storno=False,
    timestamp=DEFAULT_TIMESTAMP,
):
    with executor.transaction() as conn:
        conn.execute(
            text(
                "INSERT INTO transactions "
                "(room_id, drink_id, quantity, total_price, event_name, is_storno, timestamp) "
                "VALUES (:room_id, :drink_id, :quantity, :total_price, :event_name, :is_storno, :timestamp)"
            ),
            {
                "room_id": room_id,
                "drink_id": drink_id,
                "quantity": quantity,
                "total_price": total_price,
                "event_name": event_name,
                "is_storno": is_storno,
                "timestamp": timestamp,
            },
        )


def add_tip(executor, room_id, amount, event_name="Hausintern", timestamp=DEFAULT_TIMESTAMP):
    with executor.transaction() as conn:
        conn.execute(
            text(
                "INSERT INTO tips (room_id, amount, event_name, timestamp) "
                "VALUES (:room_id, :amount, :event_name, :timestamp)"
            ),
            {"room_id": room_id, "amount": amount, "event_name": event_name, "timestamp": timestamp},
        )


def inventory_quantity(executor, drink_id):
    row = executor.fetch_one(
        "SELECT quantity FROM inventory WHERE drink_id = :drink_id",
        {"drink_id": drink_id},
    )
    return row["quantity"] if row else None


def inventory_id_for(executor, drink_id):
    row = executor.fetch_one(
        "SELECT id FROM inventory WHERE drink_id = :drink_id",
        {"drink_id": drink_id},
    )
    return row["id"]


def history_for(executor, drink_id):
    return executor.fetch_all(
        "SELECT * FROM inventory_history WHERE drink_id = :drink_id ORDER BY id",
        {"drink_id": drink_id},
    )


def count_rows(executor, table):
    return executor.fetch_one("SELECT COUNT(*) AS n FROM {}".format(table))["n"]
