import logging
import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from app.config import Settings, get_settings


app_settings: Settings = get_settings()
logger = logging.getLogger(__name__)

# Execution option set by QueryExecutor.transaction() on write units.
SQLITE_IMMEDIATE_OPTION = "sqlite_begin_immediate"


def _is_sqlite_memory(url) -> bool:
    database = url.database
    if database in (None, "", ":memory:"):
        return True
    return url.query.get("mode") == "memory"


def _install_sqlite_hooks(engine: Engine, *, is_memory: bool, busy_timeout_ms: int) -> None:
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragmas(dbapi_connection, _connection_record):
        # Let the "begin" hook below emit BEGIN itself.
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.execute(f"PRAGMA busy_timeout={busy_timeout_ms}")
            if not is_memory:
                try:
                    cursor.execute("PRAGMA journal_mode=WAL")
                    cursor.execute("PRAGMA synchronous=NORMAL")
                except sqlite3.DatabaseError:
                    logger.warning("Unable to enable WAL journal mode for SQLite.")
        finally:
            cursor.close()

    @event.listens_for(engine, "begin")
    def _begin(conn):
        # Write units take the database write lock before their first read.
        if conn.get_execution_options().get(SQLITE_IMMEDIATE_OPTION):
            conn.exec_driver_sql("BEGIN IMMEDIATE")
        else:
            conn.exec_driver_sql("BEGIN")


def build_engine(
    database_url: str,
    *,
    echo: bool = False,
    pool_size: int | None = None,
    pool_timeout: float | None = None,
    max_overflow: int | None = None,
    busy_timeout: float = 5.0,
) -> Engine:
    url = make_url(database_url)
    is_sqlite = url.get_backend_name() == "sqlite"
    is_memory = is_sqlite and _is_sqlite_memory(url)

    connect_args: dict[str, object] = {}
    engine_kwargs: dict[str, object] = dict(pool_pre_ping=True, echo=echo)
    if is_sqlite:
        connect_args = {"check_same_thread": False, "timeout": busy_timeout}
    if is_memory:
        engine_kwargs.update(poolclass=StaticPool)
    else:
        if pool_size is not None:
            engine_kwargs.update(pool_size=pool_size)
        if pool_timeout is not None:
            engine_kwargs.update(pool_timeout=pool_timeout)
        if max_overflow is not None:
            engine_kwargs.update(max_overflow=max_overflow)

    engine = create_engine(url, connect_args=connect_args, **engine_kwargs)
    if is_sqlite:
        _install_sqlite_hooks(engine, is_memory=is_memory, busy_timeout_ms=int(busy_timeout * 1000))
    return engine


engine = build_engine(
    app_settings.DATABASE_URL,
    echo=app_settings.DATABASE_ECHO,
    pool_size=app_settings.DATABASE_POOL_SIZE,
    pool_timeout=app_settings.DATABASE_POOL_TIMEOUT_SECONDS,
    max_overflow=app_settings.DATABASE_MAX_OVERFLOW,
    busy_timeout=app_settings.DATABASE_BUSY_TIMEOUT_SECONDS,
)


__all__ = ["SQLITE_IMMEDIATE_OPTION", "build_engine", "engine"]
