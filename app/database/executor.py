import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional, Union

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.sql.elements import TextClause

from app.core.errors import StorageFailure, StorageUnavailable
from app.database.engine import SQLITE_IMMEDIATE_OPTION

logger = logging.getLogger(__name__)

Statement = Union[str, TextClause]
Params = Optional[Mapping[str, Any]]

_LOCK_MESSAGES = ("database is locked", "database table is locked")


def as_text(sql: Statement) -> TextClause:
    if isinstance(sql, TextClause):
        return sql
    return text(sql)


def _is_lock_timeout(exc: OperationalError) -> bool:
    message = str(exc.orig).lower()
    return any(marker in message for marker in _LOCK_MESSAGES)


class QueryExecutor:
    """Parameterized reads, writes and atomic units over one engine.

    Driver errors leave as ``StorageFailure`` (``StorageUnavailable`` when the
    pool checkout or a SQLite lock wait timed out). ``IntegrityError`` is
    re-raised untouched so the caller can decide between a conflict and bad
    input.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    def row_lock_clause(self) -> str:
        # SQLite write units already hold the database lock (BEGIN IMMEDIATE).
        if self.dialect_name == "sqlite":
            return ""
        return " FOR UPDATE"

    @contextmanager
    def _storage_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except IntegrityError:
            raise
        except PoolTimeoutError as exc:
            logger.warning("Timed out acquiring a database connection (%s).", action)
            raise StorageUnavailable() from exc
        except OperationalError as exc:
            if _is_lock_timeout(exc):
                logger.warning("Timed out waiting for a database lock (%s).", action)
                raise StorageUnavailable() from exc
            logger.exception("Database error during %s.", action)
            raise StorageFailure() from exc
        except SQLAlchemyError as exc:
            logger.exception("Database error during %s.", action)
            raise StorageFailure() from exc

    def fetch_all(self, sql: Statement, params: Params = None, *, action: str = "query") -> list[dict]:
        with self._storage_errors(action):
            with self.engine.connect() as conn:
                rows = conn.execute(as_text(sql), dict(params or {})).mappings().all()
        return [dict(row) for row in rows]

    def fetch_one(self, sql: Statement, params: Params = None, *, action: str = "query") -> Optional[dict]:
        with self._storage_errors(action):
            with self.engine.connect() as conn:
                row = conn.execute(as_text(sql), dict(params or {})).mappings().first()
        return dict(row) if row is not None else None

    def execute(self, sql: Statement, params: Params = None, *, action: str = "write") -> int:
        with self._storage_errors(action):
            with self.engine.begin() as conn:
                result = conn.execute(as_text(sql), dict(params or {}))
                return result.rowcount

    @contextmanager
    def transaction(self, action: str = "transaction") -> Iterator[Connection]:
        """Yield a connection inside one atomic unit.

        Commits when the block exits cleanly and rolls back on any exception,
        which is then re-raised.
        """
        with self._storage_errors(action):
            with self.engine.connect() as conn:
                conn.execution_options(**{SQLITE_IMMEDIATE_OPTION: True})
                with conn.begin():
                    yield conn

    def dispose(self) -> None:
        self.engine.dispose()


__all__ = ["QueryExecutor", "as_text"]
