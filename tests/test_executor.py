import os
import sqlite3
import tempfile
import unittest

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from app.core.errors import InvalidInput, StorageFailure, StorageUnavailable
from dbhelpers import add_room, count_rows, make_executor


class QueryExecutorTest(unittest.TestCase):
    def setUp(self):
        self.executor = make_executor()

    def test_driver_errors_become_storage_failures(self):
        with self.assertLogs("app.database.executor", level="ERROR"):
            with self.assertRaises(StorageFailure) as ctx:
                self.executor.fetch_all("SELECT * FROM no_such_table")
        self.assertNotIn("no_such_table", ctx.exception.message)
        self.assertNotIsInstance(ctx.exception, StorageUnavailable)

    def test_transaction_rolls_back_on_error(self):
        with self.assertRaises(InvalidInput):
            with self.executor.transaction() as conn:
                conn.execute(text("INSERT INTO rooms (name) VALUES ('Saal')"))
                raise InvalidInput("stop")
        self.assertEqual(count_rows(self.executor, "rooms"), 0)

    def test_integrity_errors_pass_through(self):
        with self.assertRaises(IntegrityError):
            with self.executor.transaction() as conn:
                conn.execute(text("INSERT INTO tips (room_id, amount, event_name) VALUES (77, 1, 'x')"))

    def test_execute_commits(self):
        written = self.executor.execute("INSERT INTO rooms (name) VALUES (:name)", {"name": "Saal"})
        self.assertEqual(written, 1)
        add_room(self.executor, "Clubraum")
        self.assertEqual(count_rows(self.executor, "rooms"), 2)

    def test_row_lock_clause_is_empty_on_sqlite(self):
        self.assertEqual(self.executor.row_lock_clause(), "")


class StorageAvailabilityTest(unittest.TestCase):
    def setUp(self):
        tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(tmp_dir.cleanup)
        self.path = os.path.join(tmp_dir.name, "pos.db")
        self.database_url = "sqlite:///{}".format(self.path)

    def test_pool_checkout_timeout_is_retryable(self):
        executor = make_executor(self.database_url, pool_size=1, pool_timeout=0.2, max_overflow=0)
        self.addCleanup(executor.dispose)
        held = executor.engine.connect()
        self.addCleanup(held.close)

        with self.assertLogs("app.database.executor", level="WARNING"):
            with self.assertRaises(StorageUnavailable) as ctx:
                executor.fetch_all("SELECT 1")
        self.assertEqual(ctx.exception.status_code, 503)

    def test_lock_wait_timeout_is_retryable(self):
        executor = make_executor(self.database_url, busy_timeout=0.1)
        self.addCleanup(executor.dispose)
        blocker = sqlite3.connect(self.path, isolation_level=None)
        self.addCleanup(blocker.close)
        blocker.execute("BEGIN IMMEDIATE")
        self.addCleanup(blocker.execute, "ROLLBACK")

        with self.assertLogs("app.database.executor", level="WARNING"):
            with self.assertRaises(StorageUnavailable):
                with executor.transaction() as conn:
                    conn.execute(text("INSERT INTO rooms (name) VALUES ('Saal')"))


if __name__ == "__main__":
    unittest.main()
