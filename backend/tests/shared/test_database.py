"""Tests for shared/database.py."""

import threading

import pytest
import psycopg2
import psycopg2.pool
from unittest.mock import patch, MagicMock

from shared.config import Settings
from shared.database import Database, create_database
from shared.exceptions import DatabaseError


@pytest.fixture
def mock_pool():
    with patch("shared.database.ThreadedConnectionPool") as pool_cls:
        pool = pool_cls.return_value
        conn = MagicMock()
        conn.closed = 0
        pool.getconn.return_value = conn
        yield pool_cls, pool, conn


def cursor_of(conn) -> MagicMock:
    return conn.cursor.return_value.__enter__.return_value


class TestDatabasePool:
    def test_non_production_disables_tls(self, mock_pool):
        pool_cls, _, _ = mock_pool
        Database("postgresql://localhost/journeyboard", max_connections=5)
        pool_cls.assert_called_once_with(0, 5, "postgresql://localhost/journeyboard", sslmode="disable")

    def test_production_requires_tls(self, mock_pool):
        pool_cls, _, _ = mock_pool
        Database("postgresql://db.internal/journeyboard", production=True)
        assert pool_cls.call_args.kwargs == {"sslmode": "require"}

    def test_create_database_from_settings(self, mock_pool):
        pool_cls, _, _ = mock_pool
        settings = Settings(
            _env_file=None,
            database_url="postgresql://db/journeyboard",
            environment="production",
            database_pool_min=1,
            database_pool_max=8,
        )

        create_database(settings)

        pool_cls.assert_called_once_with(1, 8, "postgresql://db/journeyboard", sslmode="require")

    def test_create_database_requires_url(self):
        with pytest.raises(RuntimeError, match="DATABASE_URL"):
            create_database(Settings(_env_file=None, database_url=""))


class TestQueries:
    def test_fetch_one(self, mock_pool):
        _, pool, conn = mock_pool
        cursor_of(conn).fetchone.return_value = {"score": 100}

        row = Database("dsn").fetch_one("SELECT score FROM scores WHERE user_id = %s", ("u",))

        assert row == {"score": 100}
        cursor_of(conn).execute.assert_called_once_with("SELECT score FROM scores WHERE user_id = %s", ("u",))
        conn.commit.assert_called_once()
        pool.putconn.assert_called_once_with(conn, close=False)

    def test_fetch_one_no_row(self, mock_pool):
        _, _, conn = mock_pool
        cursor_of(conn).fetchone.return_value = None
        assert Database("dsn").fetch_one("SELECT 1") is None

    def test_fetch_all(self, mock_pool):
        _, _, conn = mock_pool
        cursor_of(conn).fetchall.return_value = [{"score": 50}, {"score": 30}]
        assert Database("dsn").fetch_all("SELECT score FROM scores") == [{"score": 50}, {"score": 30}]

    def test_execute(self, mock_pool):
        _, pool, conn = mock_pool
        Database("dsn").execute("DELETE FROM scores")
        conn.commit.assert_called_once()
        pool.putconn.assert_called_once()

    def test_ping(self, mock_pool):
        _, _, conn = mock_pool
        cursor_of(conn).fetchone.return_value = {"now": "2024-05-01T12:00:00+00:00"}

        assert Database("dsn").ping() == {"now": "2024-05-01T12:00:00+00:00"}
        assert "NOW()" in cursor_of(conn).execute.call_args.args[0]


class TestFailures:
    def test_query_error_rolls_back_and_returns_connection(self, mock_pool):
        _, pool, conn = mock_pool
        cursor_of(conn).execute.side_effect = psycopg2.ProgrammingError("relation \"missing\" does not exist")

        with pytest.raises(DatabaseError) as exc_info:
            Database("dsn").fetch_all("SELECT * FROM missing")

        assert isinstance(exc_info.value.__cause__, psycopg2.Error)
        assert "relation" not in exc_info.value.message
        conn.rollback.assert_called_once()
        conn.commit.assert_not_called()
        pool.putconn.assert_called_once_with(conn, close=False)

    def test_broken_connection_is_discarded(self, mock_pool):
        _, pool, conn = mock_pool
        cursor_of(conn).execute.side_effect = psycopg2.OperationalError("server closed the connection")
        conn.closed = 2

        with pytest.raises(DatabaseError):
            Database("dsn").execute("SELECT 1")

        conn.rollback.assert_not_called()
        pool.putconn.assert_called_once_with(conn, close=True)

    def test_connect_failure(self, mock_pool):
        _, pool, _ = mock_pool
        pool.getconn.side_effect = psycopg2.OperationalError("could not connect to server")

        with pytest.raises(DatabaseError):
            Database("dsn").ping()

    def test_pool_exhausted(self, mock_pool):
        _, pool, _ = mock_pool
        pool.getconn.side_effect = psycopg2.pool.PoolError("connection pool exhausted")

        with pytest.raises(DatabaseError):
            Database("dsn").ping()


class TestPoolWaiting:
    def test_borrower_waits_for_a_free_connection(self, mock_pool):
        _, pool, _ = mock_pool
        db = Database("dsn", max_connections=1, acquire_timeout=5)
        order = []

        def second_borrower():
            with db.connection():
                order.append("second")

        with db.connection():
            worker = threading.Thread(target=second_borrower)
            worker.start()
            worker.join(timeout=0.2)
            assert worker.is_alive()
            order.append("first")
        worker.join(timeout=5)

        assert order == ["first", "second"]
        assert pool.getconn.call_count == 2
        assert pool.putconn.call_count == 2

    def test_timeout_waiting_for_a_connection(self, mock_pool):
        _, pool, _ = mock_pool
        db = Database("dsn", max_connections=1, acquire_timeout=0.05)

        with db.connection():
            with pytest.raises(DatabaseError):
                db.ping()

        assert pool.getconn.call_count == 1

    def test_slot_released_when_getconn_fails(self, mock_pool):
        _, pool, conn = mock_pool
        db = Database("dsn", max_connections=1, acquire_timeout=0.05)
        pool.getconn.side_effect = [psycopg2.OperationalError("could not connect to server"), conn]
        cursor_of(conn).fetchone.return_value = {"now": "2024-05-01T12:00:00+00:00"}

        with pytest.raises(DatabaseError):
            db.ping()

        assert db.ping() == {"now": "2024-05-01T12:00:00+00:00"}

    def test_create_database_passes_timeout(self, mock_pool):
        settings = Settings(_env_file=None, database_url="postgresql://db/journeyboard", database_pool_timeout=2.5)
        assert create_database(settings)._acquire_timeout == 2.5


class TestClose:
    def test_close_is_idempotent(self, mock_pool):
        _, pool, _ = mock_pool
        db = Database("dsn")
        db.close()
        db.close()
        pool.closeall.assert_called_once()
