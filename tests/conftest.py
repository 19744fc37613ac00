import sqlite3
from typing import Any, Callable, List, Optional

import pytest


class FakeCursor:
    def __init__(self, conn: "FakeConnection"):
        self.conn = conn
        self.rows: List[tuple] = []
        self.description = None
        self.closed = False

    def execute(self, sql, params=None):
        self.conn.statements.append((sql, params))
        if self.conn.fail_on and self.conn.fail_on in sql:
            raise self.conn.error_cls(f"boom: {sql}")
        self.rows = list(self.conn.responder(sql, params) or [])
        self.description = [(f"c{i}",) for i in range(len(self.rows[0]))] if self.rows else []

    def fetchone(self):
        return self.rows.pop(0) if self.rows else None

    def fetchall(self):
        rows, self.rows = self.rows, []
        return rows

    def close(self):
        self.closed = True


class FakeConnection:
    """Records statements; responder(sql, params) supplies the rows a query returns."""

    def __init__(self, responder: Optional[Callable[[str, Any], List[tuple]]] = None, autocommit: bool = False,
                 close_error: Optional[Exception] = None, fail_on: Optional[str] = None, error_cls=RuntimeError):
        self.responder = responder or (lambda sql, params: [])
        self.autocommit = autocommit
        self.close_error = close_error
        self.fail_on = fail_on
        self.error_cls = error_cls
        self.statements: List[tuple] = []
        self.commits = 0
        self.close_calls = 0

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def close(self):
        self.close_calls += 1
        if self.close_error is not None:
            raise self.close_error

    @property
    def sql(self) -> List[str]:
        return [s for s, _ in self.statements]


class FakeHandle:
    def __init__(self, native_url: str = "db://localhost:1234/test", connection=None, factory=None):
        self.native_url = native_url
        self.username = "sink_user"
        self.password = "sink_pass"
        self.connection = connection if connection is not None else FakeConnection()
        self.factory = factory
        self.schemas: List[str] = []

    def create_connection(self, initial_schema: str = ""):
        self.schemas.append(initial_schema)
        if self.factory is not None:
            return self.factory()
        return self.connection


@pytest.fixture
def fake_handle():
    return FakeHandle()


@pytest.fixture
def sqlite_handle():
    conn = sqlite3.connect(":memory:")
    conn.executescript(
        """
        CREATE TABLE orders (id INTEGER, name TEXT, amount REAL, payload BLOB);
        INSERT INTO orders VALUES (1, 'first', 10.5, x'0102');
        INSERT INTO orders VALUES (2, NULL, 20, NULL);
        CREATE TABLE empty_table (id INTEGER);
        """
    )
    handle = FakeHandle(native_url="sqlite://memory", connection=conn)
    yield handle
    conn.close()
