import sys
from typing import Any, Callable, Optional, Sequence, Union

from .adapters import Adapter, get_adapter
from .exceptions import ColumnNotFoundError, SinkClosedError
from .handle import DatabaseHandle
from .table import ColumnAssert, TableAssert
from .types import ColumnInfo, SinkType, ValueType
from .utils import is_any_value_null

_VALUE_TYPE_ASSERTS = {
    ValueType.BOOLEAN: ColumnAssert.is_boolean,
    ValueType.TEXT: ColumnAssert.is_text,
    ValueType.DATE: ColumnAssert.is_date,
    ValueType.TIME: ColumnAssert.is_time,
    ValueType.DATE_TIME: ColumnAssert.is_date_time,
    ValueType.NUMBER: ColumnAssert.is_number,
    ValueType.UUID: ColumnAssert.is_uuid,
    ValueType.BYTES: ColumnAssert.is_bytes,
}

RowConsumer = Callable[[Any, Sequence[Any]], Any]

class Sink:
    """The sink database of an end-to-end pipeline test.

    Wraps a borrowed DatabaseHandle and owns at most one DB-API connection, opened on
    first use and released by close() or on leaving a ``with`` block. A closed sink
    cannot be reopened. Not safe to share between threads.

    Vendor differences (identifier casing, URL suffix, post-connect statements,
    catalog queries, close policy) come from the Adapter registered for the sink type.
    """

    def __init__(self, sink_type: Union[SinkType, str], database: DatabaseHandle, adapter: Optional[Adapter] = None):
        self.type = sink_type if isinstance(sink_type, SinkType) else SinkType.parse(sink_type)
        self.database = database
        self.adapter = adapter or get_adapter(self.type)
        self._connection = None
        self._closed = False

    def __enter__(self) -> "Sink":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else ("open" if self._connection is not None else "unopened")
        return f"Sink({self.type.name}, {self.url!r}, {state})"

    # lifecycle

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def connection(self):
        if self._closed:
            raise SinkClosedError(f"{self.type.name} sink is closed; create a new Sink instead of reusing it.")
        if self._connection is None:
            self._connection = self._open()
        return self._connection

    def _open(self):
        conn = self.database.create_connection("")
        try:
            self.adapter.post_connect(conn)
        except Exception:
            try:
                self.adapter.close(conn)
            except Exception as e:
                print(f"[sinkcheck][warn] closing {self.type.name} connection after failed setup also failed "
                      f"({type(e).__name__}: {e}).", file=sys.stderr, flush=True)
            raise
        return conn

    def close(self) -> None:
        if self._closed: return
        self._closed = True
        conn, self._connection = self._connection, None
        if conn is not None and not self.adapter.is_closed(conn):
            self.adapter.close(conn)

    # connection details

    @property
    def url(self) -> str:
        return self.adapter.connection_url(self.database.native_url)

    @property
    def username(self) -> str:
        return self.database.username

    @property
    def password(self) -> str:
        return self.database.password

    def format_table_name(self, table_name: str) -> str:
        return self.adapter.format_identifier(table_name)

    def format_column_name(self, column_name: str) -> str:
        return self.adapter.format_identifier(column_name)

    # statements

    def _run(self, cur, sql: str) -> None:
        cur.execute(sql)

    def execute(self, sql: str) -> None:
        conn = self.connection
        cur = conn.cursor()
        try:
            self._run(cur, sql)
        finally:
            cur.close()
        if not self.adapter.is_autocommit(conn):
            conn.commit()

    # schema assertions

    def column_info(self, table_name: str, column_name: str) -> Optional[ColumnInfo]:
        return self.adapter.fetch_column(self.connection, self.format_table_name(table_name),
                                         self.format_column_name(column_name))

    def assert_column(self, table_name: str, column_name: str, expected_type: str,
                      length: Optional[int] = None, precision: Optional[int] = None,
                      scale: Optional[int] = None) -> ColumnInfo:
        """Assert a column exists with the given type name (case-insensitive).

        ``length`` (character types) and ``precision`` (numeric types) are both checked
        against the reported column size, so at most one of them may be given.
        """
        if length is not None and precision is not None:
            raise ValueError("length and precision are exclusive; pass one of them")
        table_name = self.format_table_name(table_name)
        column_name = self.format_column_name(column_name)
        try:
            info = self.adapter.fetch_column(self.connection, table_name, column_name)
        except SinkClosedError:
            raise
        except Exception as e:
            raise AssertionError(f"Failed to get column {column_name} in table {table_name}") from e
        if info is None:
            raise ColumnNotFoundError(table_name, column_name)

        if info.type_name.lower() != expected_type.lower():
            raise AssertionError(f"Column {column_name}: expected type {expected_type} but was {info.type_name}")
        size = length if length is not None else precision
        if size is not None and info.column_size != size:
            what = "length" if length is not None else "precision"
            raise AssertionError(f"Column {column_name}: expected {what} {size} but was {info.column_size}")
        if scale is not None and info.decimal_digits != scale:
            raise AssertionError(f"Column {column_name}: expected scale {scale} but was {info.decimal_digits}")
        return info

    def table(self, table_name: str) -> TableAssert:
        return TableAssert(self.connection, self.format_table_name(table_name))

    def assert_column_type(self, table: Union[TableAssert, str], column_name: str, value_type: ValueType,
                           *values: Any, lenient: Optional[bool] = None) -> ColumnAssert:
        """Assert every value of a column belongs to ``value_type`` and, when values are given,
        that the column holds exactly those values in order. Nulls among the expected values
        make the category check lenient unless ``lenient`` is passed explicitly."""
        check = _VALUE_TYPE_ASSERTS.get(value_type)
        if check is None:
            raise ValueError(f"Unexpected value type: {value_type}")
        if lenient is None:
            lenient = is_any_value_null(values)
        if isinstance(table, str):
            table = self.table(table)
        column = check(table.column(self.format_column_name(column_name)), lenient)
        if values:
            column.has_values(*values)
        return column

    # row assertions

    def _cursor(self):
        try:
            return self.connection.cursor()
        except SinkClosedError:
            raise
        except Exception as e:
            raise AssertionError("Failed to assert rows") from e

    def assert_rows(self, table_name: str, consumer: RowConsumer) -> None:
        """Assert the table has at least one row and hand ``consumer(cursor, first_row)``
        the open cursor, from which further rows can be fetched."""
        table_name = self.format_table_name(table_name)
        cur = self._cursor()
        try:
            try:
                self._run(cur, f"SELECT * FROM {table_name}")
                row = cur.fetchone()
            except Exception as e:
                raise AssertionError(f"Failed to assert rows of table {table_name}") from e
            if row is None:
                raise AssertionError(f"Expected table {table_name} to contain at least one row")
            consumer(cur, row)
        finally:
            cur.close()
