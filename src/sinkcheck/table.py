import numbers
import uuid
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Callable, Dict, List

import pandas as pd

from .utils import is_null

def _is_boolean(v: Any) -> bool:
    return isinstance(v, bool)

def _is_text(v: Any) -> bool:
    return isinstance(v, str)

def _is_date(v: Any) -> bool:
    return isinstance(v, date) and not isinstance(v, datetime)

def _is_time(v: Any) -> bool:
    return isinstance(v, time)

def _is_date_time(v: Any) -> bool:
    return isinstance(v, datetime)

def _is_number(v: Any) -> bool:
    return isinstance(v, numbers.Number) and not isinstance(v, bool)

def _is_uuid(v: Any) -> bool:
    return isinstance(v, uuid.UUID)

def _is_bytes(v: Any) -> bool:
    return isinstance(v, (bytes, bytearray, memoryview))

_CATEGORIES: Dict[str, Callable[[Any], bool]] = {
    "boolean": _is_boolean, "text": _is_text, "date": _is_date, "time": _is_time,
    "date_time": _is_date_time, "number": _is_number, "uuid": _is_uuid, "bytes": _is_bytes,
}

def _values_equal(actual: Any, expected: Any) -> bool:
    if expected is None or is_null(expected): return is_null(actual)
    if is_null(actual): return False
    if isinstance(expected, (bytes, bytearray, memoryview)):
        return _is_bytes(actual) and bytes(actual) == bytes(expected)
    if isinstance(expected, str) and not isinstance(actual, str):
        if isinstance(actual, (date, time)):
            iso = actual.isoformat()
            return expected in (iso, iso.replace("T", " "))
        if isinstance(actual, uuid.UUID): return str(actual) == expected.lower()
        return False
    if _is_number(expected) and _is_number(actual):
        try:
            return Decimal(str(actual)) == Decimal(str(expected))
        except ArithmeticError:
            return actual == expected
    return actual == expected

class ColumnAssert:
    def __init__(self, table_name: str, column_name: str, values: List[Any]):
        self.table_name = table_name; self.column_name = column_name; self.values = values

    def _describe(self) -> str:
        return f"column {self.column_name} of table {self.table_name}"

    def _is_category(self, category: str, lenient: bool) -> "ColumnAssert":
        check = _CATEGORIES[category]
        for i, v in enumerate(self.values):
            if is_null(v):
                if lenient: continue
                raise AssertionError(f"Expected {self._describe()} to be {category} but row {i} is null")
            if not check(v):
                raise AssertionError(f"Expected {self._describe()} to be {category} but row {i} "
                                     f"holds {type(v).__name__} {v!r}")
        return self

    def is_boolean(self, lenient: bool = False) -> "ColumnAssert": return self._is_category("boolean", lenient)
    def is_text(self, lenient: bool = False) -> "ColumnAssert": return self._is_category("text", lenient)
    def is_date(self, lenient: bool = False) -> "ColumnAssert": return self._is_category("date", lenient)
    def is_time(self, lenient: bool = False) -> "ColumnAssert": return self._is_category("time", lenient)
    def is_date_time(self, lenient: bool = False) -> "ColumnAssert": return self._is_category("date_time", lenient)
    def is_number(self, lenient: bool = False) -> "ColumnAssert": return self._is_category("number", lenient)
    def is_uuid(self, lenient: bool = False) -> "ColumnAssert": return self._is_category("uuid", lenient)
    def is_bytes(self, lenient: bool = False) -> "ColumnAssert": return self._is_category("bytes", lenient)

    def has_values(self, *expected: Any) -> "ColumnAssert":
        if len(self.values) != len(expected):
            raise AssertionError(f"Expected {self._describe()} to have {len(expected)} values but found {len(self.values)}")
        for i, (a, e) in enumerate(zip(self.values, expected)):
            if not _values_equal(a, e):
                raise AssertionError(f"Expected value at row {i} of {self._describe()} to be {e!r} but was {a!r}")
        return self

class TableAssert:
    """Snapshot of a table's rows, read once with SELECT * over a DB-API connection."""

    def __init__(self, connection, table_name: str):
        self.table_name = table_name
        self.frame = self._load(connection, table_name)

    @staticmethod
    def _load(connection, table_name: str) -> pd.DataFrame:
        cur = connection.cursor()
        try:
            cur.execute(f"SELECT * FROM {table_name}")
            cols = [d[0] for d in (cur.description or [])]
            rows = [tuple(r) for r in cur.fetchall()]
        finally:
            cur.close()
        # object dtype keeps None, bytes and date values as the driver returned them
        return pd.DataFrame(rows, columns=cols, dtype=object)

    def _resolve(self, column_name: str) -> str:
        if column_name in self.frame.columns: return column_name
        matches = [c for c in self.frame.columns if str(c).lower() == column_name.lower()]
        if len(matches) == 1: return matches[0]
        raise AssertionError(f"Column {column_name} not found in table {self.table_name}.")

    def column(self, column_name: str) -> ColumnAssert:
        name = self._resolve(column_name)
        return ColumnAssert(self.table_name, name, self.frame[name].tolist())

    def row_count(self) -> int:
        return len(self.frame.index)

    def has_number_of_rows(self, expected: int) -> "TableAssert":
        if self.row_count() != expected:
            raise AssertionError(f"Expected table {self.table_name} to have {expected} rows but found {self.row_count()}")
        return self
