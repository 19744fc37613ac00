import uuid
from datetime import date, datetime, time
from decimal import Decimal

import pytest

from sinkcheck import ColumnAssert, TableAssert


def column(*values):
    return ColumnAssert("t", "c", list(values))


@pytest.mark.parametrize("check,good,bad", [
    ("is_boolean", True, 1),
    ("is_text", "abc", b"abc"),
    ("is_date", date(2024, 1, 2), datetime(2024, 1, 2, 3, 4)),
    ("is_time", time(12, 30), "12:30"),
    ("is_date_time", datetime(2024, 1, 2, 3, 4), date(2024, 1, 2)),
    ("is_number", Decimal("1.50"), True),
    ("is_uuid", uuid.UUID(int=1), str(uuid.UUID(int=1))),
    ("is_bytes", memoryview(b"\x00"), "00"),
])
def test_value_categories(check, good, bad):
    getattr(column(good), check)()
    with pytest.raises(AssertionError):
        getattr(column(good, bad), check)()


def test_lenient_accepts_nulls_only():
    column(None, "x").is_text(lenient=True)
    with pytest.raises(AssertionError):
        column(None, 1).is_text(lenient=True)


def test_has_values_compares_temporal_values_with_iso_strings():
    column(date(2024, 1, 2), datetime(2024, 1, 2, 3, 4, 5), time(1, 2)).has_values(
        "2024-01-02", "2024-01-02 03:04:05", "01:02:00")
    column(datetime(2024, 1, 2, 3, 4, 5)).has_values("2024-01-02T03:04:05")


def test_has_values_compares_uuid_and_bytes():
    u = uuid.uuid4()
    column(u, bytearray(b"ab")).has_values(str(u).upper(), b"ab")
    with pytest.raises(AssertionError):
        column(b"ab").has_values(b"ba")


def test_has_values_numbers_by_value():
    column(Decimal("2.50"), 3).has_values(2.5, Decimal("3.0"))
    with pytest.raises(AssertionError):
        column(2.5).has_values("2.5")


def test_has_values_null_never_equals_a_value():
    with pytest.raises(AssertionError):
        column(None).has_values(0)
    with pytest.raises(AssertionError):
        column(0).has_values(None)


def test_table_assert_reads_rows(sqlite_handle):
    table = TableAssert(sqlite_handle.connection, "orders")
    assert table.row_count() == 2
    table.has_number_of_rows(2)
    with pytest.raises(AssertionError, match="3 rows"):
        table.has_number_of_rows(3)
    assert table.column("NAME").values == ["first", None]


def test_table_assert_missing_column(sqlite_handle):
    table = TableAssert(sqlite_handle.connection, "orders")
    with pytest.raises(AssertionError, match="Column missing not found in table orders"):
        table.column("missing")


def test_table_assert_on_empty_table(sqlite_handle):
    table = TableAssert(sqlite_handle.connection, "empty_table")
    table.has_number_of_rows(0)
    column = table.column("id").is_number().has_values()
    assert column.values == []
