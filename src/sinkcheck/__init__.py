from .adapters import ADAPTERS, TEST_DATABASE, Adapter, get_adapter
from .exceptions import ColumnNotFoundError, SinkClosedError, SinkError, UnsupportedSinkError
from .handle import DatabaseHandle, DriverHandle
from .sink import Sink
from .table import ColumnAssert, TableAssert
from .types import ColumnInfo, SinkType, ValueType

__all__ = [
    "Sink", "SinkType", "ValueType", "ColumnInfo", "DatabaseHandle", "DriverHandle",
    "TableAssert", "ColumnAssert", "Adapter", "ADAPTERS", "TEST_DATABASE", "get_adapter",
    "SinkError", "SinkClosedError", "UnsupportedSinkError", "ColumnNotFoundError",
    "enable_connect_prints", "enable_sql_echo",
]

def enable_connect_prints(sink):
    orig = sink._open
    def wrapper():
        print(f"[sinkcheck] Opening {sink.type.name} connection to {sink.url}.", flush=True)
        return orig()
    sink._open = wrapper
    return orig

def enable_sql_echo(sink):
    orig = sink._run
    def wrapper(cur, sql):
        print(f"\n[sinkcheck][{sink.type.name}][SQL]", sql, flush=True)
        return orig(cur, sql)
    sink._run = wrapper
    return orig
