from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import UnsupportedSinkError

class SinkType(Enum):
    MYSQL = "mysql"
    POSTGRES = "postgres"
    SQLSERVER = "sqlserver"
    ORACLE = "oracle"
    DB2 = "db2"

    def is_(self, *types: "SinkType") -> bool:
        return self in types

    @classmethod
    def parse(cls, name: str) -> "SinkType":
        key = (name or "").strip().lower()
        aliases = {"postgresql": "postgres", "mssql": "sqlserver", "mariadb": "mysql"}
        key = aliases.get(key, key)
        for t in cls:
            if t.value == key: return t
        raise UnsupportedSinkError(f"sink type '{name}' not supported.")

class ValueType(Enum):
    BOOLEAN = "boolean"
    TEXT = "text"
    DATE = "date"
    TIME = "time"
    DATE_TIME = "date_time"
    NUMBER = "number"
    UUID = "uuid"
    BYTES = "bytes"

@dataclass(frozen=True)
class ColumnInfo:
    table_name: str
    column_name: str
    type_name: str
    column_size: Optional[int] = None
    decimal_digits: Optional[int] = None
