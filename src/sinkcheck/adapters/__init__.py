from typing import Dict

from ..exceptions import UnsupportedSinkError
from ..types import SinkType
from .base import Adapter, TEST_DATABASE
from .db2 import Db2Adapter
from .mysql import MySQLAdapter
from .oracle import OracleAdapter
from .postgres import PostgresAdapter
from .sqlserver import SqlServerAdapter

ADAPTERS: Dict[SinkType, Adapter] = {
    SinkType.MYSQL: MySQLAdapter(),
    SinkType.POSTGRES: PostgresAdapter(),
    SinkType.SQLSERVER: SqlServerAdapter(),
    SinkType.ORACLE: OracleAdapter(),
    SinkType.DB2: Db2Adapter(),
}

def get_adapter(sink_type: SinkType) -> Adapter:
    try:
        return ADAPTERS[sink_type]
    except KeyError:
        raise UnsupportedSinkError(f"sink type '{sink_type}' not supported.") from None

__all__ = ["Adapter", "ADAPTERS", "TEST_DATABASE", "get_adapter",
           "PostgresAdapter", "MySQLAdapter", "SqlServerAdapter", "OracleAdapter", "Db2Adapter"]
