from typing import Any, Dict

from ..types import SinkType
from .base import Adapter

class Db2Adapter(Adapter):
    sink_type = SinkType.DB2
    upper_case_identifiers = True
    paramstyle = "qmark"
    url_scheme = "db2"
    default_port = 50000
    columns_sql = "SELECT TYPENAME, LENGTH, SCALE FROM SYSCAT.COLUMNS WHERE TABNAME = :tab_name AND COLNAME = :col_name"

    def _prepare_driver(self):
        try:
            import ibm_db_dbi  # type: ignore
            self._driver = "ibm_db_dbi"; self._connect_fn = ibm_db_dbi.connect
        except ImportError as e:
            raise RuntimeError("DB2 support requires: pip install 'ibm_db'") from e

    def connect_params(self, host, port, user, password, dbname, conn_timeout) -> Dict[str, Any]:
        dsn = (f"DATABASE={dbname};HOSTNAME={host};PORT={port};PROTOCOL=TCPIP;"
               f"UID={user};PWD={password};CONNECTTIMEOUT={int(max(1, round(conn_timeout)))};")
        return dict(dsn=dsn)
