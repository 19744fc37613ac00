from typing import Any, Dict

from ..types import SinkType
from .base import Adapter

class OracleAdapter(Adapter):
    sink_type = SinkType.ORACLE
    upper_case_identifiers = True
    # the driver raises on close for connections the container already dropped
    suppress_close_errors = True
    paramstyle = "named"
    url_scheme = "oracle"
    default_port = 1521
    columns_sql = (
        "SELECT DATA_TYPE, "
        "CASE WHEN CHAR_USED IS NOT NULL THEN CHAR_LENGTH "
        "WHEN DATA_PRECISION IS NOT NULL THEN DATA_PRECISION ELSE DATA_LENGTH END, "
        "DATA_SCALE FROM ALL_TAB_COLUMNS WHERE TABLE_NAME = :tab_name AND COLUMN_NAME = :col_name"
    )

    def _prepare_driver(self):
        try:
            import oracledb  # type: ignore
            self._driver = "oracledb"; self._connect_fn = oracledb.connect
        except ImportError as e:
            raise RuntimeError("Oracle support requires: pip install 'oracledb'") from e

    def connect_params(self, host, port, user, password, dbname, conn_timeout) -> Dict[str, Any]:
        return dict(user=user, password=password, dsn=f"{host}:{port}/{dbname}",
                    tcp_connect_timeout=float(conn_timeout))
