from typing import Any, Dict

from ..types import SinkType
from .base import Adapter

class MySQLAdapter(Adapter):
    sink_type = SinkType.MYSQL
    url_scheme = "mysql"
    default_port = 3306
    columns_sql = (
        "SELECT data_type, COALESCE(character_maximum_length, numeric_precision, datetime_precision), numeric_scale "
        "FROM information_schema.columns WHERE table_schema = DATABASE() "
        "AND table_name = :tab_name AND column_name = :col_name"
    )

    def _prepare_driver(self):
        try:
            import pymysql  # type: ignore
            self._driver = "pymysql"; self._connect_fn = pymysql.connect; return
        except ImportError: pass
        try:
            import MySQLdb  # type: ignore
            self._driver = "mysqldb"; self._connect_fn = MySQLdb.connect; return
        except ImportError as e:
            raise RuntimeError("MySQL support requires: pip install 'pymysql' (default) OR pip install 'mysqlclient'") from e

    def connect_params(self, host, port, user, password, dbname, conn_timeout) -> Dict[str, Any]:
        params = dict(host=host, port=port, user=user, charset="utf8mb4", autocommit=True,
                      connect_timeout=int(max(1, round(conn_timeout))))
        if self._driver == "mysqldb":
            params.update(passwd=password, db=dbname)
        else:
            params.update(password=password, database=dbname)
        return params
