import sys
import traceback
from typing import Any, Callable, Dict, Optional

from ..types import ColumnInfo, SinkType
from ..utils import bind

TEST_DATABASE = "testDB"

INFORMATION_SCHEMA_COLUMNS = (
    "SELECT data_type, COALESCE(character_maximum_length, numeric_precision, datetime_precision), numeric_scale "
    "FROM information_schema.columns WHERE table_name = :tab_name AND column_name = :col_name"
)

def _to_int(v: Any) -> Optional[int]:
    if v is None: return None
    try: return int(v)
    except (TypeError, ValueError): return None

class Adapter:
    """Vendor capabilities consulted by Sink: casing, URL, post-connect hook, close policy, catalog query.

    Subclasses override the class attributes; behaviour that cannot be expressed as data
    (post_connect, driver discovery, connect parameters) is overridden as methods.
    """
    sink_type: Optional[SinkType] = None
    upper_case_identifiers: bool = False
    url_suffix: str = ""
    suppress_close_errors: bool = False
    paramstyle: str = "pyformat"
    url_scheme: str = ""
    default_port: int = 0
    columns_sql: str = INFORMATION_SCHEMA_COLUMNS

    def __init__(self):
        self._driver: Optional[str] = None; self._connect_fn: Optional[Callable] = None

    def format_identifier(self, name: str) -> str:
        return name.upper() if self.upper_case_identifiers else name

    def connection_url(self, native_url: str) -> str:
        return native_url + self.url_suffix

    def post_connect(self, conn) -> None:
        pass

    def close(self, conn) -> None:
        try:
            conn.close()
        except Exception as e:
            if not self.suppress_close_errors: raise
            print(f"[sinkcheck][warn] closing {self.sink_type.name} connection failed ({type(e).__name__}: {e}). Ignored.",
                  file=sys.stderr, flush=True)
            traceback.print_exc()

    def is_closed(self, conn) -> bool:
        # psycopg and pyodbc expose .closed, pymysql and MySQLdb expose .open
        closed = getattr(conn, "closed", None)
        if closed is not None and not callable(closed): return bool(closed)
        is_open = getattr(conn, "open", None)
        if is_open is not None and not callable(is_open): return not is_open
        return False

    def is_autocommit(self, conn) -> bool:
        getter = getattr(conn, "get_autocommit", None)
        if callable(getter): return bool(getter())
        value = getattr(conn, "autocommit", False)
        return value is True

    def fetch_column(self, conn, table_name: str, column_name: str) -> Optional[ColumnInfo]:
        sql, params = bind(self.columns_sql, {"tab_name": table_name, "col_name": column_name}, self.paramstyle)
        cur = conn.cursor()
        try:
            cur.execute(sql, params)
            row = cur.fetchone()
        finally:
            cur.close()
        if row is None: return None
        return ColumnInfo(table_name, column_name, str(row[0]).strip(), _to_int(row[1]), _to_int(row[2]))

    # DriverHandle support

    def native_url(self, host: str, port: int, dbname: str) -> str:
        return f"{self.url_scheme}://{host}:{port}/{dbname}"

    def _prepare_driver(self) -> None:
        raise NotImplementedError

    def connect_params(self, host: str, port: int, user: str, password: str, dbname: str, conn_timeout: float) -> Dict[str, Any]:
        raise NotImplementedError

    def connect(self, host: str, port: int, user: str, password: str, dbname: str, conn_timeout: float = 10.0):
        if self._connect_fn is None: self._prepare_driver()
        return self._connect_fn(**self.connect_params(host, port, user, password, dbname, conn_timeout))
