from typing import Any, Dict

from ..types import SinkType
from .base import Adapter, TEST_DATABASE

class SqlServerAdapter(Adapter):
    """SQL Server containers cannot pick the initial database at connect time,
    so the working database is selected twice: in the URL and with USE after connecting."""
    sink_type = SinkType.SQLSERVER
    url_suffix = f";databaseName={TEST_DATABASE}"
    paramstyle = "qmark"
    url_scheme = "sqlserver"
    default_port = 1433

    def __init__(self, odbc_driver: str = "ODBC Driver 18 for SQL Server"):
        super().__init__()
        self.odbc_driver = odbc_driver

    def post_connect(self, conn) -> None:
        cur = conn.cursor()
        try:
            cur.execute(f"USE {TEST_DATABASE}")
        finally:
            cur.close()

    def native_url(self, host: str, port: int, dbname: str) -> str:
        return f"{self.url_scheme}://{host}:{port}"

    def _prepare_driver(self):
        try:
            import pyodbc  # type: ignore
            self._driver = "pyodbc"; self._connect_fn = pyodbc.connect
        except ImportError as e:
            raise RuntimeError("SQL Server support requires: pip install 'pyodbc' and an ODBC driver.") from e

    def connect_params(self, host, port, user, password, dbname, conn_timeout) -> Dict[str, Any]:
        parts = [f"DRIVER={{{self.odbc_driver}}}", f"SERVER={host},{port}", f"UID={user}", f"PWD={password}",
                 "TrustServerCertificate=yes"]
        if dbname: parts.append(f"DATABASE={dbname}")
        return dict(dsn=";".join(parts) + ";")

    def connect(self, host, port, user, password, dbname, conn_timeout=10.0):
        if self._connect_fn is None: self._prepare_driver()
        dsn = self.connect_params(host, port, user, password, dbname, conn_timeout)["dsn"]
        return self._connect_fn(dsn, timeout=int(max(1, round(conn_timeout))))
