from typing import Any, Dict

from ..types import SinkType
from .base import Adapter

class PostgresAdapter(Adapter):
    sink_type = SinkType.POSTGRES
    url_scheme = "postgresql"
    default_port = 5432
    # udt_name reports the short type names (varchar, int4, numeric) rather than the SQL standard spelling
    columns_sql = (
        "SELECT udt_name, COALESCE(character_maximum_length, numeric_precision, datetime_precision), numeric_scale "
        "FROM information_schema.columns WHERE table_name = :tab_name AND column_name = :col_name"
    )

    def _prepare_driver(self):
        try:
            import psycopg  # type: ignore
            self._driver = "psycopg"; self._connect_fn = psycopg.connect; return
        except ImportError: pass
        try:
            import psycopg2  # type: ignore
            self._driver = "psycopg2"; self._connect_fn = psycopg2.connect; return
        except ImportError as e:
            raise RuntimeError("Install 'psycopg' or 'psycopg2' for Postgres.") from e

    def connect_params(self, host, port, user, password, dbname, conn_timeout) -> Dict[str, Any]:
        return dict(
            host=host, port=port, user=user, password=password, dbname=dbname,
            connect_timeout=int(max(1, round(conn_timeout))), application_name="sinkcheck"
        )
