import re
from typing import Any, Dict, Iterable, List, Tuple

import pandas as pd

_NAMED = re.compile(r":([a-zA-Z_]\w*)")

def _escape_percent_literals_after_named(sql: str) -> str:
    """Escape % literals for DB-API 'pyformat' while keeping %(name)s placeholders intact."""
    placeholders = {}
    def hold(m: re.Match):
        key = f"__PH_{len(placeholders)}__"
        placeholders[key] = m.group(0)
        return key
    temp = re.sub(r"%\([a-zA-Z_]\w*\)s", hold, sql)
    temp = temp.replace('%', '%%')
    for k, v in placeholders.items():
        temp = temp.replace(k, v)
    return temp

def to_pyformat(sql: str) -> str:
    sql = _NAMED.sub(lambda m: f"%({m.group(1)})s", sql.replace("::", "\x00")).replace("\x00", "::")
    return _escape_percent_literals_after_named(sql)

def to_qmark(sql: str, params: Dict[str, Any]) -> Tuple[str, List[Any]]:
    """Rewrite :name placeholders as ? and return the positional parameter list."""
    ordered: List[Any] = []
    def repl(m: re.Match) -> str:
        ordered.append(params[m.group(1)])
        return "?"
    sql = _NAMED.sub(repl, sql.replace("::", "\x00")).replace("\x00", "::")
    return sql, ordered

def bind(sql: str, params: Dict[str, Any], paramstyle: str):
    """Render :name SQL for a driver paramstyle; returns (sql, params) ready for cursor.execute."""
    if paramstyle == "named": return sql, dict(params)
    if paramstyle == "pyformat": return to_pyformat(sql), dict(params)
    if paramstyle == "qmark": return to_qmark(sql, params)
    raise ValueError(f"paramstyle '{paramstyle}' not supported.")

def is_null(value: Any) -> bool:
    if value is None: return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False

def is_any_value_null(values: Iterable[Any]) -> bool:
    return any(is_null(v) for v in values)
