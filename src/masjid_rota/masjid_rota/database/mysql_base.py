from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime, time, timedelta
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_date, parse_time_of_day
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def placeholders(count: int) -> str:
    """'%s,%s,...' for an IN clause."""
    return ",".join(["%s"] * count)


def normalize_mysql_time(value: Any) -> Optional[time]:
    """TIME columns come back as time, timedelta or str depending on the connector."""
    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        return (datetime.min + value % timedelta(days=1)).time()
    if isinstance(value, str):
        return parse_time_of_day(value)
    raise TypeError(f"Unsupported TIME value: {value!r}")


def normalize_mysql_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value))
