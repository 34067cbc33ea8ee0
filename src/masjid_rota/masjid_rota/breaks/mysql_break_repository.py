from __future__ import annotations

from datetime import date, time
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, normalize_mysql_date, normalize_mysql_time
from .model import BreakRecord
from .repository import BreakRepository

_SELECT = """
    SELECT b.break_id, b.worker_id, b.break_date, b.start_time, b.end_time,
           COALESCE(w.display_name, '') AS display_name
    FROM breaks b
    LEFT JOIN workers w ON w.worker_id = b.worker_id
"""


def _row_to_break(r: dict) -> BreakRecord:
    return BreakRecord(
        break_id=int(r["break_id"]),
        worker_id=int(r["worker_id"]),
        break_date=normalize_mysql_date(r["break_date"]),
        start_time=normalize_mysql_time(r["start_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
        worker_name=r.get("display_name") or "",
    )


class MySQLBreakRepository(BreakRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, *, worker_id: int, break_date: date, start_time: time, end_time: time) -> BreakRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO breaks(worker_id, break_date, start_time, end_time)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE start_time=VALUES(start_time), end_time=VALUES(end_time)
                """,
                (int(worker_id), break_date, start_time, end_time),
            )
            # lastrowid is 0 on the update path, so re-read by the unique key.
            cur.execute(
                _SELECT + " WHERE b.worker_id=%s AND b.break_date=%s",
                (int(worker_id), break_date),
            )
            return _row_to_break(cur.fetchone())

    def list_for_date(self, break_date: date) -> Sequence[BreakRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE b.break_date=%s ORDER BY b.start_time ASC, b.break_id ASC",
                (break_date,),
            )
            return [_row_to_break(r) for r in cur.fetchall()]

    def delete(self, *, break_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM breaks WHERE break_id=%s", (int(break_id),))
            return cur.rowcount > 0
