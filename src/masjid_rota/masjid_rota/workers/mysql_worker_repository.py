from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import Worker
from .repository import WorkerRepository

_COLUMNS = "worker_id, display_name, ical_url, created_at"


def _row_to_worker(r: dict) -> Worker:
    return Worker(
        worker_id=int(r["worker_id"]),
        display_name=r["display_name"],
        ical_url=r.get("ical_url") or "",
        created_at=r["created_at"],
    )


class MySQLWorkerRepository(WorkerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM workers ORDER BY created_at ASC, worker_id ASC")
            return [_row_to_worker(r) for r in cur.fetchall()]

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM workers WHERE worker_id=%s", (int(worker_id),))
            r = cur.fetchone()
            return _row_to_worker(r) if r else None

    def create(self, *, display_name: str, ical_url: str) -> Worker:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO workers(display_name, ical_url) VALUES(%s,%s)",
                (display_name, ical_url),
            )
            worker_id = int(cur.lastrowid)
            cur.execute(f"SELECT {_COLUMNS} FROM workers WHERE worker_id=%s", (worker_id,))
            return _row_to_worker(cur.fetchone())
