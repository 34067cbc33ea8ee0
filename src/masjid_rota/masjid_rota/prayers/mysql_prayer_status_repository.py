from __future__ import annotations

from datetime import date
from typing import Dict, Sequence

from ..core.enums import PrayerKey
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, placeholders
from .repository import PrayerStatusRepository


class MySQLPrayerStatusRepository(PrayerStatusRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, *, worker_id: int, prayer_date: date, prayer_key: PrayerKey, has_prayed: bool) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO prayer_statuses(worker_id, prayer_date, prayer_name, has_prayed)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE has_prayed=VALUES(has_prayed)
                """,
                (int(worker_id), prayer_date, prayer_key.value, 1 if has_prayed else 0),
            )

    def statuses_for(self, *, prayer_date: date, prayer_key: PrayerKey, worker_ids: Sequence[int]) -> Dict[int, bool]:
        if not worker_ids:
            return {}

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT worker_id, has_prayed
                FROM prayer_statuses
                WHERE prayer_date=%s AND prayer_name=%s AND worker_id IN ({placeholders(len(worker_ids))})
                """,
                (prayer_date, prayer_key.value, *[int(w) for w in worker_ids]),
            )
            return {int(r["worker_id"]): bool(r["has_prayed"]) for r in cur.fetchall()}
