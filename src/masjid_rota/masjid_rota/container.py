from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from .breaks.mysql_break_repository import MySQLBreakRepository
from .breaks.service import BreakService
from .core.constants import DEFAULT_FEED_FETCH_WORKERS, DEFAULT_HTTP_TIMEOUT_SECONDS, PRAYER_TIMES_URL
from .database.connection import DBConfig, DatabaseConnection
from .prayers.mysql_prayer_status_repository import MySQLPrayerStatusRepository
from .prayers.service import PrayerService
from .prayers.times_client import PrayerTimesClient
from .shifts.feed import CalendarFeedClient
from .shifts.service import RotaService
from .workers.mysql_worker_repository import MySQLWorkerRepository
from .workers.service import WorkerService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    worker_service: WorkerService
    rota_service: RotaService
    break_service: BreakService
    prayer_service: PrayerService


def build_container(
    *,
    db_config: dict,
    prayer_times_key: Optional[str] = None,
    prayer_times_url: str = PRAYER_TIMES_URL,
    http_timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    feed_workers: int = DEFAULT_FEED_FETCH_WORKERS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    http = requests.Session()

    workers_repo = MySQLWorkerRepository(conn)
    breaks_repo = MySQLBreakRepository(conn)
    statuses_repo = MySQLPrayerStatusRepository(conn)

    rota_service = RotaService(
        workers_repo,
        CalendarFeedClient(http, timeout=http_timeout),
        max_workers=feed_workers,
    )
    prayer_service = PrayerService(
        PrayerTimesClient(prayer_times_key, url=prayer_times_url, session=http, timeout=http_timeout),
        rota_service,
        statuses_repo,
        workers_repo,
    )

    return Container(
        conn=conn,
        worker_service=WorkerService(workers_repo),
        rota_service=rota_service,
        break_service=BreakService(breaks_repo, workers_repo),
        prayer_service=prayer_service,
    )
