from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from ..common.datetime_utils import (
    isoformat_local,
    minute_of_day,
    minutes_on,
    now_local,
)
from ..common.validators import require_bool, require_date, require_id, require_prayer_key
from ..core.constants import LAST_MINUTE_OF_DAY
from ..core.enums import PrayerKey
from ..core.exceptions import ValidationError
from ..shifts.service import RotaService
from ..workers.repository import WorkerRepository
from .model import CurrentPrayer, PrayerSnapshot, PrayerWorker, ResolvedWindow
from .repository import PrayerStatusRepository
from .times_client import PrayerTimesClient
from .windows import resolve_window, windows_for

logger = logging.getLogger(__name__)


def window_bounds(resolved: ResolvedWindow, today: date, *, fajr: int) -> Tuple[datetime, datetime, date]:
    """Datetime bounds of the active window and the date its status is recorded under.

    An open-ended window is clamped to 23:59. A carried-over Isha runs from
    yesterday's Isha until today's Fajr and belongs to yesterday.
    """
    w = resolved.window
    if resolved.carried_over:
        yesterday = today - timedelta(days=1)
        return minutes_on(yesterday, w.start), minutes_on(today, fajr), yesterday

    end = min(w.end, LAST_MINUTE_OF_DAY) if w.open_ended else w.end
    return minutes_on(today, w.start), minutes_on(today, end), today


class PrayerService:
    """Use case: which prayer is current, who on shift has prayed it."""

    def __init__(
        self,
        times: PrayerTimesClient,
        rota: RotaService,
        statuses: PrayerStatusRepository,
        workers: WorkerRepository,
    ):
        self._times = times
        self._rota = rota
        self._statuses = statuses
        self._workers = workers

    def current_prayer(self, *, now: Optional[datetime] = None) -> PrayerSnapshot:
        now = now or now_local()
        times = self._times.fetch_today()
        windows = windows_for(times)

        resolved = resolve_window(windows, minute_of_day(now))
        fajr = windows[0].start
        start, end, prayer_date = window_bounds(resolved, now.date(), fajr=fajr)
        key = resolved.window.key

        on_shift = self._rota.on_shift_during(start, end)
        statuses = self._statuses.statuses_for(
            prayer_date=prayer_date,
            prayer_key=key,
            worker_ids=[w.worker_id for w in on_shift],
        )

        current = CurrentPrayer(
            key=key,
            label=resolved.window.label,
            time=times.time_for(key),
            window_start=start.strftime("%H:%M"),
            window_end=end.strftime("%H:%M"),
            prayer_date=prayer_date,
        )
        logger.debug("Current prayer %s (%s-%s), %d on shift", key.value, current.window_start, current.window_end, len(on_shift))

        return PrayerSnapshot(
            at=isoformat_local(now),
            times=times,
            current=current,
            on_shift=[
                PrayerWorker(worker_id=w.worker_id, name=w.name, has_prayed=statuses.get(w.worker_id, False))
                for w in on_shift
            ],
        )

    def set_status(self, *, worker_id, prayer_key, has_prayed, prayer_date=None, now: Optional[datetime] = None) -> None:
        if not worker_id or not prayer_key or not isinstance(has_prayed, bool):
            raise ValidationError("workerId, prayerKey and hasPrayed are required")

        wid = require_id(worker_id, "workerId")
        key = require_prayer_key(prayer_key)
        prayed = require_bool(has_prayed, "hasPrayed")
        day = require_date(prayer_date, "prayerDate") if prayer_date else None

        if not self._workers.get_by_id(wid):
            raise ValidationError("Worker does not exist")

        if day is None:
            day = self.status_date(key, now or now_local())

        self._statuses.upsert(worker_id=wid, prayer_date=day, prayer_key=key, has_prayed=prayed)
        logger.info("Worker %s %s %s on %s", wid, "prayed" if prayed else "has not prayed", key.value, day)

    def status_date(self, key: PrayerKey, now: datetime) -> date:
        """Date a status for ``key`` posted at ``now`` is stored under.

        Agrees with the date ``current_prayer`` reads: Isha marked before
        Fajr belongs to the previous night.
        """
        if key != PrayerKey.ISHA:
            return now.date()
        resolved = resolve_window(windows_for(self._times.fetch_today()), minute_of_day(now))
        if resolved.carried_over:
            return now.date() - timedelta(days=1)
        return now.date()
