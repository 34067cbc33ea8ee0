from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from ..common.intervals import Interval, covers, overlaps
from ..core.constants import DEFAULT_FEED_FETCH_WORKERS
from ..workers.model import Worker
from ..workers.repository import WorkerRepository
from .feed import CalendarFeedClient
from .model import OnShiftWorker, ShiftEvent

logger = logging.getLogger(__name__)


class RotaService:
    """Answers "who is working" by reading every worker's calendar feed.

    Feeds are fetched in parallel. A feed that fails is logged and that
    worker counts as not on shift; it never fails the whole request.
    """

    def __init__(
        self,
        workers: WorkerRepository,
        feeds: CalendarFeedClient,
        *,
        max_workers: int = DEFAULT_FEED_FETCH_WORKERS,
    ):
        self._workers = workers
        self._feeds = feeds
        self._max_workers = max(1, int(max_workers))

    def whos_on(self, at: datetime) -> List[OnShiftWorker]:
        """Workers with a shift covering ``at`` (inclusive), in registration order."""
        return self._matching(lambda ev: covers(ev.span, at))

    def on_shift_during(self, start: datetime, end: datetime) -> List[OnShiftWorker]:
        """Workers with a shift overlapping [start, end), sorted by name."""
        window = Interval(start, end)
        found = self._matching(lambda ev: overlaps(ev.span, window))
        return sorted(found, key=lambda w: w.name.casefold())

    def _matching(self, predicate: Callable[[ShiftEvent], bool]) -> List[OnShiftWorker]:
        workers = [w for w in self._workers.list_all() if w.ical_url]
        if not workers:
            return []

        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(workers))) as executor:
            results = list(executor.map(self._events_for, workers))

        return [
            OnShiftWorker(worker_id=w.worker_id, name=w.display_name)
            for w, events in zip(workers, results)
            if events and any(predicate(ev) for ev in events)
        ]

    def _events_for(self, worker: Worker) -> Optional[Sequence[ShiftEvent]]:
        try:
            return self._feeds.fetch_events(worker.ical_url)
        except Exception as e:
            logger.warning("Error reading calendar for worker %s: %s", worker.worker_id, e)
            return None
