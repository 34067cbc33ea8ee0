from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_feed_url, require_non_empty
from .model import Worker
from .repository import WorkerRepository

logger = logging.getLogger(__name__)


class WorkerService:
    """Use case: register workers and list them without their feed URLs."""

    def __init__(self, workers: WorkerRepository):
        self._workers = workers

    def list_workers(self) -> Sequence[Worker]:
        return self._workers.list_all()

    def create_worker(self, *, name, ical_url) -> Worker:
        display_name = require_non_empty(name, "name")
        feed_url = require_feed_url(ical_url, "icalUrl")

        worker = self._workers.create(display_name=display_name, ical_url=feed_url)
        logger.info("Registered worker %s (%s)", worker.worker_id, worker.display_name)
        return worker
