from __future__ import annotations

import logging
from typing import List

from ..common.intervals import overlap_map
from ..common.validators import require_date, require_id, require_time
from ..core.exceptions import ValidationError
from ..workers.repository import WorkerRepository
from .model import BreakRecord, BreakWithOverlaps
from .repository import BreakRepository

logger = logging.getLogger(__name__)


class BreakService:
    """Use case: log one break per worker per day and show who overlaps."""

    def __init__(self, breaks: BreakRepository, workers: WorkerRepository):
        self._breaks = breaks
        self._workers = workers

    def save_break(self, *, worker_id, break_date, start_time, end_time) -> BreakRecord:
        if not worker_id or not break_date or not start_time or not end_time:
            raise ValidationError("workerId, breakDate, startTime and endTime are required")

        wid = require_id(worker_id, "workerId")
        day = require_date(break_date, "breakDate")
        start = require_time(start_time, "startTime")
        end = require_time(end_time, "endTime")
        if end <= start:
            raise ValidationError("endTime must be after startTime")

        if not self._workers.get_by_id(wid):
            raise ValidationError("Worker does not exist")

        record = self._breaks.upsert(worker_id=wid, break_date=day, start_time=start, end_time=end)
        logger.info("Saved break %s for worker %s on %s", record.break_id, wid, day)
        return record

    def list_breaks(self, break_date) -> List[BreakWithOverlaps]:
        if not break_date:
            raise ValidationError("Missing date parameter (YYYY-MM-DD)")
        day = require_date(break_date, "date")

        records = list(self._breaks.list_for_date(day))
        return [
            BreakWithOverlaps(record=rec, overlaps_with=sorted(o.worker_name or "Unknown" for o in others))
            for rec, others in overlap_map(records, lambda r: r.span)
        ]

    def delete_break(self, break_id) -> None:
        if not break_id:
            raise ValidationError("id query parameter is required")
        bid = require_id(break_id, "id")

        if not self._breaks.delete(break_id=bid):
            logger.info("Break %s was already gone", bid)
