from __future__ import annotations

from datetime import date, time
from typing import Protocol, Sequence

from .model import BreakRecord


class BreakRepository(Protocol):
    def upsert(self, *, worker_id: int, break_date: date, start_time: time, end_time: time) -> BreakRecord:
        """Create or replace the worker's break for that date.

        Returns the stored record.
        """

        raise NotImplementedError

    def list_for_date(self, break_date: date) -> Sequence[BreakRecord]:
        """Breaks for a day ordered by start time, with worker names."""

        raise NotImplementedError

    def delete(self, *, break_id: int) -> bool:
        raise NotImplementedError
