from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import List

from ..common.datetime_utils import format_time_of_day
from ..common.intervals import Interval


@dataclass(frozen=True)
class BreakRecord:
    """A worker's single break for one day, unique per (worker, date)."""

    break_id: int
    worker_id: int
    break_date: date
    start_time: time
    end_time: time
    worker_name: str = ""

    @property
    def span(self) -> Interval:
        return Interval(self.start_time, self.end_time)

    def to_dict(self) -> dict:
        return {
            "id": self.break_id,
            "worker_id": self.worker_id,
            "worker_name": self.worker_name,
            "break_date": self.break_date.isoformat(),
            "start_time": format_time_of_day(self.start_time),
            "end_time": format_time_of_day(self.end_time),
        }


@dataclass(frozen=True)
class BreakWithOverlaps:
    record: BreakRecord
    overlaps_with: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        out = self.record.to_dict()
        out["overlaps_with"] = list(self.overlaps_with)
        return out
