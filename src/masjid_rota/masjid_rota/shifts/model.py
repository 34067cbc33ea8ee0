from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.intervals import Interval


@dataclass(frozen=True)
class ShiftEvent:
    """One shift from a worker's calendar feed, in naive local time."""

    start: datetime
    end: datetime
    summary: Optional[str] = None

    @property
    def span(self) -> Interval:
        return Interval(self.start, self.end)


@dataclass(frozen=True)
class OnShiftWorker:
    worker_id: int
    name: str

    def to_dict(self) -> dict:
        return {"id": self.worker_id, "name": self.name}
