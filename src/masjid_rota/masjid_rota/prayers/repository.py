from __future__ import annotations

from datetime import date
from typing import Dict, Protocol, Sequence

from ..core.enums import PrayerKey


class PrayerStatusRepository(Protocol):
    def upsert(self, *, worker_id: int, prayer_date: date, prayer_key: PrayerKey, has_prayed: bool) -> None:
        raise NotImplementedError

    def statuses_for(self, *, prayer_date: date, prayer_key: PrayerKey, worker_ids: Sequence[int]) -> Dict[int, bool]:
        """worker_id -> has_prayed; workers without a row are absent."""

        raise NotImplementedError
