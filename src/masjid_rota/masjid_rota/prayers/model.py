from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from ..common.intervals import Interval
from ..core.constants import MINUTES_PER_DAY
from ..core.enums import PrayerKey


@dataclass(frozen=True)
class PrayerTimes:
    """Today's published times as 'HH:MM' strings (venue local time)."""

    fajr: str
    sunrise: str
    dhuhr: str
    asr: str
    maghrib: str
    isha: str
    asr2: Optional[str] = None

    def time_for(self, key: PrayerKey) -> str:
        return getattr(self, key.value)

    def to_dict(self) -> dict:
        return {
            "fajr": self.fajr,
            "dhuhr": self.dhuhr,
            "asr": self.asr,
            "asr2": self.asr2,
            "maghrib": self.maghrib,
            "isha": self.isha,
            "sunrise": self.sunrise,
        }


@dataclass(frozen=True)
class PrayerWindow:
    key: PrayerKey
    label: str
    start: int
    end: int

    @property
    def span(self) -> Interval:
        return Interval(self.start, self.end)

    @property
    def open_ended(self) -> bool:
        """True for the window that runs to the end of the day (Isha)."""
        return self.end >= MINUTES_PER_DAY


@dataclass(frozen=True)
class ResolvedWindow:
    window: PrayerWindow
    # Before Fajr the previous night's Isha is still in effect.
    carried_over: bool = False


@dataclass(frozen=True)
class PrayerWorker:
    worker_id: int
    name: str
    has_prayed: bool

    def to_dict(self) -> dict:
        return {"id": self.worker_id, "name": self.name, "hasPrayed": self.has_prayed}


@dataclass(frozen=True)
class CurrentPrayer:
    key: PrayerKey
    label: str
    time: str
    window_start: str
    window_end: str
    prayer_date: date

    def to_dict(self) -> dict:
        return {
            "key": self.key.value,
            "label": self.label,
            "time": self.time,
            "windowStart": self.window_start,
            "windowEnd": self.window_end,
            "date": self.prayer_date.isoformat(),
        }


@dataclass(frozen=True)
class PrayerSnapshot:
    at: str
    times: PrayerTimes
    current: CurrentPrayer
    on_shift: List[PrayerWorker] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "at": self.at,
            "times": self.times.to_dict(),
            "currentPrayer": self.current.to_dict(),
            "onShift": [w.to_dict() for w in self.on_shift],
        }
