"""Prayer window resolution over integer minutes of the day (0-1439)."""
from __future__ import annotations

from typing import List, Sequence

from ..common.datetime_utils import to_minutes
from ..common.intervals import contains
from ..core.constants import MINUTES_PER_DAY
from ..core.enums import PrayerKey
from .model import PrayerTimes, PrayerWindow, ResolvedWindow


def build_windows(*, fajr: int, sunrise: int, dhuhr: int, asr: int, maghrib: int, isha: int) -> List[PrayerWindow]:
    bounds = [
        (PrayerKey.FAJR, fajr, sunrise),
        (PrayerKey.DHUHR, dhuhr, asr),
        (PrayerKey.ASR, asr, maghrib),
        (PrayerKey.MAGHRIB, maghrib, isha),
        (PrayerKey.ISHA, isha, MINUTES_PER_DAY),
    ]
    return [PrayerWindow(key=k, label=k.label, start=s, end=e) for k, s, e in bounds]


def windows_for(times: PrayerTimes) -> List[PrayerWindow]:
    return build_windows(
        fajr=to_minutes(times.fajr),
        sunrise=to_minutes(times.sunrise),
        dhuhr=to_minutes(times.dhuhr),
        asr=to_minutes(times.asr),
        maghrib=to_minutes(times.maghrib),
        isha=to_minutes(times.isha),
    )


def resolve_window(windows: Sequence[PrayerWindow], now: int) -> ResolvedWindow:
    """Window active at minute ``now``.

    Half-open bounds, so at a boundary the later window wins. Before Fajr the
    Isha window is returned with ``carried_over`` set; any other gap (between
    sunrise and Dhuhr) falls back to the first window.
    """
    if not windows:
        raise ValueError("No prayer windows")
    if not 0 <= now < MINUTES_PER_DAY:
        raise ValueError(f"Minute of day out of range: {now}")

    for w in windows:
        if contains(w.span, now, closed_end=w.open_ended):
            return ResolvedWindow(window=w)

    first = windows[0]
    if now < first.start:
        isha = next((w for w in windows if w.key == PrayerKey.ISHA), None)
        if isha is not None:
            return ResolvedWindow(window=isha, carried_over=True)
    return ResolvedWindow(window=first)
