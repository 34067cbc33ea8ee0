from __future__ import annotations

from enum import Enum


class PrayerKey(str, Enum):
    """The five daily prayers, in the order their windows occur."""

    FAJR = "fajr"
    DHUHR = "dhuhr"
    ASR = "asr"
    MAGHRIB = "maghrib"
    ISHA = "isha"

    @property
    def label(self) -> str:
        return self.value.capitalize()
