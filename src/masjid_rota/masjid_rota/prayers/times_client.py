from __future__ import annotations

import logging
from typing import Optional

import requests

from ..core.constants import DEFAULT_HTTP_TIMEOUT_SECONDS, PRAYER_TIMES_URL
from ..core.exceptions import ConfigurationError, UpstreamError
from .model import PrayerTimes

logger = logging.getLogger(__name__)


class PrayerTimesClient:
    """Today's times from the London Prayer Times API.

    Sample payload::

        {"fajr": "02:51", "sunrise": "04:48", "dhuhr": "13:10", "asr": "17:27",
         "asr_2": "17:57", "magrib": "21:24", "isha": "23:00", ...}
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        url: str = PRAYER_TIMES_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ):
        self._api_key = api_key
        self._url = url
        self._session = session or requests.Session()
        self._timeout = timeout

    def fetch_today(self) -> PrayerTimes:
        if not self._api_key:
            raise ConfigurationError("LONDON_PRAYER_TIMES_KEY is not set")

        params = {"format": "json", "24hours": "true", "key": self._api_key}
        try:
            resp = self._session.get(self._url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            raise UpstreamError(f"Prayer times API unreachable: {e}") from e

        if resp.status_code != 200:
            raise UpstreamError(f"Prayer times API error: {resp.status_code}")

        try:
            data = resp.json()
            return PrayerTimes(
                fajr=data["fajr"],
                sunrise=data["sunrise"],
                dhuhr=data["dhuhr"],
                asr=data["asr"],
                asr2=data.get("asr_2"),
                maghrib=data["magrib"],
                isha=data["isha"],
            )
        except (ValueError, KeyError, TypeError) as e:
            raise UpstreamError(f"Unexpected prayer times payload: {e}") from e
