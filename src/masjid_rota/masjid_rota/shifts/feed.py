"""Calendar feed adapter: download a worker's iCal feed and turn its VEVENTs
into ``ShiftEvent`` intervals."""
from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from typing import List, Optional

import requests
from icalendar import Calendar

from ..common.datetime_utils import to_local_naive
from ..core.constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from ..core.exceptions import CalendarFeedError
from .model import ShiftEvent

logger = logging.getLogger(__name__)


def _as_local_datetime(value) -> Optional[datetime]:
    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time())
    return None


def _prop_dt(component, name: str):
    prop = component.get(name)
    return getattr(prop, "dt", None) if prop is not None else None


def parse_events(payload) -> List[ShiftEvent]:
    """Parse an iCal document; entries without both a start and an end are skipped."""
    try:
        calendar = Calendar.from_ical(payload)
    except ValueError as e:
        raise CalendarFeedError(f"Malformed calendar document: {e}") from e

    events: List[ShiftEvent] = []
    for component in calendar.walk("VEVENT"):
        start = _as_local_datetime(_prop_dt(component, "DTSTART"))
        if start is None:
            continue

        end = _as_local_datetime(_prop_dt(component, "DTEND"))
        if end is None:
            duration = _prop_dt(component, "DURATION")
            if not isinstance(duration, timedelta):
                continue
            end = start + duration

        summary = component.get("SUMMARY")
        events.append(ShiftEvent(start=start, end=end, summary=str(summary) if summary is not None else None))
    return events


def normalize_feed_url(url: str) -> str:
    if url.lower().startswith("webcal://"):
        return "https://" + url[len("webcal://"):]
    return url


class CalendarFeedClient:
    def __init__(self, session: Optional[requests.Session] = None, *, timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS):
        self._session = session or requests.Session()
        self._timeout = timeout

    def fetch_events(self, feed_url: str) -> List[ShiftEvent]:
        url = normalize_feed_url(feed_url)
        try:
            resp = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            raise CalendarFeedError(f"Could not fetch calendar feed: {e}") from e

        if not resp.ok:
            raise CalendarFeedError(f"Calendar feed returned {resp.status_code} {resp.reason}")

        events = parse_events(resp.content)
        logger.debug("Parsed %d events from feed", len(events))
        return events
