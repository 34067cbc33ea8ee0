from __future__ import annotations

from datetime import date, time
from typing import Any
from urllib.parse import urlparse

from ..core.constants import FEED_URL_SCHEMES
from ..core.enums import PrayerKey
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, parse_time_of_day


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_id(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is invalid")
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is invalid")
    if parsed <= 0:
        raise ValidationError(f"{field_name} is invalid")
    return parsed


def require_date(value: Any, field_name: str) -> date:
    text = require_non_empty(value, field_name)
    try:
        return parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")


def require_time(value: Any, field_name: str) -> time:
    text = require_non_empty(value, field_name)
    try:
        return parse_time_of_day(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be HH:MM")


def require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be true or false")
    return value


def require_prayer_key(value: Any) -> PrayerKey:
    try:
        return PrayerKey(value)
    except ValueError:
        keys = ", ".join(k.value for k in PrayerKey)
        raise ValidationError(f"prayerKey must be one of: {keys}")


def require_feed_url(value: Any, field_name: str) -> str:
    url = require_non_empty(value, field_name)
    parsed = urlparse(url)
    if parsed.scheme.lower() not in FEED_URL_SCHEMES or not parsed.netloc:
        raise ValidationError(f"{field_name} must be an http(s) or webcal URL")
    return url
