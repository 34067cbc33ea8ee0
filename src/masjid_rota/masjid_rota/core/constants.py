"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60
LAST_MINUTE_OF_DAY = MINUTES_PER_DAY - 1

DEFAULT_HTTP_TIMEOUT_SECONDS = 10
DEFAULT_FEED_FETCH_WORKERS = 8

PRAYER_TIMES_URL = "https://www.londonprayertimes.com/api/times/"

FEED_URL_SCHEMES = ("http", "https", "webcal")
