import os

from . import require_env

DB_CONFIG = {
    "host": require_env("DB_HOST"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": require_env("DB_USER"),
    "password": require_env("DB_PASSWORD"),
    "database": os.getenv("DB_NAME", "masjid_rota"),
}

PRAYER_TIMES_API_KEY = require_env("LONDON_PRAYER_TIMES_KEY", "PRAYER_TIMES_API_KEY")
PRAYER_TIMES_URL = os.getenv("PRAYER_TIMES_URL", "https://www.londonprayertimes.com/api/times/")

HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))
FEED_FETCH_WORKERS = int(os.getenv("FEED_FETCH_WORKERS", "8"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
