import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "masjid_rota"),
}

# London Prayer Times API key; GET /prayer answers 500 until it is set.
PRAYER_TIMES_API_KEY = os.getenv("LONDON_PRAYER_TIMES_KEY")
PRAYER_TIMES_URL = os.getenv("PRAYER_TIMES_URL", "https://www.londonprayertimes.com/api/times/")

HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))
FEED_FETCH_WORKERS = int(os.getenv("FEED_FETCH_WORKERS", "8"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
