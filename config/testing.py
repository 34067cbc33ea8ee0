DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "masjid_rota_test",
}

PRAYER_TIMES_API_KEY = "test-key"
PRAYER_TIMES_URL = "https://prayer-times.invalid/api/times/"

HTTP_TIMEOUT_SECONDS = 1.0
FEED_FETCH_WORKERS = 2

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
