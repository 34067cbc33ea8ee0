from __future__ import annotations

import importlib
import logging
import sys
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .breaks.controller import register as register_breaks
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .prayers.controller import register as register_prayers
from .shifts.controller import register as register_shifts
from .workers.controller import register as register_workers

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        container = build_container(
            db_config=db_config,
            prayer_times_key=getattr(settings, "PRAYER_TIMES_API_KEY", None),
            prayer_times_url=getattr(settings, "PRAYER_TIMES_URL"),
            http_timeout=float(getattr(settings, "HTTP_TIMEOUT_SECONDS")),
            feed_workers=int(getattr(settings, "FEED_FETCH_WORKERS")),
        )
        logger.info("settings=%s db=%s", settings_module, container.conn.config.describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn)
            logger.info("Schema ready (tables=%d)", len(list_tables(container.conn)))

    register_workers(app, container)
    register_shifts(app, container)
    register_breaks(app, container)
    register_prayers(app, container)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"ok": True})

    @app.errorhandler(404)
    def not_found(_e):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return jsonify({"error": "Method not allowed"}), 405

    return app
