"""Example: ask the service layer who is on shift, without going through Flask."""

import importlib
from datetime import datetime

from config import get_settings_module

from src.masjid_rota.masjid_rota.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, http_timeout=settings.HTTP_TIMEOUT_SECONDS)
    for worker in container.rota_service.whos_on(datetime.now()):
        print(worker.worker_id, worker.name)


if __name__ == "__main__":
    main()
