"""Development entry point: ``python app.py`` or ``flask --app app run``."""
import os

from src.masjid_rota.masjid_rota.main import create_app

app = create_app()


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=app.config["DEBUG"])
