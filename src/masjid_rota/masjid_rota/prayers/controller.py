from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/prayer", methods=["GET"], endpoint="current_prayer")
    @json_endpoint("Failed to load prayer info")
    def current_prayer():
        snapshot = container.prayer_service.current_prayer()
        return jsonify(snapshot.to_dict())

    @app.route("/prayer", methods=["POST"], endpoint="set_prayer_status")
    @json_endpoint("Failed to save prayer status")
    def set_prayer_status():
        body = json_body()
        container.prayer_service.set_status(
            worker_id=body.get("workerId"),
            prayer_key=body.get("prayerKey"),
            has_prayed=body.get("hasPrayed"),
            prayer_date=body.get("prayerDate"),
        )
        return jsonify({"ok": True})
