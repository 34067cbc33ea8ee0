from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/workers", methods=["GET"], endpoint="list_workers")
    @json_endpoint("Failed to load workers")
    def list_workers():
        workers = container.worker_service.list_workers()
        return jsonify({"workers": [w.to_public() for w in workers]})

    @app.route("/workers", methods=["POST"], endpoint="add_worker")
    @json_endpoint("Failed to add worker")
    def add_worker():
        body = json_body()
        worker = container.worker_service.create_worker(name=body.get("name"), ical_url=body.get("icalUrl"))
        return jsonify({"worker": worker.to_public()}), 201
