from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, json_endpoint
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/breaks", methods=["GET"], endpoint="list_breaks")
    @json_endpoint("Failed to load breaks")
    def list_breaks():
        entries = container.break_service.list_breaks(request.args.get("date"))
        return jsonify({"breaks": [e.to_dict() for e in entries]})

    @app.route("/breaks", methods=["POST"], endpoint="save_break")
    @json_endpoint("Failed to save break")
    def save_break():
        body = json_body(ValidationError)
        record = container.break_service.save_break(
            worker_id=body.get("workerId"),
            break_date=body.get("breakDate"),
            start_time=body.get("startTime"),
            end_time=body.get("endTime"),
        )
        return jsonify({"break": record.to_dict()}), 201

    @app.route("/breaks", methods=["DELETE"], endpoint="delete_break")
    @json_endpoint("Failed to delete break")
    def delete_break():
        container.break_service.delete_break(request.args.get("id"))
        return jsonify({"ok": True})
