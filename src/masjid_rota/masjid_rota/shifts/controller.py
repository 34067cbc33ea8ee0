from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import isoformat_local, now_local, parse_instant
from ..common.http import json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/whos-on", methods=["GET"], endpoint="whos_on")
    @json_endpoint("Failed to load workers")
    def whos_on():
        # Unparseable ?at= falls back to now instead of rejecting the request.
        at = parse_instant(request.args.get("at")) or now_local()
        on_shift = container.rota_service.whos_on(at)
        return jsonify({"onShift": [w.to_dict() for w in on_shift], "at": isoformat_local(at)})
