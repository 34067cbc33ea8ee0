from __future__ import annotations

import logging
from functools import wraps
from typing import Type

from flask import jsonify, request

from ..core.exceptions import UpstreamError, ValidationError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"error": message}), status


def json_body(malformed: Type[Exception] = UpstreamError) -> dict:
    """Parsed JSON object from the request.

    An unparseable body raises ``malformed``: by default an error that ends as
    the endpoint's generic 500; pass ValidationError for a 400 "Invalid JSON".
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise malformed("Invalid JSON")
    return data


def json_endpoint(failure_message: str):
    """Map ValidationError to 400 and anything else to a logged 500."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return json_error(str(e), 400)
            except Exception:
                logger.exception("%s %s failed", request.method, request.path)
                return json_error(failure_message, 500)

        return wrapper

    return decorator
