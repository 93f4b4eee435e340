from __future__ import annotations

from typing import Optional

from flask import jsonify


def error_response(message: str, status: int, *, details: Optional[str] = None):
    """Single JSON error envelope: {"error": ..., "details": ...}."""
    body = {"error": message}
    if details is not None:
        body["details"] = details
    return jsonify(body), status
