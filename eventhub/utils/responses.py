"""
JSON envelope shared by every endpoint.
"""
from typing import Any, Optional

from flask import jsonify


def success_response(data: Any = None, message: Optional[str] = None, status_code: int = 200):
    """
    Builds ``{"success": true, "data"?: ..., "message"?: ...}``.

    Args:
        data: Payload; omitted from the body when None.
        message: Optional human-readable message.
        status_code: HTTP status code.
    """
    body = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return jsonify(body), status_code


def error_response(error: str, status_code: int = 400, message: Optional[str] = None, errors=None):
    body = {"success": False, "error": error}
    if message:
        body["message"] = message
    if errors:
        body["errors"] = errors
    return jsonify(body), status_code
