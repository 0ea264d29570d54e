from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from flask import request, jsonify


def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def no_content():
    return "", 204


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status


def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if data is None:
        return {}
    return data


def parse_uuid(value: Any) -> Optional[UUID]:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Stored timestamps are naive UTC; aware inputs are converted first."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
