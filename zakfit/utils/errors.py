"""
API error types.

Handlers raise these instead of building error responses by hand; the error
handlers registered in ``register_error_handlers`` turn them into the usual
``{"error": {"code": ..., "message": ...}}`` envelope.
"""

import logging
from typing import Any, Dict, Optional

from werkzeug.exceptions import HTTPException

from zakfit.extensions import db
from zakfit.utils.http import error

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, code: Optional[str] = None, **extra):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.extra: Dict[str, Any] = extra
        self.headers: Dict[str, str] = {}


class BadRequest(ApiError):
    status = 400
    code = "BAD_REQUEST"


class Unauthorized(ApiError):
    status = 401
    code = "UNAUTHORIZED"


class NotFound(ApiError):
    status = 404
    code = "NOT_FOUND"


class Conflict(ApiError):
    status = 409
    code = "CONFLICT"


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(exc: ApiError):
        body, status = error(exc.code, exc.message, exc.status, **exc.extra)
        return body, status, exc.headers

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        code = (exc.name or "HTTP_ERROR").upper().replace(" ", "_")
        return error(code, exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        db.session.rollback()
        logger.exception("Unhandled error: %s", exc)
        return error("INTERNAL_ERROR", "Internal server error", 500)
