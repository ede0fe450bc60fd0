"""Uniform success/failure envelope for service actions.

Every service function is wrapped with :func:`server_action`. Callers always
get a dict back, never an exception::

    {"success": True, "meal": {...}}
    {"success": False, "error": "Meal not found."}
"""

from __future__ import annotations

from functools import wraps
from http import HTTPStatus
from typing import Any, Callable

from flask import current_app, jsonify

from models import db

from .errors import GENERIC_ERROR_MESSAGE, AppError


class ActionResult(dict):
    """Envelope dict that also remembers the HTTP status it maps to."""

    def __init__(self, *args, status_code: int = HTTPStatus.OK, **kwargs):
        super().__init__(*args, **kwargs)
        self.status_code = int(status_code)

    @property
    def ok(self) -> bool:
        return bool(self.get("success"))


def success(payload: dict | None = None) -> ActionResult:
    return ActionResult({"success": True, **(payload or {})})


def failure(message: str, status_code: int = HTTPStatus.BAD_REQUEST) -> ActionResult:
    return ActionResult({"success": False, "error": message}, status_code=status_code)


def server_action(context: str) -> Callable:
    """Translate the wrapped function's outcome into an :class:`ActionResult`.

    ``AppError`` becomes a failure carrying its own message. Anything else is
    logged with ``context``, the session is rolled back and the caller sees
    only the generic message.
    """

    def decorator(func: Callable[..., dict | None]) -> Callable[..., ActionResult]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> ActionResult:
            try:
                payload = func(*args, **kwargs)
            except AppError as exc:
                return failure(exc.message, exc.status_code)
            except Exception:
                current_app.logger.exception("%s error", context)
                db.session.rollback()
                return failure(GENERIC_ERROR_MESSAGE, HTTPStatus.INTERNAL_SERVER_ERROR)
            if isinstance(payload, ActionResult):
                return payload
            return success(payload)

        return wrapper

    return decorator


def to_response(result: ActionResult, success_status: int = HTTPStatus.OK):
    """Return a ``(response, status)`` pair for a route handler."""

    status = success_status if result.ok else result.status_code
    return jsonify(dict(result)), status
