"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

from typing import Iterable

from flask import Request
from werkzeug.exceptions import BadRequest


def parse_json_request(
    req: Request,
    *,
    required_keys: Iterable[str] | None = None,
    allow_empty: bool = False,
) -> dict:
    """Return the parsed JSON body or raise a 400 error."""

    if not req.is_json:
        raise BadRequest("Request content type must be application/json.")

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request JSON body is required.")

    if not isinstance(data, dict):
        raise BadRequest("Request JSON payload must be an object.")

    if not data and not allow_empty:
        raise BadRequest("Request JSON body must not be empty.")

    if required_keys:
        missing = [key for key in required_keys if not data.get(key)]
        if missing:
            raise BadRequest(
                "Missing required fields: {}.".format(
                    ", ".join(sorted(missing))
                )
            )

    return data


def _int_arg(raw: str | None, name: str) -> int | None:
    if raw in (None, ""):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise BadRequest(f"{name} must be an integer.") from None


def parse_page_args(req: Request) -> tuple[int | None, int | None]:
    """Read ``page`` and ``pageSize`` from the query string.

    Returns ``(None, None)`` when the caller asked for neither, which list
    endpoints take as a request for the unpaginated sequence. A missing
    ``pageSize`` stays ``None`` so the configured default applies.
    """

    page = _int_arg(req.args.get("page"), "page")
    page_size = _int_arg(req.args.get("pageSize"), "pageSize")
    if page is None and page_size is None:
        return None, None
    return page or 1, page_size
