"""Per-request page access control.

Runs before every request that is not public and not under ``/api``. The
session cookie is decoded with the local signing key, so forged or expired
tokens are rejected. The ``role`` claim inside a valid token is trusted as
issued: the guard does not look the user up, so a role change takes effect
at the user's next sign-in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlencode

from flask import Flask, current_app, g, redirect, request
from flask_jwt_extended import decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from utils.errors import InvalidRole

from .role_config import allowed_routes, dashboard_url, login_url_for_path, path_allowed
from .roles import role_id_of

PUBLIC_PREFIXES = (
    "/login",
    "/register",
    "/admin/login",
    "/trainer/login",
    "/health",
    "/static",
)
API_PREFIX = "/api"
ASSET_SUFFIXES = (".svg", ".png", ".jpg", ".jpeg", ".gif", ".webp", ".ico")


class GuardState(str, Enum):
    PUBLIC = "public"
    AUTHORIZED = "authorized"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class GuardDecision:
    state: GuardState
    location: str | None = None
    claims: dict | None = None


def login_redirect(path: str) -> str:
    query = urlencode({"callbackUrl": path}, safe="/")
    return f"{login_url_for_path(path)}?{query}"


def decode_session(token: str | None) -> dict | None:
    """Return verified claims, or None for a missing, bad or expired token."""

    if not token:
        return None
    try:
        return decode_token(token)
    except (PyJWTError, JWTExtendedException):
        return None


def decide(path: str, token: str | None) -> GuardDecision:
    if (
        path_allowed(path, PUBLIC_PREFIXES)
        or path_allowed(path, (API_PREFIX,))
        or path.lower().endswith(ASSET_SUFFIXES)
    ):
        return GuardDecision(GuardState.PUBLIC)

    claims = decode_session(token)
    if claims is None:
        return GuardDecision(GuardState.UNAUTHENTICATED, login_redirect(path))

    try:
        role = role_id_of(claims.get("role"))
    except InvalidRole:
        return GuardDecision(GuardState.UNAUTHENTICATED, login_redirect(path))

    if path_allowed(path, allowed_routes(role)):
        return GuardDecision(GuardState.AUTHORIZED, claims=claims)
    return GuardDecision(GuardState.FORBIDDEN, dashboard_url(role))


class RouteGuard:
    """Registers :func:`decide` as a ``before_request`` hook."""

    def __init__(self, app: Flask | None = None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        app.before_request(self._check)

    def _check(self):
        cookie_name = current_app.config.get("JWT_ACCESS_COOKIE_NAME", "access_token_cookie")
        decision = decide(request.path, request.cookies.get(cookie_name))
        if decision.state is GuardState.AUTHORIZED:
            g.session_claims = decision.claims
            return None
        if decision.location is None:
            return None
        current_app.logger.debug(
            "Route guard %s for %s, redirecting to %s",
            decision.state.value,
            request.path,
            decision.location,
        )
        return redirect(decision.location)
