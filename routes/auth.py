"""Authentication blueprint: credentials, Google OAuth and session info."""

from __future__ import annotations

import secrets
from http import HTTPStatus

from flask import (
    Blueprint,
    current_app,
    jsonify,
    redirect,
    request,
    session,
    url_for,
)
from flask_jwt_extended import (
    get_jwt,
    get_jwt_identity,
    jwt_required,
    set_access_cookies,
    unset_jwt_cookies,
)
from werkzeug.exceptions import BadRequest, NotFound

from access.role_config import dashboard_url
from access.roles import role_id_of
from services import auth, oauth
from services import users as user_actions
from utils.actions import ActionResult, to_response
from utils.request_validation import parse_json_request

auth_bp = Blueprint("auth", __name__)


def _with_session(result: ActionResult, success_status: int):
    """Attach a fresh session token to a successful sign-in result."""

    if not result.ok:
        return to_response(result)
    token = auth.issue_session_token(result["user"])
    response = jsonify({**result, "accessToken": token})
    set_access_cookies(response, token)
    return response, success_status


def _safe_callback(raw: str | None) -> str | None:
    """Only same-site absolute paths are accepted as post-login targets."""

    if raw and raw.startswith("/") and not raw.startswith("//"):
        return raw
    return None


def _redirect_uri() -> str:
    return current_app.config.get("OAUTH_REDIRECT_URI") or url_for(
        "auth.google_callback", _external=True
    )


def _require_oauth() -> None:
    if not oauth.is_enabled():
        raise NotFound("Google sign-in is not configured.")


@auth_bp.route("/register", methods=["POST"])
def register():
    """Register a new account and sign it in."""
    payload = parse_json_request(request)
    return _with_session(auth.register(payload), HTTPStatus.CREATED)


@auth_bp.route("/login", methods=["POST"])
def login():
    """Authenticate with email and password and return a session token."""
    payload = parse_json_request(request)
    result = auth.login_with_credentials(payload.get("email"), payload.get("password"))
    return _with_session(result, HTTPStatus.OK)


@auth_bp.route("/logout", methods=["POST"])
def logout():
    response = jsonify({"success": True})
    unset_jwt_cookies(response)
    return response


@auth_bp.route("/session", methods=["GET"])
@jwt_required()
def session_info():
    """Return the signed-in user's profile and the role carried by the token."""
    result = user_actions.get_user(get_jwt_identity())
    if result.ok:
        result["role"] = get_jwt().get("role")
    return to_response(result)


@auth_bp.route("/google", methods=["GET"])
def google_login():
    _require_oauth()
    state = secrets.token_urlsafe(24)
    session["oauth_state"] = state
    session["oauth_callback"] = _safe_callback(request.args.get("callbackUrl"))
    return redirect(oauth.authorization_url(state, _redirect_uri()))


@auth_bp.route("/google/callback", methods=["GET"])
def google_callback():
    _require_oauth()
    expected_state = session.pop("oauth_state", None)
    state = request.args.get("state")
    if not state or not expected_state or not secrets.compare_digest(state, expected_state):
        raise BadRequest("Invalid OAuth state.")
    code = request.args.get("code")
    if not code:
        raise BadRequest("Missing authorization code.")

    profile = oauth.fetch_profile(code, _redirect_uri())
    result = auth.login_or_register_oauth(
        profile["email"], profile.get("name"), profile.get("avatar_url")
    )
    if not result.ok:
        return to_response(result)

    user = result["user"]
    target = session.pop("oauth_callback", None) or dashboard_url(role_id_of(user["role"]))
    response = redirect(target)
    set_access_cookies(response, auth.issue_session_token(user))
    return response
