"""Google OAuth code exchange."""

from __future__ import annotations

from http import HTTPStatus
from urllib.parse import urlencode

import httpx
from flask import current_app

from utils.errors import AppError

GOOGLE_AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"
GOOGLE_SCOPES = "openid email profile"


class OAuthError(AppError):
    status_code = HTTPStatus.BAD_GATEWAY
    default_message = "Google sign-in failed."


def is_enabled() -> bool:
    config = current_app.config
    return bool(config.get("GOOGLE_CLIENT_ID") and config.get("GOOGLE_CLIENT_SECRET"))


def authorization_url(state: str, redirect_uri: str) -> str:
    query = urlencode(
        {
            "client_id": current_app.config["GOOGLE_CLIENT_ID"],
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "scope": GOOGLE_SCOPES,
            "state": state,
            "prompt": "select_account",
        }
    )
    return f"{GOOGLE_AUTHORIZE_URL}?{query}"


def fetch_profile(code: str, redirect_uri: str) -> dict:
    """Exchange an authorization code and return ``email``, ``name``, ``avatar_url``."""

    token_payload = {
        "grant_type": "authorization_code",
        "client_id": current_app.config["GOOGLE_CLIENT_ID"],
        "client_secret": current_app.config["GOOGLE_CLIENT_SECRET"],
        "redirect_uri": redirect_uri,
        "code": code,
    }
    timeout = current_app.config.get("OAUTH_HTTP_TIMEOUT", 10)

    try:
        with httpx.Client(timeout=timeout) as client:
            token_resp = client.post(GOOGLE_TOKEN_URL, data=token_payload)
            token_resp.raise_for_status()
            access_token = token_resp.json().get("access_token")
            if not access_token:
                raise OAuthError()

            headers = {"Authorization": f"Bearer {access_token}"}
            info_resp = client.get(GOOGLE_USERINFO_URL, headers=headers)
            info_resp.raise_for_status()
            info = info_resp.json()
    except httpx.HTTPError as exc:
        current_app.logger.warning("Google token exchange failed: %s", exc)
        raise OAuthError() from exc

    email = info.get("email")
    if not email:
        raise OAuthError("Google account has no email address.")
    return {"email": email, "name": info.get("name"), "avatar_url": info.get("picture")}
