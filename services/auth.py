"""Sign-in, registration and session token issuing."""

from __future__ import annotations

from typing import Any, Mapping

from flask import current_app
from flask_jwt_extended import create_access_token
from pydantic import EmailStr, Field, field_validator

from access.roles import DEFAULT_ROLE, REGISTERABLE_ROLES, ROLE_NAMES
from models import db
from orm import Schema, validate
from utils.actions import server_action
from utils.errors import InvalidCredentials

from .users import UserCreate, find_by_email, users


class LoginInput(Schema):
    email: EmailStr
    password: str = Field(min_length=6)


class RegisterInput(UserCreate):
    password: str = Field(min_length=6)

    @field_validator("role")
    @classmethod
    def check_registerable(cls, value):
        if value not in REGISTERABLE_ROLES:
            raise ValueError(
                f"Role must be one of: {', '.join(REGISTERABLE_ROLES)}."
            )
        return value


class OAuthProfile(Schema):
    email: EmailStr
    name: str = Field(min_length=1)
    avatar_url: str | None = None


@server_action("Login")
def login_with_credentials(email, password):
    """Check credentials and return the public profile.

    An unknown email, an account without a password and a wrong password all
    fail with the same message.
    """

    credentials = validate(LoginInput, {"email": email, "password": password})
    user = find_by_email(credentials["email"])
    if user is None or not user.check_password(credentials["password"]):
        current_app.logger.warning("Failed sign-in attempt")
        raise InvalidCredentials()

    current_app.logger.info("User %s signed in", user.id)
    return {"user": user.to_dict()}


@server_action("Register")
def register(data):
    user = users.create(data, schema=RegisterInput)
    current_app.logger.info("Registered user %s as %s", user.id, user.role)
    return {"user": user.to_dict()}


@server_action("OAuth login")
def login_or_register_oauth(email, name=None, avatar_url=None):
    """Sign in an OAuth identity, creating a customer account on first use."""

    email = (email or "").strip()
    name = (name or "").strip() or email.split("@")[0]
    profile = validate(
        OAuthProfile, {"email": email, "name": name, "avatarUrl": avatar_url}
    )

    user = find_by_email(profile["email"])
    if user is not None:
        if profile["avatar_url"] and not user.avatar_url:
            user.avatar_url = profile["avatar_url"]
        user.touch()
        users.commit()
        current_app.logger.info("User %s signed in with OAuth", user.id)
        return {"user": user.to_dict(), "isNew": False}

    user = users.build({**profile, "role": ROLE_NAMES[DEFAULT_ROLE]})
    db.session.add(user)
    users.commit()
    current_app.logger.info("Registered user %s through OAuth", user.id)
    return {"user": user.to_dict(), "isNew": True}


def issue_session_token(user: Mapping[str, Any] | Any) -> str:
    """Return a signed access token carrying the user id and role name."""

    if isinstance(user, Mapping):
        user_id, role = user["id"], user["role"]
    else:
        user_id, role = user.id, user.role
    return create_access_token(identity=str(user_id), additional_claims={"role": role})
