"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
import uuid
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient
from flask_jwt_extended import create_access_token

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from models import db  # noqa: E402
from models.user import User  # noqa: E402


class _BaseTestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    JWT_SECRET_KEY = "test-jwt-secret-key-that-is-long-enough"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    RATE_LIMIT = "1000 per minute"
    AUTH_RATE_LIMIT = "1000 per minute"
    GOOGLE_CLIENT_ID = None
    GOOGLE_CLIENT_SECRET = None


@pytest.fixture()
def app() -> Flask:
    """Create a Flask application instance for tests."""

    application = create_app(_BaseTestConfig)

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def make_user(app: Flask):
    """Persist a user and return its id."""

    def _make(
        role: str = "customer",
        *,
        email: str | None = None,
        password: str | None = "Secret123",
        name: str = "Test User",
    ) -> int:
        with app.app_context():
            user = User(
                email=email or f"{role}-{uuid.uuid4().hex[:8]}@example.com",
                name=name,
            )
            user.role = role
            if password:
                user.set_password(password)
            db.session.add(user)
            db.session.commit()
            return user.id

    return _make


@pytest.fixture()
def token_for(app: Flask):
    """Return a session token for a user id and role name."""

    def _token(user_id: int, role: str) -> str:
        with app.app_context():
            return create_access_token(
                identity=str(user_id), additional_claims={"role": role}
            )

    return _token


@pytest.fixture()
def auth_headers(token_for):
    def _headers(user_id: int, role: str) -> dict:
        return {"Authorization": f"Bearer {token_for(user_id, role)}"}

    return _headers
