"""Application factory."""

import json
import logging
import os
import uuid

from flask import Flask, g, jsonify, request
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from access.route_guard import RouteGuard
from config import Config
from models import db
from routes.assignments import assignments_bp
from routes.auth import auth_bp
from routes.catalog import exercises_bp, meals_bp
from routes.pages import pages_bp
from routes.subscriptions import subscriptions_bp
from routes.templates import templates_bp
from routes.users import users_bp
from utils.errors import GENERIC_ERROR_MESSAGE, AppError

migrate = Migrate()
jwt = JWTManager()
guard = RouteGuard()
limiter = Limiter(key_func=get_remote_address)


def _token_failure(message: str):
    return jsonify({"success": False, "error": message}), 401


@jwt.unauthorized_loader
def _missing_token(reason):
    return _token_failure("Authentication required.")


@jwt.invalid_token_loader
def _invalid_token(reason):
    return _token_failure("Invalid session token.")


@jwt.expired_token_loader
def _expired_token(jwt_header, jwt_payload):
    return _token_failure("Session expired.")


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(
        getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    )

    # Core subsystems
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # CORS
    CORS(
        app,
        resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}},
        supports_credentials=True,
    )

    # Rate limiting
    storage_uri = app.config.get("RATELIMIT_STORAGE_URI", "memory://")
    headers_enabled = app.config.get("RATELIMIT_HEADERS_ENABLED", True)
    key_prefix = app.config.get("RATELIMIT_KEY_PREFIX") or str(uuid.uuid4())

    global limiter
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[lambda: app.config.get("RATE_LIMIT", "120 per minute")],
        storage_uri=storage_uri,
        headers_enabled=headers_enabled,
        key_prefix=key_prefix,
    )
    limiter.init_app(app)
    app.config["RATELIMIT_KEY_PREFIX"] = key_prefix
    limiter.limit(lambda: app.config.get("AUTH_RATE_LIMIT", "10 per minute"))(auth_bp)

    # Errors and request ids run before the guard so redirects carry an id.
    _register_error_handlers(app)
    guard.init_app(app)

    # Blueprints
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(users_bp, url_prefix="/api/users")
    app.register_blueprint(subscriptions_bp, url_prefix="/api/subscriptions")
    app.register_blueprint(meals_bp, url_prefix="/api/meals")
    app.register_blueprint(exercises_bp, url_prefix="/api/exercises")
    app.register_blueprint(templates_bp, url_prefix="/api/templates")
    app.register_blueprint(assignments_bp, url_prefix="/api/assignments")
    app.register_blueprint(pages_bp)

    # Health
    @app.route("/health", methods=["GET"])
    @app.route("/api/health", methods=["GET"])
    def health_check():
        return jsonify({"status": "ok"})

    return app


def _register_error_handlers(app: Flask) -> None:
    """Register JSON error handlers with request IDs."""

    @app.before_request
    def _assign_request_id():
        g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    @app.after_request
    def _add_request_id_header(response):
        request_id = g.get("request_id")
        if request_id:
            response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(AppError)
    def _handle_app_error(error: AppError):
        request_id = g.get("request_id") or str(uuid.uuid4())
        response = jsonify(
            {"success": False, "error": error.message, "request_id": request_id}
        )
        response.status_code = int(error.status_code)
        response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(HTTPException)
    def _handle_http_exception(error: HTTPException):
        request_id = g.get("request_id") or str(uuid.uuid4())
        response = error.get_response()
        payload = {
            "success": False,
            "error": getattr(error, "name", "Error"),
            "detail": error.description,
            "request_id": request_id,
        }
        response.data = json.dumps(payload)
        response.content_type = "application/json"
        response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(Exception)
    def _handle_unexpected(error: Exception):
        request_id = g.get("request_id") or str(uuid.uuid4())
        app.logger.exception("Unhandled application error", exc_info=error)
        db.session.rollback()
        response = jsonify(
            {
                "success": False,
                "error": GENERIC_ERROR_MESSAGE,
                "request_id": request_id,
            }
        )
        response.status_code = 500
        response.headers.setdefault("X-Request-ID", request_id)
        return response


if __name__ == "__main__":
    application = create_app()
    application.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)))
