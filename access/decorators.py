"""Authorization helpers for the JSON API."""

from __future__ import annotations

from functools import wraps

from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request

from utils.errors import InvalidRole, PermissionDenied

from .roles import Role, as_role, can_access, role_id_of


def current_user_id() -> int | None:
    """Return the id of the signed-in user, or None outside a JWT request."""

    identity = get_jwt_identity()
    if identity is None:
        return None
    try:
        return int(identity)
    except (TypeError, ValueError):
        return None


def current_role() -> Role:
    """Return the role carried by the session token."""

    return role_id_of(get_jwt().get("role"))


def owner_or_role(owner_id, role) -> bool:
    """True if the caller owns ``owner_id`` or holds at least ``role``."""

    user_id = current_user_id()
    if user_id is not None and owner_id is not None and str(owner_id) == str(user_id):
        return True
    try:
        return can_access(current_role(), role)
    except InvalidRole:
        return False


def role_required(role):
    """Require a valid token whose role may act as ``role``."""

    target = as_role(role)

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            ensure_role(target)
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def ensure_owner_or_role(owner_id, role) -> None:
    if not owner_or_role(owner_id, role):
        raise PermissionDenied()


def ensure_role(role) -> None:
    try:
        allowed = can_access(current_role(), role)
    except InvalidRole:
        allowed = False
    if not allowed:
        raise PermissionDenied()
