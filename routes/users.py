"""User administration API."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from access.decorators import ensure_owner_or_role, ensure_role, role_required
from access.roles import ROLE_NAMES, Role
from services import users as user_actions
from utils.actions import to_response
from utils.request_validation import parse_json_request, parse_page_args

users_bp = Blueprint("users", __name__)


def _check_role_grant(payload: dict) -> None:
    """Changing a role needs admin rights; granting master needs master."""
    if "role" not in payload:
        return
    ensure_role(Role.ADMIN)
    if payload.get("role") == ROLE_NAMES[Role.MASTER]:
        ensure_role(Role.MASTER)


@users_bp.route("", methods=["GET"])
@role_required(Role.ADMIN)
def list_users():
    """List users, optionally by role; paginated when page/pageSize are given."""
    role = request.args.get("role")
    page, page_size = parse_page_args(request)
    if page is None:
        return to_response(user_actions.list_users(role))
    return to_response(user_actions.list_users_page(role, page, page_size))


@users_bp.route("/counts", methods=["GET"])
@role_required(Role.ADMIN)
def count_users():
    return to_response(user_actions.count_by_role())


@users_bp.route("", methods=["POST"])
@role_required(Role.ADMIN)
def create_user():
    payload = parse_json_request(request)
    _check_role_grant(payload)
    return to_response(user_actions.create_user(payload), HTTPStatus.CREATED)


@users_bp.route("/<user_id>", methods=["GET"])
@jwt_required()
def get_user(user_id):
    ensure_owner_or_role(user_id, Role.TRAINER)
    return to_response(user_actions.get_user(user_id))


def _protect_master(user_id):
    """Only a master may change or remove a master account.

    Returns the failed lookup result when the target cannot be loaded.
    """
    result = user_actions.get_user(user_id)
    if not result.ok:
        return result
    if result["user"]["role"] == ROLE_NAMES[Role.MASTER]:
        ensure_role(Role.MASTER)
    return None


@users_bp.route("/<user_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_user(user_id):
    payload = parse_json_request(request)
    ensure_owner_or_role(user_id, Role.ADMIN)
    _check_role_grant(payload)
    failed = _protect_master(user_id)
    if failed is not None:
        return to_response(failed)
    return to_response(user_actions.update_user(user_id, payload))


@users_bp.route("/<user_id>", methods=["DELETE"])
@role_required(Role.ADMIN)
def delete_user(user_id):
    failed = _protect_master(user_id)
    if failed is not None:
        return to_response(failed)
    return to_response(user_actions.delete_user(user_id))
