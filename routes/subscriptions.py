"""Subscription management API."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from access.decorators import current_user_id, ensure_owner_or_role, role_required
from access.roles import Role
from services import subscriptions as subscription_actions
from utils.actions import to_response
from utils.request_validation import parse_json_request

subscriptions_bp = Blueprint("subscriptions", __name__)


@subscriptions_bp.route("", methods=["GET"])
@jwt_required()
def list_subscriptions():
    """Admins list everything; customers may list their own."""
    customer_id = request.args.get("customerId")
    ensure_owner_or_role(customer_id, Role.ADMIN)
    return to_response(subscription_actions.list_subscriptions(customer_id))


@subscriptions_bp.route("/active", methods=["GET"])
@jwt_required()
def active_subscription():
    customer_id = request.args.get("customerId") or current_user_id()
    ensure_owner_or_role(customer_id, Role.TRAINER)
    return to_response(
        subscription_actions.get_active_subscription(customer_id, request.args.get("date"))
    )


@subscriptions_bp.route("/counts", methods=["GET"])
@role_required(Role.ADMIN)
def count_subscriptions():
    return to_response(subscription_actions.count_by_status())


@subscriptions_bp.route("", methods=["POST"])
@role_required(Role.ADMIN)
def create_subscription():
    payload = parse_json_request(request)
    payload.setdefault("assignedBy", current_user_id())
    return to_response(
        subscription_actions.create_subscription(payload), HTTPStatus.CREATED
    )


@subscriptions_bp.route("/<subscription_id>", methods=["GET"])
@jwt_required()
def get_subscription(subscription_id):
    result = subscription_actions.get_subscription(subscription_id)
    if result.ok:
        ensure_owner_or_role(result["subscription"]["customerId"], Role.ADMIN)
    return to_response(result)


@subscriptions_bp.route("/<subscription_id>", methods=["PUT", "PATCH"])
@role_required(Role.ADMIN)
def update_subscription(subscription_id):
    payload = parse_json_request(request)
    return to_response(
        subscription_actions.update_subscription(subscription_id, payload)
    )


@subscriptions_bp.route("/<subscription_id>", methods=["DELETE"])
@role_required(Role.ADMIN)
def delete_subscription(subscription_id):
    return to_response(subscription_actions.delete_subscription(subscription_id))
