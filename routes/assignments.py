"""Daily assignment API."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from access.decorators import (
    current_user_id,
    ensure_owner_or_role,
    role_required,
)
from access.roles import Role
from services import assignments as assignment_actions
from utils.actions import to_response
from utils.request_validation import parse_json_request

assignments_bp = Blueprint("assignments", __name__)


@assignments_bp.route("", methods=["GET"])
@jwt_required()
def list_assignments():
    """Trainers list any customer's plan; customers only their own."""
    args = request.args
    customer_id = args.get("customerId")
    ensure_owner_or_role(customer_id, Role.TRAINER)
    return to_response(
        assignment_actions.list_assignments(
            customer_id,
            args.get("startDate"),
            args.get("endDate"),
            args.get("assignedBy"),
        )
    )


@assignments_bp.route("", methods=["POST"])
@role_required(Role.TRAINER)
def create_assignment():
    payload = parse_json_request(request)
    payload.setdefault("assignedBy", current_user_id())
    return to_response(
        assignment_actions.create_assignment(payload), HTTPStatus.CREATED
    )


@assignments_bp.route("/weekly", methods=["POST"])
@role_required(Role.TRAINER)
def create_weekly_assignments():
    payload = parse_json_request(request)
    payload.setdefault("assignedBy", current_user_id())
    return to_response(
        assignment_actions.create_weekly_assignments(payload), HTTPStatus.CREATED
    )


@assignments_bp.route("/weekly", methods=["GET"])
@jwt_required()
def get_weekly_assignments():
    customer_id = request.args.get("customerId") or current_user_id()
    ensure_owner_or_role(customer_id, Role.TRAINER)
    return to_response(
        assignment_actions.get_weekly_assignments(
            customer_id, request.args.get("weekStart")
        )
    )


@assignments_bp.route("/<assignment_id>", methods=["GET"])
@jwt_required()
def get_assignment(assignment_id):
    result = assignment_actions.get_assignment(assignment_id)
    if result.ok:
        ensure_owner_or_role(result["assignment"]["customerId"], Role.TRAINER)
    return to_response(result)


@assignments_bp.route("/<assignment_id>", methods=["PUT", "PATCH"])
@role_required(Role.TRAINER)
def update_assignment(assignment_id):
    payload = parse_json_request(request)
    return to_response(assignment_actions.update_assignment(assignment_id, payload))


@assignments_bp.route("/<assignment_id>", methods=["DELETE"])
@role_required(Role.TRAINER)
def delete_assignment(assignment_id):
    return to_response(assignment_actions.delete_assignment(assignment_id))
