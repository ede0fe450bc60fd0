"""Trainer template API (meal and exercise templates)."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, request

from access.decorators import current_user_id, role_required
from access.roles import Role
from services import templates as template_actions
from utils.actions import to_response
from utils.request_validation import parse_json_request

templates_bp = Blueprint("templates", __name__)


@templates_bp.route("/meals", methods=["GET"])
@role_required(Role.TRAINER)
def list_meal_templates():
    return to_response(
        template_actions.list_meal_templates(request.args.get("trainerId"))
    )


@templates_bp.route("/meals", methods=["POST"])
@role_required(Role.TRAINER)
def create_meal_template():
    payload = parse_json_request(request)
    payload.setdefault("createdBy", current_user_id())
    return to_response(
        template_actions.create_meal_template(payload), HTTPStatus.CREATED
    )


@templates_bp.route("/meals/<template_id>", methods=["GET"])
@role_required(Role.TRAINER)
def get_meal_template(template_id):
    return to_response(template_actions.get_meal_template(template_id))


@templates_bp.route("/meals/<template_id>", methods=["PUT", "PATCH"])
@role_required(Role.TRAINER)
def update_meal_template(template_id):
    payload = parse_json_request(request)
    return to_response(template_actions.update_meal_template(template_id, payload))


@templates_bp.route("/meals/<template_id>", methods=["DELETE"])
@role_required(Role.TRAINER)
def delete_meal_template(template_id):
    return to_response(template_actions.delete_meal_template(template_id))


@templates_bp.route("/exercises", methods=["GET"])
@role_required(Role.TRAINER)
def list_exercise_templates():
    return to_response(
        template_actions.list_exercise_templates(request.args.get("trainerId"))
    )


@templates_bp.route("/exercises", methods=["POST"])
@role_required(Role.TRAINER)
def create_exercise_template():
    payload = parse_json_request(request)
    payload.setdefault("createdBy", current_user_id())
    return to_response(
        template_actions.create_exercise_template(payload), HTTPStatus.CREATED
    )


@templates_bp.route("/exercises/<template_id>", methods=["GET"])
@role_required(Role.TRAINER)
def get_exercise_template(template_id):
    return to_response(template_actions.get_exercise_template(template_id))


@templates_bp.route("/exercises/<template_id>", methods=["PUT", "PATCH"])
@role_required(Role.TRAINER)
def update_exercise_template(template_id):
    payload = parse_json_request(request)
    return to_response(
        template_actions.update_exercise_template(template_id, payload)
    )


@templates_bp.route("/exercises/<template_id>", methods=["DELETE"])
@role_required(Role.TRAINER)
def delete_exercise_template(template_id):
    return to_response(template_actions.delete_exercise_template(template_id))
