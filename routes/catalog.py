"""Meal and exercise catalogue API.

Any signed-in user may read the catalogue; trainers and above maintain it.
"""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from access.decorators import role_required
from access.roles import Role
from services import exercises as exercise_actions
from services import meals as meal_actions
from utils.actions import to_response
from utils.request_validation import parse_json_request

meals_bp = Blueprint("meals", __name__)
exercises_bp = Blueprint("exercises", __name__)


@meals_bp.route("", methods=["GET"])
@jwt_required()
def list_meals():
    return to_response(meal_actions.list_meals(request.args.get("mealType")))


@meals_bp.route("", methods=["POST"])
@role_required(Role.TRAINER)
def create_meal():
    payload = parse_json_request(request)
    return to_response(meal_actions.create_meal(payload), HTTPStatus.CREATED)


@meals_bp.route("/<meal_id>", methods=["GET"])
@jwt_required()
def get_meal(meal_id):
    return to_response(meal_actions.get_meal(meal_id))


@meals_bp.route("/<meal_id>", methods=["PUT", "PATCH"])
@role_required(Role.TRAINER)
def update_meal(meal_id):
    payload = parse_json_request(request)
    return to_response(meal_actions.update_meal(meal_id, payload))


@meals_bp.route("/<meal_id>", methods=["DELETE"])
@role_required(Role.TRAINER)
def delete_meal(meal_id):
    return to_response(meal_actions.delete_meal(meal_id))


@exercises_bp.route("", methods=["GET"])
@jwt_required()
def list_exercises():
    return to_response(exercise_actions.list_exercises())


@exercises_bp.route("", methods=["POST"])
@role_required(Role.TRAINER)
def create_exercise():
    payload = parse_json_request(request)
    return to_response(exercise_actions.create_exercise(payload), HTTPStatus.CREATED)


@exercises_bp.route("/<exercise_id>", methods=["GET"])
@jwt_required()
def get_exercise(exercise_id):
    return to_response(exercise_actions.get_exercise(exercise_id))


@exercises_bp.route("/<exercise_id>", methods=["PUT", "PATCH"])
@role_required(Role.TRAINER)
def update_exercise(exercise_id):
    payload = parse_json_request(request)
    return to_response(exercise_actions.update_exercise(exercise_id, payload))


@exercises_bp.route("/<exercise_id>", methods=["DELETE"])
@role_required(Role.TRAINER)
def delete_exercise(exercise_id):
    return to_response(exercise_actions.delete_exercise(exercise_id))
