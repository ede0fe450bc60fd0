"""Role area pages.

Each page returns the data its screen needs as JSON. Access to everything
here except the login/register pages is decided by the route guard before
the view runs, so views read the caller from ``g.session_claims``.
"""

from __future__ import annotations

from datetime import timedelta

from flask import Blueprint, g, jsonify, request

from access.role_config import config_for
from access.roles import REGISTERABLE_ROLES, Role
from services import assignments as assignment_actions
from services import oauth
from services import subscriptions as subscription_actions
from services import templates as template_actions
from services import users as user_actions
from utils.actions import ActionResult, to_response
from utils.dates import today
from utils.request_validation import parse_page_args

pages_bp = Blueprint("pages", __name__)


def _caller_id() -> str:
    return g.session_claims["sub"]


def _week_start():
    current = today()
    return current - timedelta(days=current.weekday())


def _compose(**sections: ActionResult):
    """Merge several action results; the first failure is returned as is."""

    payload = {"success": True}
    for result in sections.values():
        if not result.ok:
            return to_response(result)
        payload.update({k: v for k, v in result.items() if k != "success"})
    return jsonify(payload)


def _login_page(role: Role):
    config = config_for(role)
    return jsonify(
        {
            "role": config.display_name,
            "banner": config.login_banner,
            "callbackUrl": request.args.get("callbackUrl"),
            "googleEnabled": oauth.is_enabled(),
        }
    )


@pages_bp.route("/login", methods=["GET"])
def customer_login():
    return _login_page(Role.CUSTOMER)


@pages_bp.route("/trainer/login", methods=["GET"])
def trainer_login():
    return _login_page(Role.TRAINER)


@pages_bp.route("/admin/login", methods=["GET"])
def admin_login():
    return _login_page(Role.ADMIN)


@pages_bp.route("/register", methods=["GET"])
def register_page():
    return jsonify({"roles": list(REGISTERABLE_ROLES), "googleEnabled": oauth.is_enabled()})


@pages_bp.route("/", methods=["GET"])
def customer_dashboard():
    """Profile, current subscription and this week's plan."""
    user_id = _caller_id()
    week_start = _week_start()
    user = user_actions.get_user(user_id)
    week = assignment_actions.get_weekly_assignments(user_id, week_start)
    for result in (user, week):
        if not result.ok:
            return to_response(result)
    active = subscription_actions.get_active_subscription(user_id)
    return jsonify(
        {
            "success": True,
            "user": user["user"],
            "subscription": active["subscription"] if active.ok else None,
            "weekStart": week_start.isoformat(),
            "assignments": week["assignments"],
        }
    )


@pages_bp.route("/profile", methods=["GET"])
def profile():
    return to_response(user_actions.get_user(_caller_id()))


@pages_bp.route("/trainer", methods=["GET"])
def trainer_dashboard():
    user_id = _caller_id()
    return _compose(
        user=user_actions.get_user(user_id),
        counts=user_actions.count_by_role(),
    )


@pages_bp.route("/trainer/customers", methods=["GET"])
def trainer_customers():
    return to_response(user_actions.list_users("customer"))


@pages_bp.route("/trainer/templates", methods=["GET"])
def trainer_templates():
    user_id = _caller_id()
    meal_templates = template_actions.list_meal_templates(user_id)
    exercise_templates = template_actions.list_exercise_templates(user_id)
    for result in (meal_templates, exercise_templates):
        if not result.ok:
            return to_response(result)
    return jsonify(
        {
            "success": True,
            "mealTemplates": meal_templates["templates"],
            "exerciseTemplates": exercise_templates["templates"],
        }
    )


@pages_bp.route("/trainer/assignments", methods=["GET"])
def trainer_assignments():
    return to_response(
        assignment_actions.list_assignments(
            request.args.get("customerId"),
            request.args.get("startDate"),
            request.args.get("endDate"),
            assigned_by=_caller_id(),
        )
    )


@pages_bp.route("/admin", methods=["GET"])
def admin_dashboard():
    users = user_actions.count_by_role()
    subscriptions = subscription_actions.count_by_status()
    for result in (users, subscriptions):
        if not result.ok:
            return to_response(result)
    return jsonify(
        {
            "success": True,
            "users": users["counts"],
            "subscriptions": subscriptions["counts"],
        }
    )


@pages_bp.route("/admin/users", methods=["GET"])
def admin_users():
    page, page_size = parse_page_args(request)
    return to_response(
        user_actions.list_users_page(request.args.get("role"), page, page_size)
    )


@pages_bp.route("/admin/subscriptions", methods=["GET"])
def admin_subscriptions():
    return to_response(
        subscription_actions.list_subscriptions(request.args.get("customerId"))
    )


@pages_bp.route("/blackbox", methods=["GET"])
def blackbox():
    """Master overview: every user plus record counts."""
    return _compose(
        users=user_actions.list_users(request.args.get("role")),
        counts=user_actions.count_by_role(),
    )


@pages_bp.route("/blackbox/users/<user_id>", methods=["GET"])
def blackbox_user(user_id):
    """One user with everything that references them."""
    user = user_actions.get_user(user_id)
    if not user.ok:
        return to_response(user)
    subscriptions = subscription_actions.list_subscriptions(user_id)
    assignments = assignment_actions.list_assignments(customer_id=user_id)
    meal_templates = template_actions.list_meal_templates(user_id)
    exercise_templates = template_actions.list_exercise_templates(user_id)
    for result in (subscriptions, assignments, meal_templates, exercise_templates):
        if not result.ok:
            return to_response(result)
    return jsonify(
        {
            "success": True,
            "user": user["user"],
            "subscriptions": subscriptions["subscriptions"],
            "assignments": assignments["assignments"],
            "mealTemplates": meal_templates["templates"],
            "exerciseTemplates": exercise_templates["templates"],
        }
    )
