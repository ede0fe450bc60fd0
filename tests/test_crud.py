"""Tests for the generic CRUD resource and the action envelope."""

import logging

import pytest

from orm import parse_id
from services import meals as meal_actions
from services.meals import meals
from utils.actions import server_action
from utils.errors import InvalidId, NotFound, StorageError, ValidationError

OATS = {
    "name": "Oats",
    "description": "Rolled oats with milk",
    "calories": 350,
    "protein": 12,
    "carbs": 60,
    "fats": 6,
    "mealType": "breakfast",
}


@pytest.mark.parametrize("raw, expected", [("1", 1), (42, 42), (" 7 ", 7)])
def test_parse_id_accepts_integer_ids(raw, expected):
    assert parse_id(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", None, "0", -1, True, "1.5", "١"])
def test_parse_id_rejects_malformed_ids(raw):
    with pytest.raises(InvalidId):
        parse_id(raw)


def test_create_get_update_round_trip(app):
    with app.app_context():
        meal = meals.create(OATS)
        assert meal.id is not None
        assert meal.created_at is not None
        assert meal.updated_at is None

        fetched = meals.get(str(meal.id)).to_dict()
        assert fetched["name"] == "Oats"
        assert fetched["mealType"] == "breakfast"
        assert fetched["id"] == str(meal.id)

        record = meals.update(meal.id, {"calories": 400})
        assert record.updated_at > record.created_at

        updated = record.to_dict()
        assert updated["calories"] == 400
        assert updated["name"] == "Oats"
        assert updated["updatedAt"] > updated["createdAt"]


def test_create_reports_first_failing_field(app):
    with app.app_context():
        with pytest.raises(ValidationError) as excinfo:
            meals.create({**OATS, "calories": -5})
        assert excinfo.value.field == "calories"
        assert excinfo.value.message.startswith("calories:")


def test_update_rejects_null_for_required_column(app):
    with app.app_context():
        meal = meals.create(OATS)
        with pytest.raises(ValidationError):
            meals.update(meal.id, {"name": None})


def test_update_missing_record(app):
    with app.app_context():
        with pytest.raises(NotFound) as excinfo:
            meals.update(999, {"calories": 1})
        assert excinfo.value.message == "Meal not found."


def test_delete_then_get_is_not_found(app):
    with app.app_context():
        meal = meals.create(OATS)
        meals.delete(meal.id)
        with pytest.raises(NotFound):
            meals.get(meal.id)
        with pytest.raises(NotFound):
            meals.delete(meal.id)


def test_invalid_id_fails_before_lookup(app):
    with app.app_context():
        with pytest.raises(InvalidId):
            meals.get("not-an-id")


def test_actions_return_uniform_envelopes(app):
    with app.app_context():
        created = meal_actions.create_meal(OATS)
        assert created["success"] is True
        meal_id = created["meal"]["id"]

        missing = meal_actions.get_meal("12345")
        assert missing == {"success": False, "error": "Meal not found."}
        assert missing.status_code == 404

        invalid = meal_actions.get_meal("zzz")
        assert invalid == {"success": False, "error": "Invalid id format."}

        listed = meal_actions.list_meals()
        assert [m["id"] for m in listed["meals"]] == [meal_id]

        assert meal_actions.delete_meal(meal_id) == {"success": True}


def test_list_meals_sorted_by_name_and_filtered(app):
    with app.app_context():
        for name, meal_type in (("Salad", "lunch"), ("Eggs", "breakfast"), ("Apple", "snack")):
            meal_actions.create_meal({**OATS, "name": name, "mealType": meal_type})

        names = [m["name"] for m in meal_actions.list_meals()["meals"]]
        assert names == ["Apple", "Eggs", "Salad"]

        lunches = meal_actions.list_meals("lunch")["meals"]
        assert [m["name"] for m in lunches] == ["Salad"]


def test_server_action_hides_unexpected_errors(app, caplog):
    @server_action("Explode")
    def explode():
        raise StorageError("connection refused")

    with app.app_context():
        with caplog.at_level(logging.ERROR):
            result = explode()

    assert result == {"success": False, "error": "An error occurred."}
    assert result.status_code == 500
    assert "Explode error" in caplog.text
    assert "connection refused" in caplog.text
