"""Tests for filtered, sorted and page-windowed queries."""

from datetime import date

import pytest

from models import db
from models.daily_assignment import DailyAssignment
from models.meal import Meal
from orm.query import MAX_PAGE_SIZE, Page, QueryEngine, api_response, normalize_window
from utils.dates import build_date_range_filter
from utils.errors import ValidationError


def _seed_meals(count: int) -> None:
    for index in range(count):
        db.session.add(
            Meal(
                name=f"Meal {index:02d}",
                calories=100 + index,
                protein=10,
                carbs=20,
                fats=5,
                meal_type="lunch" if index % 2 else "dinner",
            )
        )
    db.session.commit()


def test_pages_split_matches_and_keep_total(app):
    with app.app_context():
        _seed_meals(25)
        engine = QueryEngine()

        sizes = []
        seen = set()
        for page in (1, 2, 3):
            window = engine.paginate(Meal, sort="name", page=page, page_size=10)
            assert window.total == 25
            sizes.append(len(window.items))
            seen.update(meal.id for meal in window.items)

        assert sizes == [10, 10, 5]
        assert len(seen) == 25
        assert engine.paginate(Meal, page=4, page_size=10).items == []


def test_paginate_applies_filters_and_sort(app):
    with app.app_context():
        _seed_meals(10)
        engine = QueryEngine(db.session)

        window = engine.paginate(
            Meal, {"meal_type": "lunch"}, sort="-calories", page=1, page_size=3
        )

        assert window.total == 5
        assert [meal.calories for meal in window.items] == [109, 107, 105]
        assert window.pages == 2


def test_defaults_and_clamping():
    assert normalize_window() == (1, 10)
    assert normalize_window(0, 10) == (1, 10)
    assert normalize_window(-3, 0) == (1, 1)
    assert normalize_window(2, 10_000) == (2, MAX_PAGE_SIZE)
    assert normalize_window("3", "5") == (3, 5)
    with pytest.raises(ValidationError):
        normalize_window("abc", 10)


def test_default_page_size_follows_app_config(app):
    app.config["DEFAULT_PAGE_SIZE"] = 25
    with app.app_context():
        assert normalize_window() == (1, 25)
        assert normalize_window(2, 5) == (2, 5)


@pytest.mark.parametrize(
    "filters",
    [
        {"nonexistent": 1},
        {"calories": {"between": [1, 2]}},
    ],
)
def test_bad_filters_raise_validation_error(app, filters):
    with app.app_context():
        with pytest.raises(ValidationError):
            QueryEngine().all(Meal, filters)


def test_unknown_sort_field_rejected(app):
    with app.app_context():
        with pytest.raises(ValidationError):
            QueryEngine().all(Meal, sort="-nope")


def test_operator_filters(app):
    with app.app_context():
        _seed_meals(6)
        engine = QueryEngine()

        assert engine.count(Meal, {"calories": {"gte": 103}}) == 3
        assert engine.count(Meal, {"calories": {"gt": 100, "lt": 104}}) == 3
        assert engine.count(Meal, {"meal_type": {"in": ["lunch"]}}) == 3
        assert engine.count(Meal, {"meal_type": {"ne": "lunch"}}) == 3
        assert engine.count(Meal, {"description": None}) == 6
        assert engine.first(Meal, sort="-calories").calories == 105


def test_date_range_filter(app):
    with app.app_context():
        for day in range(1, 11):
            db.session.add(
                DailyAssignment(
                    customer_id=1,
                    assigned_by=2,
                    date=date(2024, 1, day),
                    meals=[],
                    exercises=[],
                )
            )
        db.session.commit()

        filters = build_date_range_filter(date(2024, 1, 3), date(2024, 1, 5))
        found = QueryEngine().all(DailyAssignment, filters, sort="date")

        assert [a.date.day for a in found] == [3, 4, 5]
        assert build_date_range_filter() == {}


def test_page_map_and_envelope():
    window = Page(items=[1, 2], page=2, page_size=2, total=5)
    doubled = window.map(lambda item: item * 2)

    assert doubled.items == [2, 4]
    assert doubled.total == 5
    assert window.pages == 3
    assert api_response(doubled) == {
        "message": "retrieved successfully",
        "code": 200,
        "data": [2, 4],
        "page": 2,
        "pageSize": 2,
        "total": 5,
    }
