"""Meal catalogue actions."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from models.meal import Meal
from orm import CrudResource, Schema
from utils.actions import server_action

MealType = Literal["breakfast", "lunch", "dinner", "snack"]


class MealCreate(Schema):
    name: str = Field(min_length=1)
    description: str | None = None
    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fats: float = Field(ge=0)
    meal_type: MealType


class MealUpdate(Schema):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    calories: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fats: float | None = Field(default=None, ge=0)
    meal_type: MealType | None = None


meals = CrudResource(Meal, MealCreate, MealUpdate, "meal", default_sort="name")


@server_action("Create meal")
def create_meal(data):
    return {"meal": meals.create(data).to_dict()}


@server_action("Get meal")
def get_meal(meal_id):
    return {"meal": meals.get(meal_id).to_dict()}


@server_action("Update meal")
def update_meal(meal_id, data):
    return {"meal": meals.update(meal_id, data).to_dict()}


@server_action("Delete meal")
def delete_meal(meal_id):
    meals.delete(meal_id)
    return {}


@server_action("List meals")
def list_meals(meal_type=None):
    filters = {"meal_type": meal_type} if meal_type else {}
    return {"meals": [meal.to_dict() for meal in meals.list(filters)]}
