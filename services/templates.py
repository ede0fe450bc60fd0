"""Trainer meal and exercise template actions."""

from __future__ import annotations

from pydantic import Field

from models.template import ExerciseTemplate, MealTemplate
from orm import CrudResource, Schema, parse_id
from utils.actions import server_action

from .embedded import DayExercises, EmbeddedMeal


class MealTemplateCreate(Schema):
    name: str = Field(min_length=1)
    description: str | None = None
    meals: list[EmbeddedMeal] = Field(min_length=1)
    created_by: int = Field(gt=0)


class MealTemplateUpdate(Schema):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    meals: list[EmbeddedMeal] | None = Field(default=None, min_length=1)


class ExerciseTemplateCreate(Schema):
    name: str = Field(min_length=1)
    description: str | None = None
    exercises: list[DayExercises]
    created_by: int = Field(gt=0)


class ExerciseTemplateUpdate(Schema):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    exercises: list[DayExercises] | None = None


meal_templates = CrudResource(
    MealTemplate,
    MealTemplateCreate,
    MealTemplateUpdate,
    "template",
    default_sort=("-created_at", "-id"),
)
exercise_templates = CrudResource(
    ExerciseTemplate,
    ExerciseTemplateCreate,
    ExerciseTemplateUpdate,
    "template",
    default_sort=("-created_at", "-id"),
)


def _trainer_filter(trainer_id) -> dict:
    return {"created_by": parse_id(trainer_id)} if trainer_id else {}


@server_action("Create meal template")
def create_meal_template(data):
    return {"template": meal_templates.create(data).to_dict()}


@server_action("Get meal template")
def get_meal_template(template_id):
    return {"template": meal_templates.get(template_id).to_dict()}


@server_action("Update meal template")
def update_meal_template(template_id, data):
    return {"template": meal_templates.update(template_id, data).to_dict()}


@server_action("Delete meal template")
def delete_meal_template(template_id):
    meal_templates.delete(template_id)
    return {}


@server_action("List meal templates")
def list_meal_templates(trainer_id=None):
    items = meal_templates.list(_trainer_filter(trainer_id))
    return {"templates": [template.to_dict() for template in items]}


@server_action("Create exercise template")
def create_exercise_template(data):
    return {"template": exercise_templates.create(data).to_dict()}


@server_action("Get exercise template")
def get_exercise_template(template_id):
    return {"template": exercise_templates.get(template_id).to_dict()}


@server_action("Update exercise template")
def update_exercise_template(template_id, data):
    return {"template": exercise_templates.update(template_id, data).to_dict()}


@server_action("Delete exercise template")
def delete_exercise_template(template_id):
    exercise_templates.delete(template_id)
    return {}


@server_action("List exercise templates")
def list_exercise_templates(trainer_id=None):
    items = exercise_templates.list(_trainer_filter(trainer_id))
    return {"templates": [template.to_dict() for template in items]}
