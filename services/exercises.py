"""Exercise catalogue actions."""

from __future__ import annotations

from pydantic import Field

from models.exercise import Exercise
from orm import CrudResource, Schema
from utils.actions import server_action


class ExerciseCreate(Schema):
    name: str = Field(min_length=1)
    description: str | None = None
    sets: int | None = Field(default=None, ge=0)
    reps: int | None = Field(default=None, ge=0)
    duration: int | None = Field(default=None, ge=0)
    rest_time: int | None = Field(default=None, ge=0)
    muscle_groups: list[str] = Field(min_length=1)


class ExerciseUpdate(Schema):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    sets: int | None = Field(default=None, ge=0)
    reps: int | None = Field(default=None, ge=0)
    duration: int | None = Field(default=None, ge=0)
    rest_time: int | None = Field(default=None, ge=0)
    muscle_groups: list[str] | None = None


exercises = CrudResource(
    Exercise, ExerciseCreate, ExerciseUpdate, "exercise", default_sort="name"
)


@server_action("Create exercise")
def create_exercise(data):
    return {"exercise": exercises.create(data).to_dict()}


@server_action("Get exercise")
def get_exercise(exercise_id):
    return {"exercise": exercises.get(exercise_id).to_dict()}


@server_action("Update exercise")
def update_exercise(exercise_id, data):
    return {"exercise": exercises.update(exercise_id, data).to_dict()}


@server_action("Delete exercise")
def delete_exercise(exercise_id):
    exercises.delete(exercise_id)
    return {}


@server_action("List exercises")
def list_exercises():
    return {"exercises": [exercise.to_dict() for exercise in exercises.list()]}
