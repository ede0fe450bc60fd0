"""Schemas for meal and exercise copies embedded in templates and assignments."""

from __future__ import annotations

from pydantic import Field, field_validator

from orm import EmbeddedSchema, Schema

from .meals import MealType


class _Embedded(EmbeddedSchema):
    id: str | int | None = None

    @field_validator("id")
    @classmethod
    def stringify_id(cls, value):
        return None if value is None else str(value)


class EmbeddedMeal(_Embedded):
    name: str = Field(min_length=1)
    description: str | None = None
    calories: float = Field(default=0, ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fats: float = Field(default=0, ge=0)
    meal_type: MealType | None = None


class EmbeddedExercise(_Embedded):
    name: str = Field(min_length=1)
    description: str | None = None
    sets: int | None = Field(default=None, ge=0)
    reps: int | None = Field(default=None, ge=0)
    duration: int | None = Field(default=None, ge=0)
    rest_time: int | None = Field(default=None, ge=0)
    muscle_groups: list[str] = Field(default_factory=list)


class DayMeals(Schema):
    day: int = Field(ge=0, le=6)
    meals: list[EmbeddedMeal] = Field(default_factory=list)


class DayExercises(Schema):
    day: int = Field(ge=0, le=6)
    exercises: list[EmbeddedExercise] = Field(default_factory=list)


def by_day(groups: list[dict], key: str) -> dict[int, list]:
    """Map day offset to its items. The first group listed for a day wins."""

    result: dict[int, list] = {}
    for group in groups or []:
        result.setdefault(group["day"], list(group.get(key) or []))
    return result
