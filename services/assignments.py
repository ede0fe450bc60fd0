"""Daily assignment actions, including the seven-day batch."""

from __future__ import annotations

import datetime

from pydantic import Field

from models import db
from models.daily_assignment import DailyAssignment
from orm import CrudResource, Schema, parse_id, validate
from utils.actions import server_action
from utils.dates import build_date_range_filter, parse_date, week_end
from utils.errors import ValidationError

from .embedded import DayExercises, DayMeals, EmbeddedExercise, EmbeddedMeal, by_day

DAYS_PER_WEEK = 7


class AssignmentCreate(Schema):
    customer_id: int = Field(gt=0)
    date: datetime.date
    meals: list[EmbeddedMeal] = Field(default_factory=list)
    exercises: list[EmbeddedExercise] = Field(default_factory=list)
    assigned_by: int = Field(gt=0)


class AssignmentUpdate(Schema):
    customer_id: int | None = Field(default=None, gt=0)
    date: datetime.date | None = None
    meals: list[EmbeddedMeal] | None = None
    exercises: list[EmbeddedExercise] | None = None
    assigned_by: int | None = Field(default=None, gt=0)


class WeeklyAssignmentInput(Schema):
    customer_id: int = Field(gt=0)
    start_date: datetime.date
    meals: list[DayMeals] = Field(default_factory=list)
    exercises: list[DayExercises] = Field(default_factory=list)
    assigned_by: int = Field(gt=0)


assignments = CrudResource(
    DailyAssignment,
    AssignmentCreate,
    AssignmentUpdate,
    "assignment",
    default_sort="date",
)


@server_action("Create daily assignment")
def create_assignment(data):
    return {"assignment": assignments.create(data).to_dict()}


@server_action("Create weekly assignments")
def create_weekly_assignments(data):
    """Create one assignment per day starting at ``startDate``.

    Days without a group get empty meal/exercise lists. All seven records are
    committed together.
    """

    values = validate(WeeklyAssignmentInput, data)
    meals = by_day(values["meals"], "meals")
    exercises = by_day(values["exercises"], "exercises")

    records = [
        assignments.build(
            {
                "customer_id": values["customer_id"],
                "date": values["start_date"] + datetime.timedelta(days=offset),
                "meals": meals.get(offset, []),
                "exercises": exercises.get(offset, []),
                "assigned_by": values["assigned_by"],
            }
        )
        for offset in range(DAYS_PER_WEEK)
    ]
    db.session.add_all(records)
    assignments.commit()
    return {"assignments": [record.to_dict() for record in records]}


@server_action("Get daily assignment")
def get_assignment(assignment_id):
    return {"assignment": assignments.get(assignment_id).to_dict()}


@server_action("Update daily assignment")
def update_assignment(assignment_id, data):
    return {"assignment": assignments.update(assignment_id, data).to_dict()}


@server_action("Delete daily assignment")
def delete_assignment(assignment_id):
    assignments.delete(assignment_id)
    return {}


@server_action("List daily assignments")
def list_assignments(customer_id=None, start_date=None, end_date=None, assigned_by=None):
    filters = build_date_range_filter(
        parse_date(start_date, "startDate"), parse_date(end_date, "endDate")
    )
    if customer_id:
        filters["customer_id"] = parse_id(customer_id)
    if assigned_by:
        filters["assigned_by"] = parse_id(assigned_by)
    return {"assignments": [a.to_dict() for a in assignments.list(filters)]}


@server_action("Get weekly assignments")
def get_weekly_assignments(customer_id, week_start):
    start = parse_date(week_start, "weekStart")
    if start is None:
        raise ValidationError("weekStart is required.", field="weekStart")
    filters = {
        "customer_id": parse_id(customer_id),
        **build_date_range_filter(start, week_end(start)),
    }
    return {"assignments": [a.to_dict() for a in assignments.list(filters)]}
