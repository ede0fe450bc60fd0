"""Database initialization and model exports."""

from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()

# Import models to register them with SQLAlchemy metadata.
from .user import User  # noqa: E402,F401
from .subscription import Subscription  # noqa: E402,F401
from .meal import Meal  # noqa: E402,F401
from .exercise import Exercise  # noqa: E402,F401
from .template import ExerciseTemplate, MealTemplate  # noqa: E402,F401
from .daily_assignment import DailyAssignment  # noqa: E402,F401

__all__ = [
    "db",
    "User",
    "Subscription",
    "Meal",
    "Exercise",
    "MealTemplate",
    "ExerciseTemplate",
    "DailyAssignment",
]
