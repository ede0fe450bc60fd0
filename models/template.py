"""Trainer meal and exercise templates.

Templates hold copies of the meals/exercises they were built from, not
references: editing a catalogue meal later leaves existing templates as they
were when created.
"""

from . import db
from .mixins import TimestampMixin


class MealTemplate(TimestampMixin, db.Model):
    __tablename__ = "meal_templates"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    meals = db.Column(db.JSON, nullable=False, default=list)
    created_by = db.Column(db.Integer, nullable=False, index=True)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "type": "meal",
            "name": self.name,
            "description": self.description,
            "meals": list(self.meals or []),
            "createdBy": str(self.created_by),
            **self._timestamps(),
        }


class ExerciseTemplate(TimestampMixin, db.Model):
    __tablename__ = "exercise_templates"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    # [{"day": 0-6, "exercises": [...]}, ...]
    exercises = db.Column(db.JSON, nullable=False, default=list)
    created_by = db.Column(db.Integer, nullable=False, index=True)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "type": "exercise",
            "name": self.name,
            "description": self.description,
            "exercises": list(self.exercises or []),
            "createdBy": str(self.created_by),
            **self._timestamps(),
        }
