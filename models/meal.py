"""Meal catalogue model."""

from . import db
from .mixins import TimestampMixin

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")


class Meal(TimestampMixin, db.Model):
    __tablename__ = "meals"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    calories = db.Column(db.Float, nullable=False, default=0)
    protein = db.Column(db.Float, nullable=False, default=0)
    carbs = db.Column(db.Float, nullable=False, default=0)
    fats = db.Column(db.Float, nullable=False, default=0)
    meal_type = db.Column(
        db.Enum(*MEAL_TYPES, name="meal_type_enum"), nullable=False, index=True
    )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
            "mealType": self.meal_type,
            **self._timestamps(),
        }
