"""Exercise catalogue model."""

from . import db
from .mixins import TimestampMixin


class Exercise(TimestampMixin, db.Model):
    __tablename__ = "exercises"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    sets = db.Column(db.Integer, nullable=True)
    reps = db.Column(db.Integer, nullable=True)
    duration = db.Column(db.Integer, nullable=True)  # minutes
    rest_time = db.Column(db.Integer, nullable=True)  # seconds
    muscle_groups = db.Column(db.JSON, nullable=False, default=list)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "sets": self.sets,
            "reps": self.reps,
            "duration": self.duration,
            "restTime": self.rest_time,
            "muscleGroups": list(self.muscle_groups or []),
            **self._timestamps(),
        }
