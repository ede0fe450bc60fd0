"""Daily meal/exercise plan assigned to a customer."""

from . import db
from .mixins import TimestampMixin, isoformat


class DailyAssignment(TimestampMixin, db.Model):
    """One customer's plan for one day, with embedded meal/exercise copies."""

    __tablename__ = "daily_assignments"
    __table_args__ = (db.Index("ix_daily_assignments_customer_date", "customer_id", "date"),)

    id = db.Column(db.Integer, primary_key=True)
    customer_id = db.Column(db.Integer, nullable=False)
    assigned_by = db.Column(db.Integer, nullable=False, index=True)
    date = db.Column(db.Date, nullable=False)
    meals = db.Column(db.JSON, nullable=False, default=list)
    exercises = db.Column(db.JSON, nullable=False, default=list)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "customerId": str(self.customer_id),
            "date": isoformat(self.date),
            "meals": list(self.meals or []),
            "exercises": list(self.exercises or []),
            "assignedBy": str(self.assigned_by),
            **self._timestamps(),
        }
