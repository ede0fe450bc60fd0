"""Customer subscription model."""

from datetime import date

from utils.dates import today

from . import db
from .mixins import TimestampMixin, isoformat

SUBSCRIPTION_STATUSES = ("active", "expired", "pending", "cancelled")


class Subscription(TimestampMixin, db.Model):
    """A gym plan assigned to a customer by an admin."""

    __tablename__ = "subscriptions"

    id = db.Column(db.Integer, primary_key=True)
    # Plain user ids; the store does not enforce referential integrity.
    customer_id = db.Column(db.Integer, nullable=False, index=True)
    assigned_by = db.Column(db.Integer, nullable=False)
    plan_name = db.Column(db.String(120), nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    status = db.Column(
        db.Enum(*SUBSCRIPTION_STATUSES, name="subscription_status_enum"),
        nullable=False,
        default="pending",
        index=True,
    )

    def is_current(self, on: date | None = None) -> bool:
        """Return True if the subscription is active on the given day."""

        on = on or today()
        return self.status == "active" and self.start_date <= on <= self.end_date

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "customerId": str(self.customer_id),
            "planName": self.plan_name,
            "startDate": isoformat(self.start_date),
            "endDate": isoformat(self.end_date),
            "status": self.status,
            "assignedBy": str(self.assigned_by),
            **self._timestamps(),
        }
