"""Customer subscription actions."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import Field, model_validator

from models.subscription import SUBSCRIPTION_STATUSES, Subscription
from orm import CrudResource, Schema, parse_id
from utils.actions import server_action
from utils.dates import parse_date, today
from utils.errors import NotFound, ValidationError

SubscriptionStatus = Literal["active", "expired", "pending", "cancelled"]

DATE_ORDER_MESSAGE = "endDate must not be before startDate."


class SubscriptionCreate(Schema):
    customer_id: int = Field(gt=0)
    plan_name: str = Field(min_length=1)
    start_date: date
    end_date: date
    status: SubscriptionStatus = "pending"
    assigned_by: int = Field(gt=0)

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError(DATE_ORDER_MESSAGE)
        return self


class SubscriptionUpdate(Schema):
    plan_name: str | None = Field(default=None, min_length=1)
    start_date: date | None = None
    end_date: date | None = None
    status: SubscriptionStatus | None = None


class SubscriptionResource(CrudResource):
    def apply(self, instance, values) -> None:
        start = values.get("start_date", instance.start_date)
        end = values.get("end_date", instance.end_date)
        if start is not None and end is not None and end < start:
            raise ValidationError(DATE_ORDER_MESSAGE, field="endDate")
        super().apply(instance, values)


subscriptions = SubscriptionResource(
    Subscription,
    SubscriptionCreate,
    SubscriptionUpdate,
    "subscription",
    default_sort=("-created_at", "-id"),
)


@server_action("Create subscription")
def create_subscription(data):
    return {"subscription": subscriptions.create(data).to_dict()}


@server_action("Get subscription")
def get_subscription(subscription_id):
    return {"subscription": subscriptions.get(subscription_id).to_dict()}


@server_action("Update subscription")
def update_subscription(subscription_id, data):
    return {"subscription": subscriptions.update(subscription_id, data).to_dict()}


@server_action("Delete subscription")
def delete_subscription(subscription_id):
    subscriptions.delete(subscription_id)
    return {}


@server_action("List subscriptions")
def list_subscriptions(customer_id=None):
    filters = {}
    if customer_id:
        filters["customer_id"] = parse_id(customer_id)
    return {
        "subscriptions": [sub.to_dict() for sub in subscriptions.list(filters)]
    }


@server_action("Get active subscription")
def get_active_subscription(customer_id, on=None):
    """Return the customer's subscription that is active on ``on`` (default today)."""

    day = parse_date(on, "date") or today()
    subscription = subscriptions.first(
        {
            "customer_id": parse_id(customer_id),
            "status": "active",
            "start_date": {"lte": day},
            "end_date": {"gte": day},
        },
        sort="-start_date",
    )
    if subscription is None:
        raise NotFound("No active subscription found.")
    return {"subscription": subscription.to_dict()}


@server_action("Count subscriptions")
def count_by_status():
    counts = {
        status: subscriptions.count({"status": status})
        for status in SUBSCRIPTION_STATUSES
    }
    return {"counts": counts, "total": sum(counts.values())}
