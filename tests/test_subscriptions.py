"""Tests for subscription actions and the subscription API."""

from __future__ import annotations

from datetime import date

import pytest

from services import subscriptions as subscription_actions


def _plan(**overrides):
    payload = {
        "customerId": "5",
        "planName": "Monthly",
        "startDate": "2024-01-01",
        "endDate": "2024-01-31",
        "status": "active",
        "assignedBy": "1",
    }
    payload.update(overrides)
    return payload


def test_create_and_read_back(app):
    with app.app_context():
        created = subscription_actions.create_subscription(_plan())
        fetched = subscription_actions.get_subscription(created["subscription"]["id"])

    sub = fetched["subscription"]
    assert sub["planName"] == "Monthly"
    assert sub["startDate"] == "2024-01-01"
    assert sub["customerId"] == "5"
    assert sub["createdAt"] is not None


@pytest.mark.parametrize(
    "overrides",
    [
        {"endDate": "2023-12-31"},
        {"status": "paused"},
        {"planName": ""},
        {"startDate": "yesterday"},
    ],
)
def test_create_rejects_bad_input(app, overrides):
    with app.app_context():
        result = subscription_actions.create_subscription(_plan(**overrides))

    assert result["success"] is False
    assert result.status_code == 400


def test_update_keeps_dates_ordered(app):
    with app.app_context():
        sub_id = subscription_actions.create_subscription(_plan())["subscription"]["id"]

        bad = subscription_actions.update_subscription(sub_id, {"endDate": "2023-06-01"})
        good = subscription_actions.update_subscription(sub_id, {"status": "expired"})

    assert bad == {"success": False, "error": "endDate must not be before startDate."}
    assert good["subscription"]["status"] == "expired"
    assert good["subscription"]["endDate"] == "2024-01-31"


def test_active_subscription_lookup(app):
    with app.app_context():
        subscription_actions.create_subscription(_plan(status="pending"))
        subscription_actions.create_subscription(
            _plan(planName="Quarterly", startDate="2024-01-10", endDate="2024-04-10")
        )

        found = subscription_actions.get_active_subscription("5", date(2024, 2, 1))
        missing = subscription_actions.get_active_subscription("5", date(2025, 1, 1))

    assert found["subscription"]["planName"] == "Quarterly"
    assert missing == {"success": False, "error": "No active subscription found."}


def test_list_newest_first_and_counts(app):
    with app.app_context():
        for name in ("First", "Second"):
            subscription_actions.create_subscription(_plan(planName=name))
        subscription_actions.create_subscription(_plan(customerId="6", status="cancelled"))

        mine = subscription_actions.list_subscriptions("5")["subscriptions"]
        counts = subscription_actions.count_by_status()

    assert [s["planName"] for s in mine] == ["Second", "First"]
    assert counts["counts"]["active"] == 2
    assert counts["counts"]["cancelled"] == 1
    assert counts["total"] == 3


def test_customers_only_see_their_own(client, make_user, auth_headers):
    admin_id = make_user("admin")
    customer_id = make_user("customer")
    other_id = make_user("customer")

    payload = _plan(customerId=str(customer_id))
    del payload["assignedBy"]
    created = client.post(
        "/api/subscriptions", json=payload, headers=auth_headers(admin_id, "admin")
    )
    assert created.status_code == 201
    sub = created.get_json()["subscription"]
    assert sub["assignedBy"] == str(admin_id)

    own = client.get(f"/api/subscriptions/{sub['id']}", headers=auth_headers(customer_id, "customer"))
    assert own.status_code == 200

    foreign = client.get(f"/api/subscriptions/{sub['id']}", headers=auth_headers(other_id, "customer"))
    assert foreign.status_code == 403

    everything = client.get("/api/subscriptions", headers=auth_headers(customer_id, "customer"))
    assert everything.status_code == 403

    write = client.post(
        "/api/subscriptions",
        json=_plan(customerId=str(customer_id)),
        headers=auth_headers(customer_id, "customer"),
    )
    assert write.status_code == 403
