"""Tests for the user administration API."""

from __future__ import annotations

import pytest


def test_admin_lists_users_with_pagination(client, make_user, auth_headers):
    admin_id = make_user("admin")
    for _ in range(5):
        make_user("customer")
    headers = auth_headers(admin_id, "admin")

    first = client.get("/api/users?role=customer&page=1&pageSize=2", headers=headers)
    last = client.get("/api/users?role=customer&page=3&pageSize=2", headers=headers)

    assert first.status_code == 200
    body = first.get_json()
    assert body["success"] is True
    assert body["total"] == 5
    assert body["page"] == 1
    assert body["pageSize"] == 2
    assert len(body["data"]) == 2
    assert len(last.get_json()["data"]) == 1
    assert last.get_json()["total"] == 5


def test_unpaginated_list_and_bad_page_arg(client, make_user, auth_headers):
    admin_id = make_user("admin")
    make_user("trainer")
    headers = auth_headers(admin_id, "admin")

    listed = client.get("/api/users", headers=headers).get_json()
    assert {u["role"] for u in listed["users"]} == {"admin", "trainer"}

    bad = client.get("/api/users?page=two", headers=headers)
    assert bad.status_code == 400


@pytest.mark.parametrize("role", ["customer", "trainer"])
def test_non_admins_cannot_list_users(client, make_user, auth_headers, role):
    user_id = make_user(role)

    response = client.get("/api/users", headers=auth_headers(user_id, role))

    assert response.status_code == 403
    assert response.get_json()["success"] is False


def test_admin_creates_user_but_not_master(client, make_user, auth_headers):
    admin_id = make_user("admin")
    headers = auth_headers(admin_id, "admin")

    created = client.post(
        "/api/users",
        json={"email": "t@example.com", "name": "Terry", "role": "trainer", "password": "Secret123"},
        headers=headers,
    )
    assert created.status_code == 201
    assert created.get_json()["user"]["roleId"] == 2

    master = client.post(
        "/api/users",
        json={"email": "m@example.com", "name": "Morgan", "role": "master"},
        headers=headers,
    )
    assert master.status_code == 403


def test_master_grants_master(client, make_user, auth_headers):
    master_id = make_user("master")

    created = client.post(
        "/api/users",
        json={"email": "m2@example.com", "name": "Morgan", "role": "master"},
        headers=auth_headers(master_id, "master"),
    )

    assert created.status_code == 201
    assert created.get_json()["user"]["role"] == "master"


def test_users_update_own_profile_but_not_role(client, make_user, auth_headers):
    customer_id = make_user("customer")
    headers = auth_headers(customer_id, "customer")

    updated = client.patch(
        f"/api/users/{customer_id}", json={"phone": "555-0100"}, headers=headers
    )
    assert updated.status_code == 200
    assert updated.get_json()["user"]["phone"] == "555-0100"

    promoted = client.patch(
        f"/api/users/{customer_id}", json={"role": "admin"}, headers=headers
    )
    assert promoted.status_code == 403


def test_admin_changes_role_and_deletes(client, make_user, auth_headers):
    admin_id = make_user("admin")
    customer_id = make_user("customer")
    headers = auth_headers(admin_id, "admin")

    promoted = client.put(
        f"/api/users/{customer_id}", json={"role": "trainer"}, headers=headers
    )
    assert promoted.get_json()["user"]["role"] == "trainer"
    assert promoted.get_json()["user"]["updatedAt"] is not None

    assert client.delete(f"/api/users/{customer_id}", headers=headers).status_code == 200
    gone = client.get(f"/api/users/{customer_id}", headers=headers)
    assert gone.status_code == 404
    assert gone.get_json() == {"success": False, "error": "User not found."}


def test_invalid_user_id(client, make_user, auth_headers):
    admin_id = make_user("admin")

    response = client.get("/api/users/abc", headers=auth_headers(admin_id, "admin"))

    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid id format."


def test_counts_by_role(client, make_user, auth_headers):
    admin_id = make_user("admin")
    make_user("customer")
    make_user("customer")

    counts = client.get("/api/users/counts", headers=auth_headers(admin_id, "admin")).get_json()

    assert counts["counts"] == {"customer": 2, "trainer": 0, "admin": 1, "master": 0}
    assert counts["total"] == 3


def test_admin_cannot_demote_or_edit_master(client, make_user, auth_headers):
    admin_id = make_user("admin")
    master_id = make_user("master")
    headers = auth_headers(admin_id, "admin")

    demoted = client.patch(
        f"/api/users/{master_id}", json={"role": "customer"}, headers=headers
    )
    renamed = client.patch(
        f"/api/users/{master_id}", json={"name": "Someone Else"}, headers=headers
    )
    deleted = client.delete(f"/api/users/{master_id}", headers=headers)

    assert demoted.status_code == 403
    assert renamed.status_code == 403
    assert deleted.status_code == 403

    master_headers = auth_headers(master_id, "master")
    still_master = client.get(f"/api/users/{master_id}", headers=master_headers)
    assert still_master.get_json()["user"]["role"] == "master"
    assert still_master.get_json()["user"]["name"] == "Test User"


def test_master_manages_other_masters(client, make_user, auth_headers):
    master_id = make_user("master")
    other_id = make_user("master")
    headers = auth_headers(master_id, "master")

    demoted = client.patch(
        f"/api/users/{other_id}", json={"role": "admin"}, headers=headers
    )

    assert demoted.status_code == 200
    assert demoted.get_json()["user"]["role"] == "admin"
    assert client.delete(f"/api/users/{other_id}", headers=headers).status_code == 200


def test_page_without_page_size_uses_configured_default(app, client, make_user, auth_headers):
    app.config["DEFAULT_PAGE_SIZE"] = 2
    admin_id = make_user("admin")
    for _ in range(3):
        make_user("customer")

    body = client.get(
        "/api/users?role=customer&page=2", headers=auth_headers(admin_id, "admin")
    ).get_json()

    assert body["pageSize"] == 2
    assert body["page"] == 2
    assert len(body["data"]) == 1
