"""Tests for the role model and the per-role routing registry."""

import pytest

from access.role_config import (
    ROLE_CONFIG,
    allowed_routes,
    config_for,
    config_for_name,
    dashboard_url,
    login_banner,
    login_url,
    login_url_for_path,
    path_allowed,
)
from access.roles import (
    ALL_ROLE_NAMES,
    REGISTERABLE_ROLES,
    Role,
    can_access,
    is_admin_or_master,
    is_in_role,
    role_display_name,
    role_id_of,
    role_name_of,
)
from utils.errors import InvalidRole


@pytest.mark.parametrize("role", list(Role))
def test_role_name_round_trip(role):
    assert role_id_of(role_name_of(role)) == role


@pytest.mark.parametrize("name", ALL_ROLE_NAMES)
def test_role_id_round_trip(name):
    assert role_name_of(role_id_of(name)) == name


def test_role_ids_are_stable():
    assert [int(r) for r in Role] == [1, 2, 3, 4]
    assert role_name_of(3) == "admin"
    assert role_display_name(Role.TRAINER) == "Trainer"


@pytest.mark.parametrize("bad", ["", "Admin", "owner", None, 7])
def test_unknown_role_name_rejected(bad):
    with pytest.raises(InvalidRole):
        role_id_of(bad)


@pytest.mark.parametrize("bad", [0, 5, -1, "x", None, True])
def test_unknown_role_id_rejected(bad):
    with pytest.raises(InvalidRole):
        role_name_of(bad)


@pytest.mark.parametrize("target", list(Role))
def test_master_can_access_every_role(target):
    assert can_access(Role.MASTER, target) is True


def test_hierarchy():
    assert can_access(Role.CUSTOMER, Role.TRAINER) is False
    assert can_access(Role.ADMIN, Role.CUSTOMER) is True
    assert can_access(Role.TRAINER, Role.TRAINER) is True
    assert can_access(Role.ADMIN, Role.MASTER) is False


def test_role_membership_helpers():
    assert is_in_role(Role.ADMIN, 3)
    assert not is_in_role(Role.ADMIN, Role.MASTER)
    assert is_admin_or_master(Role.MASTER)
    assert not is_admin_or_master(Role.TRAINER)


def test_master_is_not_self_registerable():
    assert "master" not in REGISTERABLE_ROLES
    assert set(REGISTERABLE_ROLES) < set(ALL_ROLE_NAMES)


def test_registry_has_one_entry_per_role():
    assert set(ROLE_CONFIG) == set(Role)
    with pytest.raises(TypeError):
        ROLE_CONFIG[Role.CUSTOMER] = None  # type: ignore[index]


def test_registry_values():
    assert dashboard_url(Role.CUSTOMER) == "/"
    assert login_url(Role.TRAINER) == "/trainer/login"
    assert allowed_routes(Role.ADMIN) == ("/admin",)
    assert dashboard_url(Role.MASTER) == "/admin"
    assert login_banner(Role.MASTER) == login_banner(Role.ADMIN)
    assert config_for_name("customer").login_banner == "/login-customer-banner.png"


def test_master_routes_cover_every_area():
    master_routes = allowed_routes(Role.MASTER)
    for role in (Role.CUSTOMER, Role.TRAINER, Role.ADMIN):
        for route in allowed_routes(role):
            assert route in master_routes
    assert "/blackbox" in master_routes
    assert "/blackbox" not in allowed_routes(Role.ADMIN)


def test_config_for_rejects_unknown_role():
    with pytest.raises(InvalidRole):
        config_for(9)


@pytest.mark.parametrize(
    "path, prefixes, expected",
    [
        ("/", ("/",), True),
        ("/admin", ("/",), False),
        ("/profile", ("/", "/profile"), True),
        ("/trainer/customers", ("/trainer",), True),
        ("/trainers", ("/trainer",), False),
        ("/admin/users", ("/admin",), True),
        ("/blackbox/users/3", ("/blackbox",), True),
    ],
)
def test_path_allowed_is_segment_aware(path, prefixes, expected):
    assert path_allowed(path, prefixes) is expected


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/admin/users", "/admin/login"),
        ("/trainer", "/trainer/login"),
        ("/profile", "/login"),
        ("/blackbox", "/login"),
    ],
)
def test_login_url_for_path(path, expected):
    assert login_url_for_path(path) == expected
