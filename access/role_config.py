"""Static per-role routing metadata.

Single source of truth for dashboards, login pages and the route prefixes
each role may open. Built once at import and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from .roles import ROLE_DISPLAY_NAMES, Role, as_role, role_id_of

MASTER_NAMESPACE = "/blackbox"


@dataclass(frozen=True)
class RoleConfig:
    role: Role
    dashboard_url: str
    login_url: str
    allowed_routes: tuple[str, ...]
    display_name: str
    login_banner: str


def _build_registry() -> Mapping[Role, RoleConfig]:
    customer = RoleConfig(
        role=Role.CUSTOMER,
        dashboard_url="/",
        login_url="/login",
        allowed_routes=("/", "/profile"),
        display_name=ROLE_DISPLAY_NAMES[Role.CUSTOMER],
        login_banner="/login-customer-banner.png",
    )
    trainer = RoleConfig(
        role=Role.TRAINER,
        dashboard_url="/trainer",
        login_url="/trainer/login",
        allowed_routes=("/trainer",),
        display_name=ROLE_DISPLAY_NAMES[Role.TRAINER],
        login_banner="/login-trainer-banner.png",
    )
    admin = RoleConfig(
        role=Role.ADMIN,
        dashboard_url="/admin",
        login_url="/admin/login",
        allowed_routes=("/admin",),
        display_name=ROLE_DISPLAY_NAMES[Role.ADMIN],
        login_banner="/login-admin-banner.png",
    )

    master_routes: list[str] = []
    for config in (customer, trainer, admin):
        for route in config.allowed_routes:
            if route not in master_routes:
                master_routes.append(route)
    master_routes.append(MASTER_NAMESPACE)

    master = RoleConfig(
        role=Role.MASTER,
        dashboard_url="/admin",
        login_url="/admin/login",
        allowed_routes=tuple(master_routes),
        display_name=ROLE_DISPLAY_NAMES[Role.MASTER],
        login_banner=admin.login_banner,
    )
    return MappingProxyType({c.role: c for c in (customer, trainer, admin, master)})


ROLE_CONFIG = _build_registry()


def config_for(role_id) -> RoleConfig:
    return ROLE_CONFIG[as_role(role_id)]


def config_for_name(role_name: str) -> RoleConfig:
    return ROLE_CONFIG[role_id_of(role_name)]


def dashboard_url(role_id) -> str:
    return config_for(role_id).dashboard_url


def login_url(role_id) -> str:
    return config_for(role_id).login_url


def allowed_routes(role_id) -> tuple[str, ...]:
    return config_for(role_id).allowed_routes


def login_banner(role_id) -> str:
    return config_for(role_id).login_banner


def login_url_for_path(path: str) -> str:
    """Pick the login page matching the area a visitor was trying to open."""

    if path_allowed(path, ("/admin",)):
        return login_url(Role.ADMIN)
    if path_allowed(path, ("/trainer",)):
        return login_url(Role.TRAINER)
    return login_url(Role.CUSTOMER)


def path_allowed(path: str, prefixes: Iterable[str]) -> bool:
    """Segment-aware prefix match.

    ``/trainer`` covers ``/trainer`` and ``/trainer/...`` but not
    ``/trainers``. The root prefix ``/`` only covers the root path.
    """

    for prefix in prefixes:
        if prefix == "/":
            if path == "/":
                return True
            continue
        base = prefix.rstrip("/")
        if path == base or path.startswith(base + "/"):
            return True
    return False
