"""Role identifiers, names and the access hierarchy.

Role ids are what the ``users.role_id`` column stores. They never change,
even if a role is renamed.
"""

from __future__ import annotations

from enum import IntEnum

from utils.errors import InvalidRole


class Role(IntEnum):
    CUSTOMER = 1
    TRAINER = 2
    ADMIN = 3
    MASTER = 4


ROLE_NAMES: dict[Role, str] = {
    Role.CUSTOMER: "customer",
    Role.TRAINER: "trainer",
    Role.ADMIN: "admin",
    Role.MASTER: "master",
}

ROLE_IDS: dict[str, Role] = {name: role for role, name in ROLE_NAMES.items()}

ROLE_DISPLAY_NAMES: dict[Role, str] = {
    Role.CUSTOMER: "Customer",
    Role.TRAINER: "Trainer",
    Role.ADMIN: "Admin",
    Role.MASTER: "Master",
}

ROLE_HIERARCHY: dict[Role, int] = {
    Role.CUSTOMER: 1,
    Role.TRAINER: 2,
    Role.ADMIN: 3,
    Role.MASTER: 4,
}

DEFAULT_ROLE = Role.CUSTOMER
ALL_ROLE_NAMES = tuple(ROLE_NAMES.values())
# Admin and master accounts are only granted by an admin or master.
REGISTERABLE_ROLES = (
    ROLE_NAMES[Role.CUSTOMER],
    ROLE_NAMES[Role.TRAINER],
)


def as_role(role_id) -> Role:
    """Return the :class:`Role` for an int-like id or raise ``InvalidRole``."""

    if isinstance(role_id, bool):
        raise InvalidRole(f"Invalid role id: {role_id!r}.")
    try:
        return Role(int(role_id))
    except (TypeError, ValueError):
        raise InvalidRole(f"Invalid role id: {role_id!r}.") from None


def role_id_of(name: str) -> Role:
    """Return the role id for a role name."""

    role = ROLE_IDS.get(name) if isinstance(name, str) else None
    if role is None:
        raise InvalidRole(f"Invalid role name: {name!r}.")
    return role


def role_name_of(role_id) -> str:
    """Return the role name for a role id."""

    return ROLE_NAMES[as_role(role_id)]


def role_display_name(role_id) -> str:
    return ROLE_DISPLAY_NAMES[as_role(role_id)]


def is_valid_role_id(role_id) -> bool:
    try:
        as_role(role_id)
    except InvalidRole:
        return False
    return True


def is_valid_role_name(name) -> bool:
    return name in ROLE_IDS


def is_in_role(role_id, target) -> bool:
    return as_role(role_id) == as_role(target)


def is_admin_or_master(role_id) -> bool:
    return as_role(role_id) in (Role.ADMIN, Role.MASTER)


def can_access(user_role_id, target_role_id) -> bool:
    """Return True if a user holding ``user_role_id`` may act as ``target_role_id``.

    Master bypasses the hierarchy; everyone else needs an equal or higher rank.
    """

    user_role = as_role(user_role_id)
    target_role = as_role(target_role_id)
    if user_role is Role.MASTER:
        return True
    return ROLE_HIERARCHY[user_role] >= ROLE_HIERARCHY[target_role]
