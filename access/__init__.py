"""Roles, role routing metadata and request authorisation."""

from .role_config import ROLE_CONFIG, RoleConfig, config_for
from .roles import Role, can_access, is_in_role, role_id_of, role_name_of

__all__ = [
    "ROLE_CONFIG",
    "Role",
    "RoleConfig",
    "can_access",
    "config_for",
    "is_in_role",
    "role_id_of",
    "role_name_of",
]
