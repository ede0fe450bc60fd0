"""User management actions."""

from __future__ import annotations

from pydantic import EmailStr, Field, field_validator

from access.roles import ALL_ROLE_NAMES, DEFAULT_ROLE, ROLE_NAMES, role_id_of
from models.user import User
from orm import CrudResource, Schema, api_response
from utils.actions import server_action
from utils.errors import NotFound, UserExists


def _check_role_name(value: str | None) -> str:
    if value not in ALL_ROLE_NAMES:
        raise ValueError(f"Role must be one of: {', '.join(ALL_ROLE_NAMES)}.")
    return value


class UserCreate(Schema):
    email: EmailStr
    password: str | None = Field(default=None, min_length=6)
    name: str = Field(min_length=2)
    role: str = ROLE_NAMES[DEFAULT_ROLE]
    phone: str | None = None
    instagram: str | None = None
    avatar_url: str | None = None

    @field_validator("role")
    @classmethod
    def check_role(cls, value):
        return _check_role_name(value)


class UserUpdate(Schema):
    name: str | None = Field(default=None, min_length=2)
    role: str | None = None
    phone: str | None = None
    instagram: str | None = None
    avatar_url: str | None = None

    @field_validator("role")
    @classmethod
    def check_role(cls, value):
        return _check_role_name(value)


class UserResource(CrudResource):
    """Users carry a plain-text password on input that is stored hashed."""

    def apply(self, instance, values) -> None:
        values = dict(values)
        password = values.pop("password", None)
        super().apply(instance, values)
        if password:
            instance.set_password(password)


users = UserResource(
    User,
    UserCreate,
    UserUpdate,
    "user",
    default_sort=("-created_at", "-id"),
    conflict_error=UserExists,
)


def role_filter(role: str | None) -> dict:
    if not role:
        return {}
    return {"role_id": int(role_id_of(role))}


def find_by_email(email: str) -> User | None:
    return users.first({"email": (email or "").strip().lower()})


@server_action("Create user")
def create_user(data):
    return {"user": users.create(data).to_dict()}


@server_action("Get user")
def get_user(user_id):
    return {"user": users.get(user_id).to_dict()}


@server_action("Get user by email")
def get_user_by_email(email):
    user = find_by_email(email)
    if user is None:
        raise NotFound.for_resource("user")
    return {"user": user.to_dict()}


@server_action("Update user")
def update_user(user_id, data):
    return {"user": users.update(user_id, data).to_dict()}


@server_action("Delete user")
def delete_user(user_id):
    users.delete(user_id)
    return {}


@server_action("List users")
def list_users(role=None):
    return {"users": [user.to_dict() for user in users.list(role_filter(role))]}


@server_action("List users page")
def list_users_page(role=None, page=None, page_size=None):
    window = users.paginate(role_filter(role), page=page, page_size=page_size)
    return api_response(window.map(User.to_dict), "Users retrieved successfully")


@server_action("Count users")
def count_by_role():
    counts = {
        name: users.count({"role_id": int(role)}) for role, name in ROLE_NAMES.items()
    }
    return {"counts": counts, "total": sum(counts.values())}
