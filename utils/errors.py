"""Error taxonomy shared by services, the query engine and the HTTP layer."""

from __future__ import annotations

from http import HTTPStatus

GENERIC_ERROR_MESSAGE = "An error occurred."


class AppError(Exception):
    """A failure whose message is safe to show to the caller."""

    status_code = HTTPStatus.BAD_REQUEST
    default_message = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Input failed schema constraints; carries the first failing field."""

    default_message = "Invalid input."

    def __init__(self, message: str | None = None, field: str | None = None):
        super().__init__(message)
        self.field = field


class InvalidId(AppError):
    default_message = "Invalid id format."


class InvalidRole(AppError):
    default_message = "Invalid role."


class NotFound(AppError):
    status_code = HTTPStatus.NOT_FOUND
    default_message = "Not found."

    @classmethod
    def for_resource(cls, resource_name: str) -> "NotFound":
        label = resource_name.replace("_", " ").strip().capitalize()
        return cls(f"{label} not found.")


class InvalidCredentials(AppError):
    """Login failure. Never says whether the email or the password was wrong."""

    status_code = HTTPStatus.UNAUTHORIZED
    default_message = "Invalid email or password."


class UserExists(AppError):
    status_code = HTTPStatus.CONFLICT
    default_message = "A user with that email already exists."


class PermissionDenied(AppError):
    status_code = HTTPStatus.FORBIDDEN
    default_message = "You do not have permission to perform this action."


class StorageError(Exception):
    """The store failed (connectivity, constraint, driver error).

    Not an :class:`AppError`: it is logged server-side and surfaced to callers
    only as :data:`GENERIC_ERROR_MESSAGE`.
    """
