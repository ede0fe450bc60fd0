"""User model definition."""

from sqlalchemy.orm import validates

from access.roles import DEFAULT_ROLE, as_role, role_id_of, role_name_of
from utils.passwords import check_password, hash_password

from . import db
from .mixins import TimestampMixin


class User(TimestampMixin, db.Model):
    """A customer, trainer, admin or master account.

    ``password_hash`` is empty for accounts created through OAuth.
    """

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=True)
    name = db.Column(db.String(120), nullable=False)
    role_id = db.Column(
        db.Integer, nullable=False, default=int(DEFAULT_ROLE), index=True
    )
    phone = db.Column(db.String(40), nullable=True)
    instagram = db.Column(db.String(120), nullable=True)
    avatar_url = db.Column(db.String(512), nullable=True)

    @validates("email")
    def _normalize_email(self, key, value):
        return (value or "").strip().lower()

    @validates("role_id")
    def _validate_role_id(self, key, value):
        return int(as_role(value))

    @property
    def role(self) -> str:
        return role_name_of(self.role_id)

    @role.setter
    def role(self, role_name: str) -> None:
        self.role_id = int(role_id_of(role_name))

    def set_password(self, password: str) -> None:
        """Hash and store the password."""

        self.password_hash = hash_password(password)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        return check_password(password, self.password_hash)

    @property
    def has_password(self) -> bool:
        return bool(self.password_hash)

    def to_dict(self) -> dict:
        """Public profile. Never includes the password hash."""

        return {
            "id": str(self.id),
            "email": self.email,
            "name": self.name,
            "roleId": self.role_id,
            "role": self.role,
            "phone": self.phone,
            "instagram": self.instagram,
            "avatarUrl": self.avatar_url,
            **self._timestamps(),
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"
