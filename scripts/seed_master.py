"""Seed the master account."""

import os

from access.roles import Role
from app import create_app
from models import db
from models.user import User

MASTER_EMAIL = os.getenv("MASTER_EMAIL", "master@example.com")
MASTER_PASSWORD = os.getenv("MASTER_PASSWORD", "MasterPass123")
MASTER_NAME = os.getenv("MASTER_NAME", "Master")


def main() -> None:
    app = create_app()
    with app.app_context():
        master = User.query.filter_by(email=MASTER_EMAIL.lower()).first()
        if master is None:
            master = User(email=MASTER_EMAIL, name=MASTER_NAME)
            db.session.add(master)
            action = "created"
        else:
            master.touch()
            action = "updated"
        master.role_id = int(Role.MASTER)
        master.set_password(MASTER_PASSWORD)
        db.session.commit()
        print(f"Master user {action}: {master.email}")


if __name__ == "__main__":
    main()
