# backend/seed_admin.py
"""Create the first admin account, or reset its password.

Usage:
    python seed_admin.py --username admin --email admin@example.com --password secret123
    python seed_admin.py --email admin@example.com --password newpass123 --reset-password
"""
import argparse
import os
import sys

# Add 'backend' folder to Python path
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from sqlalchemy import func
from sqlalchemy.orm import Session

from database import SessionLocal, init_db
from models.users import User
from utils.hashing import get_password_hash

DEFAULT_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
DEFAULT_EMAIL = os.getenv("ADMIN_EMAIL", "admin@example.com")
DEFAULT_PASSWORD = os.getenv("ADMIN_PASSWORD")


def seed_admin(db: Session, username: str, email: str, password: str) -> User:
    """Ensure an admin account exists for ``email``.

    An existing account is promoted to admin and keeps its password;
    otherwise a new admin account is created.
    """
    email = email.strip().lower()
    user = db.query(User).filter(func.lower(User.email) == email).first()

    if user:
        print(f"User with email {email} already exists.")
        if not user.is_admin:
            user.is_admin = True
            db.commit()
            print("Admin privileges granted.")
        else:
            print("User already has admin privileges.")
        return user

    user = User(
        username=username,
        email=email,
        password=get_password_hash(password),
        is_admin=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    print(f"Admin user created with ID: {user.id}")
    return user


def reset_password(db: Session, email: str, password: str):
    """Replace the password of the admin with the given email; None if absent."""
    user = (
        db.query(User)
        .filter(func.lower(User.email) == email.strip().lower(), User.is_admin.is_(True))
        .first()
    )
    if not user:
        print(f"No admin user with email {email}.")
        return None

    user.password = get_password_hash(password)
    db.commit()
    print(f"Password updated for {user.username}.")
    return user


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed or repair the admin account")
    parser.add_argument("--username", default=DEFAULT_USERNAME)
    parser.add_argument("--email", default=DEFAULT_EMAIL)
    parser.add_argument("--password", default=DEFAULT_PASSWORD)
    parser.add_argument("--reset-password", action="store_true", help="only replace the password of an existing admin")
    args = parser.parse_args(argv)

    if not args.password or len(args.password) < 8:
        print("A password of at least 8 characters is required (--password or ADMIN_PASSWORD).")
        return 1

    init_db()
    with SessionLocal() as db:
        if args.reset_password:
            return 0 if reset_password(db, args.email, args.password) else 1
        seed_admin(db, args.username, args.email, args.password)
    return 0


if __name__ == "__main__":
    sys.exit(main())
