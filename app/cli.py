"""CLI commands for the detailing booking API."""

import argparse
import getpass
import sys

from sqlalchemy.orm import Session

from app.config import settings
from app.database import SessionLocal
from app.models.user import User, UserRole
from app.seed_catalog import seed_catalog
from app.services.auth.passwords import hash_password
from app.services.auth.sessions import purge_expired_sessions


def create_admin(username: str, password: str | None = None) -> None:
    """Create an admin user."""
    db: Session = SessionLocal()

    try:
        # Check if username already exists
        existing = db.query(User).filter(User.username == username).first()
        if existing:
            print(f"Error: User '{username}' already exists.")
            sys.exit(1)

        if len(username) < settings.min_username_length:
            print(
                f"Error: Username must be at least {settings.min_username_length} characters."
            )
            sys.exit(1)

        # Get password if not provided
        if not password:
            password = getpass.getpass("Password: ")
            password_confirm = getpass.getpass("Confirm password: ")
            if password != password_confirm:
                print("Error: Passwords do not match.")
                sys.exit(1)

        if len(password) < settings.min_password_length:
            print(
                f"Error: Password must be at least {settings.min_password_length} characters."
            )
            sys.exit(1)

        user = User(
            username=username,
            password_hash=hash_password(password),
            role=UserRole.ADMIN,
        )
        db.add(user)
        db.commit()

        print(f"Admin user created successfully: {username}")

    finally:
        db.close()


def purge_sessions() -> None:
    """Delete expired session rows."""
    db: Session = SessionLocal()

    try:
        count = purge_expired_sessions(db)
        print(f"Purged {count} expired sessions.")
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description="Detailing booking API CLI")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # create-admin command
    create_admin_parser = subparsers.add_parser(
        "create-admin", help="Create an admin user"
    )
    create_admin_parser.add_argument(
        "--username", required=True, help="Admin username"
    )
    create_admin_parser.add_argument(
        "--password", help="Admin password (will prompt if not provided)"
    )

    subparsers.add_parser("seed", help="Seed default services and membership plans")
    subparsers.add_parser("purge-sessions", help="Delete expired sessions")

    args = parser.parse_args()

    if args.command == "create-admin":
        create_admin(args.username, args.password)
    elif args.command == "seed":
        seed_catalog()
    elif args.command == "purge-sessions":
        purge_sessions()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
