"""
Create an admin account. Existing accounts are never promoted: roles are fixed at registration.
Usage: python -m vahub.scripts.create_admin <email> <name> <password>
"""
import sys

from vahub.core.errors import DuplicateEmail
from vahub.database import SessionLocal, ensure_tables_exist
from vahub.models.enums import UserRole, UserStatus
from vahub.repos.user_repo import create


def main():
    if len(sys.argv) < 4:
        print("Usage: python -m vahub.scripts.create_admin <email> <name> <password>")
        sys.exit(1)
    email, name, password = sys.argv[1].strip(), sys.argv[2].strip(), sys.argv[3]
    if len(password) < 8:
        print("Password must be at least 8 characters")
        sys.exit(1)
    ensure_tables_exist()
    db = SessionLocal()
    try:
        user = create(db, name, email, password, UserRole.ADMIN, status=UserStatus.ACTIVE)
        print(f"Created admin {user.email} ({user.id}).")
    except DuplicateEmail:
        print(f"Email already registered: {email}")
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
