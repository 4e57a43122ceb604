"""
Run the idempotent startup seeding (plans, first admin, demo data outside production).
Usage: python -m vahub.scripts.seed
"""
from vahub.config import settings
from vahub.database import SessionLocal, ensure_tables_exist
from vahub.services.bootstrap import seed_all


def main():
    ensure_tables_exist()
    db = SessionLocal()
    try:
        summary = seed_all(db, settings)
    finally:
        db.close()
    for key, value in summary.items():
        print(f"{key}: {value}")


if __name__ == "__main__":
    main()
