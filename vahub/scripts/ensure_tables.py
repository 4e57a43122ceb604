"""
Create any missing tables.
Usage: python -m vahub.scripts.ensure_tables
"""
from vahub.database import ensure_tables_exist


def main():
    created = ensure_tables_exist()
    if created:
        print(f"Created tables: {', '.join(created)}")
    else:
        print("DB table check complete: nothing to create.")


if __name__ == "__main__":
    main()
