"""
Create the tables and populate the categories table.

Run this from the backend root:

    (.venv) python seed_categories.py
    (.venv) python seed_categories.py "Art" "Fashion"

With no arguments the default category list is used. Names already in the
table are skipped.
"""

import sys

from app.db.init_db import DEFAULT_CATEGORIES, init_db, seed_categories
from app.db.session import SessionLocal


def main(argv: list[str]) -> None:
    names = [name.strip() for name in argv if name.strip()] or DEFAULT_CATEGORIES

    init_db()
    db = SessionLocal()
    try:
        print(f"[INFO] Seeding {len(names)} categories...")
        inserted = seed_categories(db, names)
        print(f"[INFO] Inserted {inserted} new categories rows")
        print("[INFO] Done.")
    finally:
        db.close()


if __name__ == "__main__":
    main(sys.argv[1:])
