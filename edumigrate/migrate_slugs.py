"""
Run the university slug migration from the command line.

Usage:
    edumigrate-migrate-slugs
    python -m edumigrate.migrate_slugs

Same routine as POST /api/admin/migrate-slugs; prints the per-record report.
"""

import logging
import sys

from .database import SessionLocal
from .services.slug_migration import migrate_all


def main() -> int:
    logging.basicConfig(level=logging.INFO)

    db = SessionLocal()
    try:
        summary = migrate_all(db)
    finally:
        db.close()

    for result in summary.results:
        if result.status == "success":
            print(f"✔ {result.name} -> {result.slug}")
        else:
            print(f"✘ {result.id} ({result.name}): {result.error}")

    print(f"{summary.message} Updated: {summary.updated}, errors: {summary.errors}")
    return 1 if summary.errors else 0


if __name__ == "__main__":
    sys.exit(main())
