"""
edumigrate/services/slug_migration.py

Backfills `slug` on every university from its current name.

Rules:
- every record is visited once, in storage order
- existing slugs are overwritten, never skipped (re-runs recompute everything)
- a record without a name is reported as an error and skipped
- a failed write is rolled back, reported and does not stop the batch
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import StorageError, ValidationError
from ..models.generated import Universities as DBUniversities
from ..schemas.migration import MigrationResult, MigrationSummary
from ..utils.identifiers import utc_now
from .slug import slugify

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"


def _write_slug(db: Session, university_id: str, slug: str) -> None:
    try:
        (
            db.query(DBUniversities)
            .filter(DBUniversities.id == university_id)
            .update(
                {"slug": slug, "updated_at": utc_now()},
                synchronize_session=False,
            )
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError(str(e)) from e


def _migrate_one(db: Session, university_id: str, name: str | None) -> MigrationResult:
    if not name or not name.strip():
        raise ValidationError(f"Skipping university {university_id} - no name found")

    slug = slugify(name)
    _write_slug(db, university_id, slug)

    logger.info(f"Slug updated: {name} -> {slug}")
    return MigrationResult(id=university_id, name=name, slug=slug, status="success")


def migrate_all(db: Session) -> MigrationSummary:
    """Recompute and persist the slug of every university."""
    try:
        rows = (
            db.query(DBUniversities.id, DBUniversities.name)
            .order_by(DBUniversities.created_at, DBUniversities.id)
            .all()
        )
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to list universities: {e}") from e

    if not rows:
        return MigrationSummary(message="No universities found in database.")

    logger.info(f"Starting slug migration for {len(rows)} universities")

    summary = MigrationSummary(message="Migration completed successfully")

    for university_id, name in rows:
        try:
            result = _migrate_one(db, university_id, name)
        except (ValidationError, StorageError) as e:
            logger.warning(f"Slug migration failed for {university_id}: {e}")
            result = MigrationResult(
                id=university_id,
                name=name if name and name.strip() else UNKNOWN_NAME,
                status="error",
                error=str(e),
            )
            summary.errors += 1
        else:
            summary.updated += 1

        summary.results.append(result)

    logger.info(
        f"Slug migration finished: updated={summary.updated} errors={summary.errors}"
    )
    return summary
