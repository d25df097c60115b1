"""
edumigrate/services/resolver.py

Maps a public URL segment to a university record.

Two lookup paths, chosen up front and never mixed:
- legacy: segment ends in a storage id (old deep links) -> primary key lookup
- modern: anything else -> exact, case-sensitive match on `slug`
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import NotFoundError, StorageError
from ..models.generated import Universities as DBUniversities
from .slug import parse_legacy_id

logger = logging.getLogger(__name__)


def resolve_university(db: Session, segment: str) -> DBUniversities:
    legacy_id = parse_legacy_id(segment)

    try:
        if legacy_id is not None:
            obj = db.get(DBUniversities, legacy_id)
        else:
            obj = (
                db.query(DBUniversities)
                .filter(DBUniversities.slug == segment)
                .first()
            )
    except SQLAlchemyError as e:
        logger.error(f"University lookup failed for {segment!r}: {e}")
        raise StorageError(f"University lookup failed: {e}") from e

    if obj is None:
        path = "legacy id" if legacy_id is not None else "slug"
        logger.info(f"University not found by {path}: {segment!r}")
        raise NotFoundError(f"University not found: {segment}")

    return obj
