# edumigrate/routers/migrate_slugs.py
# POST = run slug migration, GET = 405

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import StorageError
from ..schemas.migration import MigrationSummary
from ..services.slug_migration import migrate_all

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/migrate-slugs", tags=["admin:migration"])


@router.post("", response_model=MigrationSummary)
def run_slug_migration(db: Session = Depends(get_db)):
    try:
        return migrate_all(db)
    except StorageError as e:
        logger.error(f"Slug migration failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Migration failed: {e}",
        )


@router.get("")
def migration_get_not_allowed():
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method not allowed. Use POST to run migration.",
    )
