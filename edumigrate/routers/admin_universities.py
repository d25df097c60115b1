# edumigrate/routers/admin_universities.py
# Slug is assigned on create only; renames keep the existing slug so shared links stay valid

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.generated import Universities as DBUniversities
from ..schemas.universities import (
    BulkDelete,
    BulkResult,
    BulkStatusUpdate,
    UniversityCreate,
    UniversityRead,
    UniversityStatus,
    UniversityType,
    UniversityUpdate,
)
from ..services.slug import slugify
from ..services.universities import list_universities
from ..utils.identifiers import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/universities", tags=["admin:universities"])


@router.get("/", response_model=list[UniversityRead])
def list_all_universities(
    status_filter: Optional[UniversityStatus] = Query(None, alias="status"),
    country: Optional[str] = None,
    type: Optional[UniversityType] = None,
    q: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return list_universities(
        db, status=status_filter, country=country, type=type, q=q
    )


@router.get("/{id}", response_model=UniversityRead)
def get_university(id: str, db: Session = Depends(get_db)):
    obj = db.get(DBUniversities, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    return obj


@router.post("/", response_model=UniversityRead, status_code=status.HTTP_201_CREATED)
def create_university(
    data: UniversityCreate,
    db: Session = Depends(get_db),
):
    obj = DBUniversities(**data.model_dump(), slug=slugify(data.name) or None)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    logger.info(f"University created: {obj.id} slug={obj.slug}")
    return obj


@router.patch("/{id}", response_model=UniversityRead)
def update_university(
    id: str,
    data: UniversityUpdate,
    db: Session = Depends(get_db),
):
    obj = db.get(DBUniversities, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(obj, field, value)

    obj.updated_at = utc_now()
    db.commit()
    db.refresh(obj)
    return obj


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_university(id: str, db: Session = Depends(get_db)):
    obj = db.get(DBUniversities, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    db.delete(obj)
    db.commit()


@router.post("/bulk-delete", response_model=BulkResult)
def bulk_delete_universities(data: BulkDelete, db: Session = Depends(get_db)):
    result = BulkResult()
    for university_id in data.ids:
        obj = db.get(DBUniversities, university_id)
        if not obj:
            result.failed.append(university_id)
            continue
        try:
            db.delete(obj)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.warning(f"Bulk delete failed for {university_id}: {e}")
            result.failed.append(university_id)
        else:
            result.success.append(university_id)
    return result


@router.post("/bulk-status", response_model=BulkResult)
def bulk_update_status(data: BulkStatusUpdate, db: Session = Depends(get_db)):
    result = BulkResult()
    for university_id in data.ids:
        obj = db.get(DBUniversities, university_id)
        if not obj:
            result.failed.append(university_id)
            continue
        try:
            obj.status = data.status
            obj.updated_at = utc_now()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.warning(f"Bulk status update failed for {university_id}: {e}")
            result.failed.append(university_id)
        else:
            result.success.append(university_id)
    return result
