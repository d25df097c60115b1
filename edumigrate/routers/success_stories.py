# edumigrate/routers/success_stories.py
# Public: GET active stories (newest first). Admin: list / get / POST / PATCH / DELETE

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.generated import SuccessStories as DBSuccessStories
from ..schemas.success_stories import SuccessStoryCreate, SuccessStoryRead, SuccessStoryUpdate
from ..services.about import list_success_stories
from ..utils.identifiers import utc_now

logger = logging.getLogger(__name__)

public_router = APIRouter(prefix="/api/success-stories", tags=["success-stories"])
router = APIRouter(prefix="/api/admin/success-stories", tags=["admin:success-stories"])

NOT_NULL_FIELDS = ("name", "country", "university", "program", "story", "rating", "is_active")


@public_router.get("/", response_model=list[SuccessStoryRead])
def list_public_success_stories(db: Session = Depends(get_db)):
    return list_success_stories(db, active_only=True)


@router.get("/", response_model=list[SuccessStoryRead])
def list_all_success_stories(db: Session = Depends(get_db)):
    return list_success_stories(db)


@router.post("/", response_model=SuccessStoryRead, status_code=status.HTTP_201_CREATED)
def create_success_story(data: SuccessStoryCreate, db: Session = Depends(get_db)):
    obj = DBSuccessStories(**data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    logger.info(f"Success story created: {obj.id}")
    return obj


@router.get("/{id}", response_model=SuccessStoryRead)
def get_success_story(id: str, db: Session = Depends(get_db)):
    obj = db.get(DBSuccessStories, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    return obj


@router.patch("/{id}", response_model=SuccessStoryRead)
def update_success_story(id: str, data: SuccessStoryUpdate, db: Session = Depends(get_db)):
    obj = db.get(DBSuccessStories, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")

    changes = data.model_dump(exclude_unset=True)
    for field in NOT_NULL_FIELDS:
        if field in changes and changes[field] is None:
            raise HTTPException(status_code=422, detail=f"{field} cannot be null")

    for field, value in changes.items():
        setattr(obj, field, value)

    obj.updated_at = utc_now()
    db.commit()
    db.refresh(obj)
    return obj


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_success_story(id: str, db: Session = Depends(get_db)):
    obj = db.get(DBSuccessStories, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    db.delete(obj)
    db.commit()
    logger.info(f"Success story deleted: {id}")
