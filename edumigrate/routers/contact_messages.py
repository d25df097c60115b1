# edumigrate/routers/contact_messages.py
# Public: POST (contact form). Admin: list / get / PATCH / DELETE

import logging
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.generated import ContactMessages as DBContactMessages
from ..schemas.contact_messages import (
    ContactMessageCreate,
    ContactMessageRead,
    ContactMessageUpdate,
    ContactStatus,
)
from ..services.settings_store import get_telegram_settings
from ..utils.identifiers import utc_now
from ..utils.telegram import format_contact_notification, notify

logger = logging.getLogger(__name__)

public_router = APIRouter(prefix="/api/contact", tags=["contact"])
router = APIRouter(prefix="/api/admin/contact-messages", tags=["admin:contact"])


@public_router.post("/", response_model=ContactMessageRead, status_code=status.HTTP_201_CREATED)
def create_contact_message(
    data: ContactMessageCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    obj = DBContactMessages(**data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    logger.info(f"Contact message created: {obj.id}")

    background_tasks.add_task(
        notify,
        get_telegram_settings(db),
        format_contact_notification(data.model_dump()),
    )
    return obj


@router.get("/", response_model=list[ContactMessageRead])
def list_contact_messages(
    status_filter: Optional[ContactStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    query = db.query(DBContactMessages)
    if status_filter:
        query = query.filter(DBContactMessages.status == status_filter)
    return query.order_by(DBContactMessages.created_at.desc()).all()


@router.get("/{id}", response_model=ContactMessageRead)
def get_contact_message(id: str, db: Session = Depends(get_db)):
    obj = db.get(DBContactMessages, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    return obj


@router.patch("/{id}", response_model=ContactMessageRead)
def update_contact_message(
    id: str,
    data: ContactMessageUpdate,
    db: Session = Depends(get_db),
):
    obj = db.get(DBContactMessages, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(obj, field, value)

    if data.status == "replied" and not obj.replied_at:
        obj.replied_at = utc_now()
    obj.updated_at = utc_now()
    db.commit()
    db.refresh(obj)
    return obj


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact_message(id: str, db: Session = Depends(get_db)):
    obj = db.get(DBContactMessages, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    db.delete(obj)
    db.commit()
