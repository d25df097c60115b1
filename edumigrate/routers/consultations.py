# edumigrate/routers/consultations.py
# Public: POST (lead form). Admin: list / get / PATCH / DELETE

import logging
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.generated import Consultations as DBConsultations
from ..schemas.consultations import (
    ConsultationCreate,
    ConsultationRead,
    ConsultationStatus,
    ConsultationUpdate,
)
from ..services.settings_store import get_telegram_settings
from ..utils.identifiers import utc_now
from ..utils.telegram import format_consultation_notification, notify

logger = logging.getLogger(__name__)

public_router = APIRouter(prefix="/api/consultations", tags=["consultations"])
router = APIRouter(prefix="/api/admin/consultations", tags=["admin:consultations"])


@public_router.post("/", response_model=ConsultationRead, status_code=status.HTTP_201_CREATED)
def create_consultation(
    data: ConsultationCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    obj = DBConsultations(**data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    logger.info(f"Consultation request created: {obj.id}")

    background_tasks.add_task(
        notify,
        get_telegram_settings(db),
        format_consultation_notification(data.model_dump()),
    )
    return obj


@router.get("/", response_model=list[ConsultationRead])
def list_consultations(
    status_filter: Optional[ConsultationStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    query = db.query(DBConsultations)
    if status_filter:
        query = query.filter(DBConsultations.status == status_filter)
    return query.order_by(DBConsultations.created_at.desc()).all()


@router.get("/{id}", response_model=ConsultationRead)
def get_consultation(id: str, db: Session = Depends(get_db)):
    obj = db.get(DBConsultations, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    return obj


@router.patch("/{id}", response_model=ConsultationRead)
def update_consultation(
    id: str,
    data: ConsultationUpdate,
    db: Session = Depends(get_db),
):
    obj = db.get(DBConsultations, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(obj, field, value)

    obj.updated_at = utc_now()
    db.commit()
    db.refresh(obj)
    return obj


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_consultation(id: str, db: Session = Depends(get_db)):
    obj = db.get(DBConsultations, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    db.delete(obj)
    db.commit()
