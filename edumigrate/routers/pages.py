# edumigrate/routers/pages.py
# Public HTML pages + admin shell pages (guarded by auth_middleware)

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import NotFoundError, StorageError
from ..models.generated import (
    ContactMessages as DBContactMessages,
    Consultations as DBConsultations,
    Universities as DBUniversities,
)
from ..services import pages
from ..services.about import list_success_stories, list_team_members
from ..services.resolver import resolve_university
from ..services.settings_store import get_company_settings
from ..services.universities import list_universities

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)

HOME_HIGHLIGHTS = 6


def _not_found() -> HTMLResponse:
    return HTMLResponse(pages.render_not_found_page(), status_code=404)


@router.get("/")
def home(db: Session = Depends(get_db)):
    highlights = list_universities(db, published_only=True, limit=HOME_HIGHLIGHTS)
    return pages.render_home_page(highlights, get_company_settings(db))


@router.get("/universities")
def universities_page(
    country: Optional[str] = None,
    type: Optional[str] = None,
    q: Optional[str] = None,
    db: Session = Depends(get_db),
):
    universities = list_universities(
        db, published_only=True, country=country, type=type, q=q
    )
    return pages.render_universities_page(universities, q=q or "", country=country or "")


@router.get("/universities/{segment}")
def university_page(segment: str, db: Session = Depends(get_db)):
    try:
        university = resolve_university(db, segment)
    except NotFoundError:
        return _not_found()
    except StorageError:
        logger.exception(f"University page failed: {segment}")
        return HTMLResponse(pages.render_not_found_page(), status_code=500)

    if university.status != "published":
        return _not_found()

    return pages.render_university_page(university)


@router.get("/about")
def about_page(db: Session = Depends(get_db)):
    return pages.render_about_page(
        list_team_members(db, active_only=True),
        list_success_stories(db, active_only=True),
        get_company_settings(db),
    )


@router.get("/contact")
def contact_page(db: Session = Depends(get_db)):
    return pages.render_contact_page(get_company_settings(db))


@router.get("/travel")
def travel_page():
    return pages.render_travel_page()


# ===== Admin shell =====

@router.get("/admin/login")
def admin_login():
    return pages.render_admin_login_page()


@router.get("/admin")
def admin_dashboard(db: Session = Depends(get_db)):
    def count(model, *criteria) -> int:
        return db.query(func.count()).select_from(model).filter(*criteria).scalar() or 0

    stats = {
        "universities_total": count(DBUniversities),
        "universities_published": count(DBUniversities, DBUniversities.status == "published"),
        "universities_without_slug": count(
            DBUniversities,
            (DBUniversities.slug.is_(None)) | (DBUniversities.slug == ""),
        ),
        "consultations_pending": count(DBConsultations, DBConsultations.status == "pending"),
        "messages_new": count(DBContactMessages, DBContactMessages.status == "new"),
    }
    return pages.render_admin_dashboard_page(stats)
