# edumigrate/routers/universities.py
# Public read-only API: published universities only

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import NotFoundError, StorageError
from ..schemas.universities import UniversityRead, UniversityType
from ..services.resolver import resolve_university
from ..services.universities import list_universities

router = APIRouter(prefix="/api/universities", tags=["universities"])


@router.get("/", response_model=list[UniversityRead])
def list_published_universities(
    country: Optional[str] = None,
    type: Optional[UniversityType] = None,
    q: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return list_universities(db, published_only=True, country=country, type=type, q=q)


@router.get("/{segment}", response_model=UniversityRead)
def get_university_by_segment(segment: str, db: Session = Depends(get_db)):
    """Accepts both the SEO slug and legacy `<id>` / `<name>-<id>` segments."""
    try:
        obj = resolve_university(db, segment)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Not found")
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Storage error",
        )

    if obj.status != "published":
        raise HTTPException(status_code=404, detail="Not found")
    return obj
