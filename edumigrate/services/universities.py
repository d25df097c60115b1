# edumigrate/services/universities.py

from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from ..models.generated import Universities as DBUniversities
from .slug import parse_legacy_id


def university_path(obj: DBUniversities) -> str:
    """Public URL of a university.

    Falls back to the id form for unmigrated rows and for slugs the resolver
    would read as a legacy id (trailing word of 15+ letters).
    """
    if not obj.slug or parse_legacy_id(obj.slug) is not None:
        return f"/universities/{obj.id}"
    return f"/universities/{obj.slug}"


def list_universities(
    db: Session,
    *,
    published_only: bool = False,
    status: Optional[str] = None,
    country: Optional[str] = None,
    type: Optional[str] = None,
    q: Optional[str] = None,
    limit: Optional[int] = None,
) -> list[DBUniversities]:
    query = db.query(DBUniversities)

    if published_only:
        query = query.filter(DBUniversities.status == "published")
    elif status:
        query = query.filter(DBUniversities.status == status)
    if country and country != "all":
        query = query.filter(DBUniversities.country == country)
    if type and type != "all":
        query = query.filter(DBUniversities.type == type)
    if q and q.strip():
        pattern = f"%{q.strip()}%"
        query = query.filter(
            or_(
                DBUniversities.name.ilike(pattern),
                DBUniversities.country.ilike(pattern),
                DBUniversities.short_description.ilike(pattern),
            )
        )

    query = query.order_by(DBUniversities.created_at.desc(), DBUniversities.id)
    if limit:
        query = query.limit(limit)
    return query.all()
