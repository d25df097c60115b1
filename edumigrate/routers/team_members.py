# edumigrate/routers/team_members.py
# Public: GET active members (display order). Admin: list / get / POST / PATCH / DELETE

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.generated import TeamMembers as DBTeamMembers
from ..schemas.team_members import TeamMemberCreate, TeamMemberRead, TeamMemberUpdate
from ..services.about import list_team_members
from ..utils.identifiers import utc_now

logger = logging.getLogger(__name__)

public_router = APIRouter(prefix="/api/team-members", tags=["team"])
router = APIRouter(prefix="/api/admin/team-members", tags=["admin:team"])

NOT_NULL_FIELDS = ("name", "role", "sort_order", "is_active")


@public_router.get("/", response_model=list[TeamMemberRead])
def list_public_team_members(db: Session = Depends(get_db)):
    return list_team_members(db, active_only=True)


@router.get("/", response_model=list[TeamMemberRead])
def list_all_team_members(db: Session = Depends(get_db)):
    return list_team_members(db)


@router.post("/", response_model=TeamMemberRead, status_code=status.HTTP_201_CREATED)
def create_team_member(data: TeamMemberCreate, db: Session = Depends(get_db)):
    obj = DBTeamMembers(**data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    logger.info(f"Team member created: {obj.id}")
    return obj


@router.get("/{id}", response_model=TeamMemberRead)
def get_team_member(id: str, db: Session = Depends(get_db)):
    obj = db.get(DBTeamMembers, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    return obj


@router.patch("/{id}", response_model=TeamMemberRead)
def update_team_member(id: str, data: TeamMemberUpdate, db: Session = Depends(get_db)):
    obj = db.get(DBTeamMembers, id)
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
def delete_team_member(id: str, db: Session = Depends(get_db)):
    obj = db.get(DBTeamMembers, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    db.delete(obj)
    db.commit()
    logger.info(f"Team member deleted: {id}")
