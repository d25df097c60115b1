"""
Content shown on the About page: team members and student success stories.
"""

from sqlalchemy.orm import Session

from ..models.generated import SuccessStories as DBSuccessStories
from ..models.generated import TeamMembers as DBTeamMembers


def list_team_members(db: Session, *, active_only: bool = False) -> list[DBTeamMembers]:
    query = db.query(DBTeamMembers)
    if active_only:
        query = query.filter(DBTeamMembers.is_active == 1)
    return query.order_by(DBTeamMembers.sort_order.asc(), DBTeamMembers.created_at.asc()).all()


def list_success_stories(db: Session, *, active_only: bool = False) -> list[DBSuccessStories]:
    query = db.query(DBSuccessStories)
    if active_only:
        query = query.filter(DBSuccessStories.is_active == 1)
    return query.order_by(DBSuccessStories.created_at.desc(), DBSuccessStories.id.asc()).all()
