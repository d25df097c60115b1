# edumigrate/schemas/team_members.py

from typing import Optional
from pydantic import BaseModel, Field


class TeamMemberCreate(BaseModel):
    name: str = Field(min_length=1)
    role: str = Field(min_length=1)
    image: Optional[str] = None
    bio: Optional[str] = None
    sort_order: int = 0
    is_active: bool = True


class TeamMemberUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    role: Optional[str] = Field(None, min_length=1)
    image: Optional[str] = None
    bio: Optional[str] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None


class TeamMemberRead(BaseModel):
    id: str
    name: str
    role: str
    image: Optional[str] = None
    bio: Optional[str] = None
    sort_order: int
    is_active: bool
    created_at: str
    updated_at: str

    model_config = {"from_attributes": True}
