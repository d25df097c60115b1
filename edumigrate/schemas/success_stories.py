# edumigrate/schemas/success_stories.py

from typing import Optional
from pydantic import BaseModel, Field

STORY_MAX_LENGTH = 500


class SuccessStoryCreate(BaseModel):
    name: str = Field(min_length=1)
    country: str = Field(min_length=1)
    university: str = Field(min_length=1)
    program: str = Field(min_length=1)
    story: str = Field(min_length=1, max_length=STORY_MAX_LENGTH)
    image: Optional[str] = None
    rating: int = Field(5, ge=1, le=5)
    # Flag emoji or country code
    flag: Optional[str] = None
    # Card accent, e.g. a CSS gradient class
    color: Optional[str] = None
    is_active: bool = True


class SuccessStoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    country: Optional[str] = Field(None, min_length=1)
    university: Optional[str] = Field(None, min_length=1)
    program: Optional[str] = Field(None, min_length=1)
    story: Optional[str] = Field(None, min_length=1, max_length=STORY_MAX_LENGTH)
    image: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    flag: Optional[str] = None
    color: Optional[str] = None
    is_active: Optional[bool] = None


class SuccessStoryRead(BaseModel):
    id: str
    name: str
    country: str
    university: str
    program: str
    story: str
    image: Optional[str] = None
    rating: int
    flag: Optional[str] = None
    color: Optional[str] = None
    is_active: bool
    created_at: str
    updated_at: str

    model_config = {"from_attributes": True}
