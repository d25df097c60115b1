# edumigrate/schemas/universities.py

from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator

UniversityType = Literal["Public", "Private"]
UniversityStatus = Literal["draft", "published"]


class UniversityCreate(BaseModel):
    name: str = Field(min_length=1)
    country: Optional[str] = None
    type: Optional[UniversityType] = None
    image: Optional[str] = None
    short_description: Optional[str] = None
    details: Optional[str] = None
    status: UniversityStatus = "draft"

    model_config = {"from_attributes": True}

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v


class UniversityUpdate(BaseModel):
    name: Optional[str] = None
    country: Optional[str] = None
    type: Optional[UniversityType] = None
    image: Optional[str] = None
    short_description: Optional[str] = None
    details: Optional[str] = None
    status: Optional[UniversityStatus] = None

    model_config = {"from_attributes": True}


class UniversityRead(BaseModel):
    id: str
    name: Optional[str] = None
    # Absent on records created before slugs existed and not yet migrated
    slug: Optional[str] = None
    country: Optional[str] = None
    type: Optional[UniversityType] = None
    image: Optional[str] = None
    short_description: Optional[str] = None
    details: Optional[str] = None
    status: UniversityStatus
    created_at: str
    updated_at: str

    model_config = {"from_attributes": True}


class BulkDelete(BaseModel):
    ids: list[str]


class BulkStatusUpdate(BaseModel):
    ids: list[str]
    status: UniversityStatus


class BulkResult(BaseModel):
    success: list[str] = []
    failed: list[str] = []
