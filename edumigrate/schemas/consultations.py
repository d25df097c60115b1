# edumigrate/schemas/consultations.py

import re
from typing import Literal, Optional
from pydantic import BaseModel, field_validator

ConsultationStatus = Literal["pending", "contacted", "scheduled", "completed", "cancelled"]
Priority = Literal["low", "medium", "high", "urgent"]

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_email(v: str) -> str:
    v = v.strip().lower()
    if not _EMAIL_RE.match(v):
        raise ValueError("Invalid email address")
    return v


class ConsultationCreate(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: str
    preferred_destination: Optional[str] = None
    program_level: Optional[str] = None
    message: Optional[str] = None
    agree_to_terms: bool = False
    subscribe_newsletter: bool = False

    model_config = {"from_attributes": True}

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)


class ConsultationUpdate(BaseModel):
    status: Optional[ConsultationStatus] = None
    priority: Optional[Priority] = None
    assigned_to: Optional[str] = None
    notes: Optional[str] = None
    scheduled_date: Optional[str] = None

    model_config = {"from_attributes": True}


class ConsultationRead(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    preferred_destination: Optional[str] = None
    program_level: Optional[str] = None
    message: Optional[str] = None
    agree_to_terms: bool
    subscribe_newsletter: bool
    status: ConsultationStatus
    priority: Priority
    assigned_to: Optional[str] = None
    notes: Optional[str] = None
    scheduled_date: Optional[str] = None
    created_at: str
    updated_at: str

    model_config = {"from_attributes": True}
