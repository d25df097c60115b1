# edumigrate/schemas/contact_messages.py

from typing import Literal, Optional
from pydantic import BaseModel, field_validator

from .consultations import Priority, normalize_email

ContactStatus = Literal["new", "read", "replied", "closed"]


class ContactMessageCreate(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str

    model_config = {"from_attributes": True}

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)


class ContactMessageUpdate(BaseModel):
    status: Optional[ContactStatus] = None
    priority: Optional[Priority] = None
    notes: Optional[str] = None

    model_config = {"from_attributes": True}


class ContactMessageRead(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str
    status: ContactStatus
    priority: Priority
    notes: Optional[str] = None
    replied_at: Optional[str] = None
    created_at: str
    updated_at: str

    model_config = {"from_attributes": True}
