# edumigrate/schemas/settings.py

from typing import Optional
from pydantic import BaseModel


class Address(BaseModel):
    address: str = ""
    suite: Optional[str] = None
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""


class PhoneNumber(BaseModel):
    title: str
    number: str


class Emails(BaseModel):
    general: str = ""
    admissions: str = ""
    support: str = ""


class SocialMedia(BaseModel):
    website: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None
    youtube: Optional[str] = None


class CompanySettings(BaseModel):
    company_name: str = "NextGen EduMigrate"
    tagline: Optional[str] = None
    description: Optional[str] = None
    main_office: Address = Address()
    phone_numbers: list[PhoneNumber] = []
    emails: Emails = Emails()
    whatsapp_number: Optional[str] = None
    social_media: SocialMedia = SocialMedia()


class TelegramSettings(BaseModel):
    bot_token: Optional[str] = None
    chat_id: Optional[str] = None
    enabled: bool = False
    updated_by: Optional[str] = None
    last_updated: Optional[str] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.enabled and self.bot_token and self.chat_id)


class TelegramSettingsUpdate(BaseModel):
    bot_token: Optional[str] = None
    chat_id: Optional[str] = None
    enabled: Optional[bool] = None
    updated_by: Optional[str] = None


class TelegramSettingsRead(BaseModel):
    bot_token: Optional[str] = None
    chat_id: Optional[str] = None
    enabled: bool
    updated_by: Optional[str] = None
    last_updated: Optional[str] = None


class TelegramTestResult(BaseModel):
    success: bool
    message: str
