"""
edumigrate/services/settings_store.py

Key/value JSON documents in the `settings` table.

Keys:
- company  — CompanySettings (public contact details shown on the site)
- telegram — TelegramSettings (lead notifications)
"""

import json
import logging

from sqlalchemy.orm import Session

from ..models.generated import SiteSettings as DBSiteSettings
from ..schemas.settings import CompanySettings, TelegramSettings, TelegramSettingsUpdate
from ..utils.identifiers import utc_now

logger = logging.getLogger(__name__)

COMPANY_KEY = "company"
TELEGRAM_KEY = "telegram"


def _load(db: Session, key: str) -> dict:
    obj = db.get(DBSiteSettings, key)
    if not obj:
        return {}
    try:
        return json.loads(obj.value or "{}")
    except json.JSONDecodeError:
        logger.warning(f"Corrupted settings document: {key}")
        return {}


def _store(db: Session, key: str, value: dict) -> None:
    obj = db.get(DBSiteSettings, key)
    if not obj:
        obj = DBSiteSettings(key=key)
        db.add(obj)
    obj.value = json.dumps(value, ensure_ascii=False)
    obj.updated_at = utc_now()
    db.commit()


def get_company_settings(db: Session) -> CompanySettings:
    return CompanySettings.model_validate(_load(db, COMPANY_KEY))


def save_company_settings(db: Session, data: CompanySettings) -> CompanySettings:
    _store(db, COMPANY_KEY, data.model_dump())
    return data


def get_telegram_settings(db: Session) -> TelegramSettings:
    return TelegramSettings.model_validate(_load(db, TELEGRAM_KEY))


def save_telegram_settings(db: Session, data: TelegramSettingsUpdate) -> TelegramSettings:
    """Merge the given fields into the stored document (unset fields are kept)."""
    current = _load(db, TELEGRAM_KEY)
    current.update(data.model_dump(exclude_unset=True))
    current["last_updated"] = utc_now()
    _store(db, TELEGRAM_KEY, current)
    return TelegramSettings.model_validate(current)
