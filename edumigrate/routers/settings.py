# edumigrate/routers/settings.py
# Company + Telegram settings. PUT = full replace (company) / merge (telegram)

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import TelegramError
from ..schemas.settings import (
    CompanySettings,
    TelegramSettings,
    TelegramSettingsRead,
    TelegramSettingsUpdate,
    TelegramTestResult,
)
from ..services.settings_store import (
    get_company_settings,
    get_telegram_settings,
    save_company_settings,
    save_telegram_settings,
)
from ..utils.telegram import format_test_message, send_message

router = APIRouter(prefix="/api/admin", tags=["admin:settings"])


def mask_token(token: str | None) -> str | None:
    if not token:
        return token
    return f"{token[:4]}…{token[-4:]}" if len(token) > 8 else "…"


def _telegram_read(tg: TelegramSettings) -> TelegramSettingsRead:
    return TelegramSettingsRead(
        **tg.model_dump(exclude={"bot_token"}),
        bot_token=mask_token(tg.bot_token),
    )


@router.get("/settings/company", response_model=CompanySettings)
def read_company_settings(db: Session = Depends(get_db)):
    return get_company_settings(db)


@router.put("/settings/company", response_model=CompanySettings)
def update_company_settings(data: CompanySettings, db: Session = Depends(get_db)):
    return save_company_settings(db, data)


@router.get("/settings/telegram", response_model=TelegramSettingsRead)
def read_telegram_settings(db: Session = Depends(get_db)):
    return _telegram_read(get_telegram_settings(db))


@router.put("/settings/telegram", response_model=TelegramSettingsRead)
def update_telegram_settings(data: TelegramSettingsUpdate, db: Session = Depends(get_db)):
    return _telegram_read(save_telegram_settings(db, data))


# Sync dependency: FastAPI runs it in the threadpool, off the event loop
def load_telegram_settings(db: Session = Depends(get_db)) -> TelegramSettings:
    return get_telegram_settings(db)


@router.post("/telegram/test", response_model=TelegramTestResult)
async def test_telegram(tg: TelegramSettings = Depends(load_telegram_settings)):
    if not tg.enabled:
        return TelegramTestResult(success=False, message="Telegram notifications are disabled")
    if not tg.bot_token or not tg.chat_id:
        return TelegramTestResult(success=False, message="Telegram not configured properly")

    try:
        await send_message(tg.bot_token, tg.chat_id, format_test_message())
    except TelegramError as e:
        return TelegramTestResult(success=False, message=str(e))

    return TelegramTestResult(success=True, message="Test message sent successfully!")
