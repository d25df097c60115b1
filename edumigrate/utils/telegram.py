# edumigrate/utils/telegram.py
"""
Telegram utilities for lead notifications.

Contains:
- send_message() — Bot API sendMessage call (HTML parse mode)
- format_*_notification() — message bodies for new leads
- notify() — fire-and-forget wrapper used by background tasks
"""

import logging
from html import escape
from typing import Optional

import httpx

from ..config import settings
from ..exceptions import TelegramError
from ..schemas.settings import TelegramSettings
from .identifiers import utc_now

logger = logging.getLogger(__name__)

MESSAGE_PREVIEW_LEN = 200

SUBJECT_LABELS = {
    "consultation": "Free Consultation",
    "application": "Application Assistance",
    "visa": "Visa Support",
    "travel": "Travel Services",
    "general": "General Inquiry",
    "other": "Other",
}


# ============================================================
# FORMATTING
# ============================================================

def _preview(text: str) -> str:
    if len(text) > MESSAGE_PREVIEW_LEN:
        return text[:MESSAGE_PREVIEW_LEN] + "..."
    return text


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def subject_label(subject: str) -> str:
    return SUBJECT_LABELS.get(subject, subject)


def format_consultation_notification(data: dict) -> str:
    name = f"{data['first_name']} {data['last_name']}".strip()
    lines = [
        "🎓 <b>New Consultation Request</b>",
        "",
        f"👤 <b>Name:</b> {escape(name)}",
        f"📧 <b>Email:</b> {escape(data['email'])}",
        f"📱 <b>Phone:</b> {escape(data['phone'])}",
    ]
    if data.get("preferred_destination"):
        lines.append(
            f"🌍 <b>Preferred Destination:</b> {escape(_capitalize(data['preferred_destination']))}"
        )
    if data.get("program_level"):
        lines.append(f"🎯 <b>Program Level:</b> {escape(_capitalize(data['program_level']))}")
    if data.get("message"):
        lines.append(f"💬 <b>Message:</b> {escape(_preview(data['message']))}")

    lines += [
        "",
        "📋 <b>Agreements:</b>",
        f"{'✅' if data.get('agree_to_terms') else '❌'} Terms and Conditions",
        f"{'✅' if data.get('subscribe_newsletter') else '❌'} Newsletter Subscription",
        "",
        f"⏰ <b>Submitted:</b> {utc_now()} UTC",
    ]
    return "\n".join(lines)


def format_contact_notification(data: dict) -> str:
    name = f"{data['first_name']} {data['last_name']}".strip()
    lines = [
        "📬 <b>New Contact Message</b>",
        "",
        f"👤 <b>Name:</b> {escape(name)}",
        f"📧 <b>Email:</b> {escape(data['email'])}",
    ]
    if data.get("phone"):
        lines.append(f"📱 <b>Phone:</b> {escape(data['phone'])}")
    lines += [
        f"📋 <b>Subject:</b> {escape(subject_label(data['subject']))}",
        f"💬 <b>Message:</b> {escape(_preview(data['message']))}",
        "",
        f"⏰ <b>Submitted:</b> {utc_now()} UTC",
    ]
    return "\n".join(lines)


def format_test_message() -> str:
    return (
        "🤖 <b>Test Message</b>\n\n"
        f"This is a test message from {escape(settings.site_name)} admin panel.\n\n"
        "✅ Telegram integration is working correctly!\n\n"
        f"⏰ {utc_now()} UTC"
    )


# ============================================================
# BOT API
# ============================================================

async def send_message(
    bot_token: str,
    chat_id: str,
    text: str,
    client: Optional[httpx.AsyncClient] = None,
) -> dict:
    """
    Send an HTML message through the Bot API.
    Raises TelegramError on network failure or a non-ok API response.
    """
    url = f"{settings.telegram_api_url}/bot{bot_token}/sendMessage"
    payload = {
        "chat_id": chat_id,
        "text": text,
        "parse_mode": "HTML",
        "disable_web_page_preview": True,
    }

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=settings.telegram_timeout)

    try:
        resp = await client.post(url, json=payload)
    except httpx.HTTPError as e:
        raise TelegramError(f"Network error: {e}") from e
    finally:
        if owns_client:
            await client.aclose()

    try:
        data = resp.json()
    except ValueError:
        raise TelegramError(f"Failed to parse response: {resp.text}") from None

    if resp.status_code >= 300 or not data.get("ok", False):
        raise TelegramError(data.get("description") or f"HTTP {resp.status_code}")

    return data


async def notify(
    tg: TelegramSettings,
    text: str,
    client: Optional[httpx.AsyncClient] = None,
) -> bool:
    """Background-task entry point: never raises, returns delivery status."""
    if not tg.is_configured:
        logger.debug("Telegram notifications disabled or not configured")
        return False

    try:
        await send_message(tg.bot_token, tg.chat_id, text, client=client)
    except TelegramError as e:
        logger.warning(f"Telegram notification failed: {e}")
        return False

    logger.info("Telegram notification sent")
    return True
