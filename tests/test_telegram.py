"""Tests for Telegram formatting and delivery."""

import asyncio
import json

import httpx
import pytest

from edumigrate.exceptions import TelegramError
from edumigrate.schemas.settings import TelegramSettings
from edumigrate.utils import telegram

CONSULTATION = {
    "first_name": "Aisha",
    "last_name": "Rahman",
    "email": "aisha@example.com",
    "phone": "+60123456789",
    "preferred_destination": "malaysia",
    "program_level": "bachelor",
    "message": "I would like to study <b>medicine</b>.",
    "agree_to_terms": True,
    "subscribe_newsletter": False,
}


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


# ── Formatting ───────────────────────────────────────────


def test_consultation_notification():
    text = telegram.format_consultation_notification(CONSULTATION)
    assert text.startswith("🎓 <b>New Consultation Request</b>")
    assert "👤 <b>Name:</b> Aisha Rahman" in text
    assert "🌍 <b>Preferred Destination:</b> Malaysia" in text
    assert "🎯 <b>Program Level:</b> Bachelor" in text
    assert "✅ Terms and Conditions" in text
    assert "❌ Newsletter Subscription" in text


def test_user_input_is_escaped():
    text = telegram.format_consultation_notification(CONSULTATION)
    assert "&lt;b&gt;medicine&lt;/b&gt;" in text


def test_optional_fields_omitted():
    data = dict(CONSULTATION, preferred_destination=None, program_level=None, message=None)
    text = telegram.format_consultation_notification(data)
    assert "Preferred Destination" not in text
    assert "Program Level" not in text
    assert "Message" not in text


def test_long_message_truncated():
    data = {
        "first_name": "A",
        "last_name": "B",
        "email": "a@b.co",
        "subject": "visa",
        "message": "x" * 500,
    }
    text = telegram.format_contact_notification(data)
    assert "x" * 200 + "..." in text
    assert "x" * 201 not in text


def test_contact_subject_label():
    data = {"first_name": "A", "last_name": "B", "email": "a@b.co", "subject": "visa", "message": "hi"}
    assert "📋 <b>Subject:</b> Visa Support" in telegram.format_contact_notification(data)
    assert telegram.subject_label("custom") == "custom"


# ── Delivery ─────────────────────────────────────────────


def test_send_message_payload():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"ok": True, "result": {"message_id": 1}})

    async def run():
        async with _client(handler) as client:
            return await telegram.send_message("123:ABC", "-10042", "hello", client=client)

    result = asyncio.run(run())

    assert result["ok"] is True
    assert seen["url"] == "https://api.telegram.org/bot123:ABC/sendMessage"
    assert seen["body"] == {
        "chat_id": "-10042",
        "text": "hello",
        "parse_mode": "HTML",
        "disable_web_page_preview": True,
    }


def test_send_message_api_error():
    def handler(request):
        return httpx.Response(400, json={"ok": False, "description": "Bad Request: chat not found"})

    async def run():
        async with _client(handler) as client:
            await telegram.send_message("t", "c", "hi", client=client)

    with pytest.raises(TelegramError, match="chat not found"):
        asyncio.run(run())


def test_send_message_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused")

    async def run():
        async with _client(handler) as client:
            await telegram.send_message("t", "c", "hi", client=client)

    with pytest.raises(TelegramError, match="Network error"):
        asyncio.run(run())


def test_notify_skips_when_disabled():
    def handler(request):
        raise AssertionError("must not be called")

    async def run():
        async with _client(handler) as client:
            return await telegram.notify(
                TelegramSettings(enabled=False, bot_token="t", chat_id="c"), "hi", client=client
            )

    assert asyncio.run(run()) is False


def test_notify_swallows_delivery_errors():
    def handler(request):
        return httpx.Response(500, json={"ok": False})

    async def run():
        async with _client(handler) as client:
            return await telegram.notify(
                TelegramSettings(enabled=True, bot_token="t", chat_id="c"), "hi", client=client
            )

    assert asyncio.run(run()) is False
