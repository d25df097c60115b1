"""Tests for consultation requests and contact messages."""

import pytest

from edumigrate.utils import telegram

CONSULTATION = {
    "first_name": "Aisha",
    "last_name": "Rahman",
    "email": "Aisha@Example.com",
    "phone": "+60123456789",
    "preferred_destination": "malaysia",
    "agree_to_terms": True,
}

CONTACT = {
    "first_name": "Li",
    "last_name": "Wei",
    "email": "li@example.com",
    "subject": "visa",
    "message": "Do you help with student visas?",
}


@pytest.fixture
def sent(monkeypatch):
    messages = []

    async def fake_send_message(bot_token, chat_id, text, client=None):
        messages.append((bot_token, chat_id, text))
        return {"ok": True}

    monkeypatch.setattr(telegram, "send_message", fake_send_message)
    return messages


def _enable_telegram(admin_client):
    resp = admin_client.put(
        "/api/admin/settings/telegram",
        json={"bot_token": "123456:SECRET", "chat_id": "-100", "enabled": True},
    )
    assert resp.status_code == 200


# ── Consultations ────────────────────────────────────────


def test_create_consultation_defaults(client, sent):
    resp = client.post("/api/consultations/", json=CONSULTATION)
    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "pending"
    assert body["priority"] == "medium"
    assert body["email"] == "aisha@example.com"
    assert body["agree_to_terms"] is True
    assert body["subscribe_newsletter"] is False
    # Telegram not configured: nothing sent
    assert sent == []


def test_create_consultation_invalid_email(client):
    resp = client.post("/api/consultations/", json=dict(CONSULTATION, email="not-an-email"))
    assert resp.status_code == 422


def test_consultation_notifies_telegram(admin_client, sent):
    _enable_telegram(admin_client)

    admin_client.post("/api/consultations/", json=CONSULTATION)

    assert len(sent) == 1
    bot_token, chat_id, text = sent[0]
    assert (bot_token, chat_id) == ("123456:SECRET", "-100")
    assert "Aisha Rahman" in text


def test_admin_consultation_workflow(admin_client, sent):
    created = admin_client.post("/api/consultations/", json=CONSULTATION).json()

    resp = admin_client.patch(
        f"/api/admin/consultations/{created['id']}",
        json={"status": "contacted", "priority": "high", "notes": "Called back"},
    )
    assert resp.status_code == 200
    assert resp.json()["status"] == "contacted"

    pending = admin_client.get("/api/admin/consultations/", params={"status": "pending"}).json()
    assert pending == []
    assert len(admin_client.get("/api/admin/consultations/").json()) == 1

    assert admin_client.delete(f"/api/admin/consultations/{created['id']}").status_code == 204
    assert admin_client.get(f"/api/admin/consultations/{created['id']}").status_code == 404


def test_consultation_status_validated(admin_client, sent):
    created = admin_client.post("/api/consultations/", json=CONSULTATION).json()
    resp = admin_client.patch(
        f"/api/admin/consultations/{created['id']}", json={"status": "archived"}
    )
    assert resp.status_code == 422


# ── Contact messages ─────────────────────────────────────


def test_create_contact_message(client, sent):
    resp = client.post("/api/contact/", json=CONTACT)
    assert resp.status_code == 201
    assert resp.json()["status"] == "new"
    assert resp.json()["phone"] is None


def test_contact_notifies_telegram(admin_client, sent):
    _enable_telegram(admin_client)
    admin_client.post("/api/contact/", json=CONTACT)
    assert "Visa Support" in sent[0][2]


def test_mark_replied_sets_timestamp(admin_client, sent):
    created = admin_client.post("/api/contact/", json=CONTACT).json()
    resp = admin_client.patch(
        f"/api/admin/contact-messages/{created['id']}", json={"status": "replied"}
    )
    assert resp.json()["replied_at"] is not None


def test_admin_endpoints_require_cookie(client):
    assert client.get("/api/admin/consultations/").status_code == 401
    assert client.get("/api/admin/contact-messages/").status_code == 401
