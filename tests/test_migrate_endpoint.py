"""Tests for POST/GET /api/admin/migrate-slugs."""

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from edumigrate.models import Universities


def test_get_not_allowed(admin_client):
    resp = admin_client.get("/api/admin/migrate-slugs")
    assert resp.status_code == 405
    assert resp.json() == {"detail": "Method not allowed. Use POST to run migration."}


def test_post_returns_summary(admin_client, add_university, db):
    add_university(id="a" * 20, name="University of Malaya")
    add_university(id="b" * 20, name=None)
    add_university(id="c" * 20, name="Sunway University", slug="old-sunway")

    resp = admin_client.post("/api/admin/migrate-slugs")

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Migration completed successfully"
    assert body["updated"] == 2
    assert body["errors"] == 1
    assert len(body["results"]) == 3
    assert {r["id"]: r["status"] for r in body["results"]} == {
        "a" * 20: "success",
        "b" * 20: "error",
        "c" * 20: "success",
    }

    db.expire_all()
    assert db.get(Universities, "c" * 20).slug == "sunway-university"


def test_post_on_empty_database(admin_client):
    body = admin_client.post("/api/admin/migrate-slugs").json()
    assert body["updated"] == 0
    assert body["errors"] == 0
    assert body["results"] == []


def test_post_listing_failure_is_500(admin_client, monkeypatch):
    def broken_query(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("no such table: universities"))

    monkeypatch.setattr(Session, "query", broken_query)
    resp = admin_client.post("/api/admin/migrate-slugs")
    assert resp.status_code == 500
    assert resp.json()["detail"].startswith("Migration failed")


def test_requires_session_cookie(client):
    resp = client.post("/api/admin/migrate-slugs")
    assert resp.status_code == 401
