"""Tests for the admin university API and the public read API."""

LEGACY_ID = "Qw3rTy7uIoP9aSdF1gHj"


def _create(admin_client, **fields):
    payload = {"name": "University of Malaya", "country": "Malaysia", "type": "Public"}
    payload.update(fields)
    resp = admin_client.post("/api/admin/universities/", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


# ── Admin CRUD ───────────────────────────────────────────


def test_create_assigns_slug_and_storage_id(admin_client):
    uni = _create(admin_client)
    assert uni["slug"] == "university-of-malaya"
    assert len(uni["id"]) == 20
    assert uni["id"].isalnum()
    assert uni["status"] == "draft"


def test_create_rejects_blank_name(admin_client):
    resp = admin_client.post("/api/admin/universities/", json={"name": "   "})
    assert resp.status_code == 422


def test_create_with_unsluggable_name_leaves_slug_empty(admin_client):
    uni = _create(admin_client, name="東京大学")
    assert uni["slug"] is None


def test_rename_keeps_slug(admin_client):
    uni = _create(admin_client)
    resp = admin_client.patch(
        f"/api/admin/universities/{uni['id']}", json={"name": "Universiti Malaya"}
    )
    assert resp.status_code == 200
    assert resp.json()["name"] == "Universiti Malaya"
    assert resp.json()["slug"] == "university-of-malaya"


def test_get_update_delete_missing(admin_client):
    assert admin_client.get("/api/admin/universities/nope").status_code == 404
    assert admin_client.patch("/api/admin/universities/nope", json={}).status_code == 404
    assert admin_client.delete("/api/admin/universities/nope").status_code == 404


def test_delete(admin_client):
    uni = _create(admin_client)
    assert admin_client.delete(f"/api/admin/universities/{uni['id']}").status_code == 204
    assert admin_client.get(f"/api/admin/universities/{uni['id']}").status_code == 404


def test_list_filters_by_status(admin_client):
    _create(admin_client, name="Draft U")
    _create(admin_client, name="Live U", status="published")

    resp = admin_client.get("/api/admin/universities/", params={"status": "published"})
    assert [u["name"] for u in resp.json()] == ["Live U"]
    assert len(admin_client.get("/api/admin/universities/").json()) == 2


def test_bulk_status_and_delete(admin_client):
    a = _create(admin_client, name="A University")
    b = _create(admin_client, name="B University")

    resp = admin_client.post(
        "/api/admin/universities/bulk-status",
        json={"ids": [a["id"], "missing"], "status": "published"},
    )
    assert resp.json() == {"success": [a["id"]], "failed": ["missing"]}
    assert admin_client.get(f"/api/admin/universities/{a['id']}").json()["status"] == "published"

    resp = admin_client.post(
        "/api/admin/universities/bulk-delete", json={"ids": [a["id"], b["id"]]}
    )
    assert resp.json() == {"success": [a["id"], b["id"]], "failed": []}
    assert admin_client.get("/api/admin/universities/").json() == []


# ── Public API ───────────────────────────────────────────


def test_public_list_only_published(client, add_university):
    add_university(name="Live", slug="live", status="published", country="Malaysia")
    add_university(name="Hidden", slug="hidden", status="draft")

    resp = client.get("/api/universities/")
    assert [u["name"] for u in resp.json()] == ["Live"]


def test_public_list_filters(client, add_university):
    add_university(name="Monash", slug="monash", country="Australia", type="Public")
    add_university(name="Sunway", slug="sunway", country="Malaysia", type="Private")

    def names(params):
        return [u["name"] for u in client.get("/api/universities/", params=params).json()]

    assert names({"country": "Malaysia"}) == ["Sunway"]
    assert names({"type": "Public"}) == ["Monash"]
    assert names({"q": "sun"}) == ["Sunway"]
    assert sorted(names({"country": "all"})) == ["Monash", "Sunway"]


def test_public_get_by_slug(client, add_university):
    add_university(name="University of Malaya", slug="university-of-malaya")
    resp = client.get("/api/universities/university-of-malaya")
    assert resp.status_code == 200
    assert resp.json()["name"] == "University of Malaya"


def test_public_get_by_legacy_id(client, add_university):
    add_university(id=LEGACY_ID, name="Old Link University")
    resp = client.get(f"/api/universities/old-link-university-{LEGACY_ID}")
    assert resp.status_code == 200
    assert resp.json()["id"] == LEGACY_ID


def test_public_get_not_found(client):
    resp = client.get("/api/universities/no-such-university")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Not found"}


def test_public_get_hides_drafts(client, add_university):
    add_university(name="Draft", slug="draft-university", status="draft")
    assert client.get("/api/universities/draft-university").status_code == 404
