"""Tests for the request audit log."""

import json
import logging

import pytest

from edumigrate.middleware.audit import _university_segment

LEGACY_ID = "AbCdEfGhIjKlMnOpQrSt"


def _records(caplog) -> list[dict]:
    return [json.loads(r.getMessage()) for r in caplog.records if r.name == "edumigrate.audit"]


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/universities/university-of-malaya", "university-of-malaya"),
        ("/api/universities/university-of-malaya", "university-of-malaya"),
        ("/universities/", None),
        ("/universities", None),
        ("/api/admin/universities/abc", None),
        ("/", None),
    ],
)
def test_university_segment(path, expected):
    assert _university_segment(path) == expected


def test_slug_lookup_is_logged(client, add_university, caplog):
    add_university(name="University of Malaya", slug="university-of-malaya")
    with caplog.at_level(logging.INFO, logger="edumigrate.audit"):
        client.get("/universities/university-of-malaya")

    (record,) = _records(caplog)
    assert record["path"] == "/universities/university-of-malaya"
    assert record["status"] == 200
    assert record["segment"] == "university-of-malaya"
    assert record["lookup"] == "slug"


def test_legacy_lookup_is_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="edumigrate.audit"):
        client.get(f"/api/universities/old-name-{LEGACY_ID}")

    (record,) = _records(caplog)
    assert record["status"] == 404
    assert record["segment"] == f"old-name-{LEGACY_ID}"
    assert record["lookup"] == "legacy"


def test_other_paths_have_no_lookup(client, caplog):
    with caplog.at_level(logging.INFO, logger="edumigrate.audit"):
        client.get("/health")

    (record,) = _records(caplog)
    assert record["path"] == "/health"
    assert "segment" not in record
    assert "lookup" not in record
