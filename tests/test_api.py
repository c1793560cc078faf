"""Tests for the FastAPI application endpoints."""

import json
import os

import pytest
from fastapi.testclient import TestClient

from conftest import PROJECT_ROOT
from leads_api.main import app


@pytest.fixture
def test_client(tmp_path, monkeypatch):
    for key in list(os.environ):
        if key.startswith("LEADS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    with TestClient(app) as client:
        yield client


def test_health(test_client):
    response = test_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_process_leads_writes_output(test_client, tmp_path):
    target = tmp_path / "filtered.json"

    response = test_client.post(
        "/api/process-leads",
        params={"input": str(PROJECT_ROOT / "leads.json"), "output": str(target)},
    )

    assert response.status_code == 200
    assert response.text == "Filtered leads have been written"
    assert len(json.loads(target.read_text(encoding="utf-8"))["leads"]) == 5


def test_process_leads_missing_input(test_client, tmp_path):
    target = tmp_path / "filtered.json"

    response = test_client.post(
        "/api/process-leads",
        params={"input": str(tmp_path / "missing.json"), "output": str(target)},
    )

    assert response.status_code == 500
    assert "empty or does not exist" in response.text
    assert not target.exists()


def test_process_leads_bad_date(test_client, write_document, tmp_path):
    source = write_document({"leads": [{"_id": "1", "email": "a@x.com", "entryDate": "not-a-date"}]})
    target = tmp_path / "filtered.json"

    response = test_client.post("/api/process-leads", params={"input": str(source), "output": str(target)})

    assert response.status_code == 500
    assert "not-a-date" in response.text
    assert not target.exists()


def test_process_leads_requires_both_params(test_client):
    response = test_client.post("/api/process-leads", params={"input": "leads.json"})
    assert response.status_code == 422


def test_dedupe_document(test_client):
    response = test_client.post("/api/dedupe", json={"leads": [
        {"_id": "1", "email": "shared@x.com", "entryDate": "2024-01-01T00:00:00Z"},
        {"_id": "2", "email": "shared@x.com", "entryDate": "2024-01-03T00:00:00Z"},
    ]})

    assert response.status_code == 200
    leads = response.json()["leads"]
    assert [lead["_id"] for lead in leads] == ["2"]
    assert list(leads[0]) == ["_id", "email", "firstName", "lastName", "address", "entryDate"]


def test_dedupe_empty_document(test_client):
    response = test_client.post("/api/dedupe", json={"leads": []})

    assert response.status_code == 500
    assert "no leads" in response.text


def test_process_leads_reports_bad_diff_fields(test_client, tmp_path):
    (tmp_path / "config.yaml").write_text("diff_fields: bogus\n")
    target = tmp_path / "filtered.json"

    response = test_client.post(
        "/api/process-leads",
        params={"input": str(PROJECT_ROOT / "leads.json"), "output": str(target)},
    )

    assert response.status_code == 500
    assert "Unknown diff_fields: bogus" in response.text
    assert not target.exists()


def test_dedupe_reports_malformed_config(test_client, tmp_path):
    (tmp_path / "config.yaml").write_text("diff_fields: [unclosed\n")

    response = test_client.post("/api/dedupe", json={"leads": [
        {"_id": "1", "email": "a@x.com", "entryDate": "2024-01-01T00:00:00Z"},
    ]})

    assert response.status_code == 500
    assert response.text
    assert response.text != "Internal Server Error"
