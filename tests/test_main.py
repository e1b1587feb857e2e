from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from conftest import report_data, write_report_files
from lighthouse_insights import main


@pytest.fixture
def client(tmp_path: Path, monkeypatch) -> TestClient:
    monkeypatch.setattr(main, "REPORTS_DIR", str(tmp_path))
    monkeypatch.setattr(main, "API_SECRET", "")
    return TestClient(main.app)


def test_health(client: TestClient):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "engine": "lighthouse-insights"}


def test_analyze_inline_report(client: TestClient, sample_audits):
    resp = client.post("/analyze", json={
        "report": report_data(sample_audits),
        "devtoolsLog": [{"method": "Runtime.exceptionThrown", "params": {}}, "bad line"],
        "trace": {"traceEvents": []},
    })
    assert resp.status_code == 200

    body = resp.json()
    assert body["coreWebVitals"]["LCP"]["status"] == "needs-improvement"
    assert body["criticalErrors"]["network"][0]["status"] == 404
    assert len(body["devtoolsErrors"]["exceptions"]) == 1
    assert body["longTasks"]["count"] == 0


def test_analyze_without_companions_returns_nulls(client: TestClient):
    body = client.post("/analyze", json={"report": report_data({})}).json()
    assert body["devtoolsErrors"] is None
    assert body["longTasks"] is None


def test_analyze_rejects_non_report(client: TestClient):
    resp = client.post("/analyze", json={"report": [1, 2, 3]})
    assert resp.status_code == 400


def test_api_key_is_enforced(client: TestClient, monkeypatch):
    monkeypatch.setattr(main, "API_SECRET", "s3cret")

    assert client.post("/analyze", json={"report": report_data({})}).status_code == 401
    resp = client.post("/analyze", json={"report": report_data({})}, headers={"x-api-key": "s3cret"})
    assert resp.status_code == 200


def test_stored_report(client: TestClient, tmp_path: Path, sample_audits):
    write_report_files(
        tmp_path,
        report_data(sample_audits),
        devtools_lines=[json.dumps({"method": "Network.loadingFailed", "params": {"errorText": "x"}})],
        name="home.json",
    )

    resp = client.get("/reports/home.json")
    assert resp.status_code == 200
    assert len(resp.json()["devtoolsErrors"]["networkFails"]) == 1


def test_stored_report_errors(client: TestClient, tmp_path: Path):
    (tmp_path / "broken.json").write_text("{", encoding="utf-8")

    assert client.get("/reports/missing.json").status_code == 404
    assert client.get("/reports/broken.json").status_code == 400
    assert client.get("/reports/..").status_code in (400, 404)


def test_stored_audits_by_category(client: TestClient, tmp_path: Path, sample_audits):
    write_report_files(tmp_path, report_data(sample_audits), name="home.json")

    resp = client.get("/reports/home.json/audits", params={"category": "accessibility"})
    assert resp.status_code == 200
    assert [a["id"] for a in resp.json()] == ["color-contrast", "document-title"]

    assert client.get("/reports/home.json/audits", params={"category": "nope"}).status_code == 422
