"""
Tests for FastAPI routes — request handling and failure status codes.
"""

import pytest
from fastapi.testclient import TestClient

from inspector.api.dependencies import get_audit_logger, get_inspection_worker
from inspector.audit.logger import AuditLogger
from inspector.cache.report_cache import ReportCache
from inspector.config import settings
from inspector.main import app
from inspector.workers.inspection_worker import InspectionWorker


@pytest.fixture
def client(tmp_path):
    audit = AuditLogger(log_path=str(tmp_path / "audit.jsonl"), enabled=True)
    worker = InspectionWorker(cache=ReportCache(), audit=audit)
    app.dependency_overrides[get_inspection_worker] = lambda: worker
    app.dependency_overrides[get_audit_logger] = lambda: audit
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "1.0.0"
    assert data["security_rules"] == 10
    assert data["style_rules"] == 4


def test_analyze_content(client):
    response = client.post("/analyze/content", json={"content": "<?php echo $_GET['x'];"})
    assert response.status_code == 200
    data = response.json()
    assert data["path"] == "inline.php"
    assert data["summary"]["grade"] == "F"
    assert data["security_findings"][0]["rule_id"] == "xss_echo"
    assert data["security_findings"][0]["severity"] == "critical"


def test_analyze_file(client, plugin_tree):
    response = client.post("/analyze/file", json={"path": str(plugin_tree / "includes" / "clean.php")})
    assert response.status_code == 200
    assert response.json()["summary"]["grade"] == "A"


def test_analyze_missing_file(client, tmp_path):
    response = client.post("/analyze/file", json={"path": str(tmp_path / "nope.php")})
    assert response.status_code == 404
    assert response.json()["detail"]["error"] == "not_found"


def test_analyze_empty_path(client):
    response = client.post("/analyze/file", json={"path": ""})
    assert response.status_code == 400


def test_analyze_tree(client, plugin_tree):
    response = client.post("/analyze/tree", json={"root": str(plugin_tree)})
    assert response.status_code == 200
    data = response.json()
    assert len(data["files"]) == 3
    assert data["skipped_count"] == 0
    assert sum(data["severity_histogram"].values()) == data["total_issues"]


def test_analyze_missing_tree(client, tmp_path):
    response = client.post("/analyze/tree", json={"root": str(tmp_path / "missing")})
    assert response.status_code == 404


def test_diagnose(client, plugin_tree):
    response = client.post("/diagnose", json={
        "error_message": "Call to undefined method Foo::bar()",
        "file": str(plugin_tree / "demo-plugin.php"),
        "line": 10,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["category"] == "undefined_method"
    assert "10" in data["context_lines"]


def test_diagnose_rejects_zero_line(client):
    response = client.post("/diagnose", json={"error_message": "oops", "line": 0})
    assert response.status_code == 422


def test_snippet_check(client):
    response = client.post("/snippet/check", json={"code": "eval( $_POST['code'] );"})
    assert response.status_code == 200
    assert response.json()["success"] is False


def test_debug_log_missing(client, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "debug_log_path", str(tmp_path / "debug.log"))
    response = client.get("/debug-log")
    assert response.status_code == 404


def test_debug_log(client, tmp_path, monkeypatch):
    log = tmp_path / "debug.log"
    log.write_text("[01-Mar-2024 10:00:00 UTC] PHP Warning:  Division by zero\n", encoding="utf-8")
    monkeypatch.setattr(settings, "debug_log_path", str(log))
    response = client.get("/debug-log", params={"lines": 10})
    assert response.status_code == 200
    assert response.json()["entry_count"] == 1


def test_lambda_handler_wraps_app():
    from mangum import Mangum

    from handler import handler

    assert isinstance(handler, Mangum)


def test_health_reports_cache_counters(client):
    client.post("/analyze/content", json={"content": "<?php\n"})
    data = client.get("/health").json()
    assert set(data["cache"]) == {"entries", "expired", "hits", "misses"}


def test_recent_audit_events(client):
    client.post("/analyze/content", json={"path": "a.php", "content": "<?php eval( $a );"})
    client.post("/diagnose", json={"error_message": "oops"})

    response = client.get("/audit/recent", params={"event": "code_analyzed"})
    assert response.status_code == 200
    events = response.json()["events"]
    assert [e["file"] for e in events] == ["a.php"]
    assert events[0]["grade"] == "F"
