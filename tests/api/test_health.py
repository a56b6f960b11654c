"""
API tests for GET /health.

Liveness only, plus correlation ID propagation on the response.
Dependencies: pytest, fastapi.testclient, mermaid_validation.main
System role: Health endpoint contract validation
"""

from fastapi.testclient import TestClient

from mermaid_validation.main import create_app


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_health_does_not_probe_renderer(settings, tmp_path):
    settings.renderer.command = [str(tmp_path / "no-such-mmdc")]
    client = TestClient(create_app(settings))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_correlation_id_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_generated(client):
    response = client.get("/health")
    assert response.headers["X-Correlation-ID"]
