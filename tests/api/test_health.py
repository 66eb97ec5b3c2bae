from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from mermaid_visualizer.api.deps import get_neobase_client
from mermaid_visualizer.main import create_app


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_converter_configured(client):
    client.app.dependency_overrides[get_neobase_client] = lambda: MagicMock(is_configured=True)
    response = client.get("/api/v1/health/converter")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Converter configured"}


def test_health_check_converter_without_key(client):
    response = client.get("/api/v1/health/converter")
    assert response.status_code == 200
    assert response.json() == {
        "status": "degraded",
        "message": "NeoBase API key is not configured",
    }


def test_health_check_converter_ignores_local_env_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("NEOBASE_API_KEY=from-dotenv\n")
    monkeypatch.chdir(tmp_path)
    client = TestClient(create_app())

    response = client.get("/api/v1/health/converter")

    assert response.json()["status"] == "degraded"


def test_response_echoes_correlation_id(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_response_gets_generated_correlation_id(client):
    response = client.get("/api/v1/health")
    assert response.headers["X-Correlation-ID"]
