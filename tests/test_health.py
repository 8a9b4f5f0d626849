"""
Tests for health check endpoints
"""


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["service"] == "guide-validator-web"
    assert data["status"] == "healthy"
    assert data["supabase"] == "configured"
    assert data["page_cache"] in ("memory", "redis")
    assert "timestamp" in data


def test_service_info(client):
    response = client.get("/api")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "running"
    assert data["version"] == "1.0.0"
    assert data["docs"] == "/docs"


def test_docs_accessible(client):
    response = client.get("/docs")
    assert response.status_code == 200


def test_openapi_spec(client):
    response = client.get("/openapi.json")
    assert response.status_code == 200

    spec = response.json()
    assert spec["info"]["title"] == "Guide Validator - Web Service"
    assert "/auth/sign-out" in spec["paths"]
