"""Tests for status, health and CORS wiring."""

from sqlalchemy import create_engine

from catalog.api.routers import health


def test_root_status(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "status: ok"}


def test_liveness(client):
    assert client.get("/health/live").json()["status"] == "ok"


def test_readiness_checks_database(client):
    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["checks"]["database"]["status"] == "healthy"


def test_cors_preflight_allows_frontend(client):
    response = client.options(
        "/api/products",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_cors_rejects_unknown_origin(client):
    response = client.options(
        "/api/products",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


def test_readiness_reports_unreachable_database(client, monkeypatch):
    broken = create_engine("sqlite:////nonexistent-dir/catalog.db")
    monkeypatch.setattr(health, "engine", broken)

    response = client.get("/health/ready")

    assert response.status_code == 503
    detail = response.json()["detail"]
    assert detail["status"] == "unhealthy"
    assert detail["checks"]["database"] == {
        "status": "unhealthy",
        "message": "Database connection failed",
    }
