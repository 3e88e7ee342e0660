"""
Tests para health checks.
"""
from fastapi import status
from sqlmodel import create_engine


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "healthy"
    assert response.json()["version"] == "1.0.0"


def test_liveness(client):
    response = client.get("/api/health/liveness")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "alive"


def test_readiness(client):
    response = client.get("/api/health/readiness")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["components"]["database"]["status"] == "healthy"


def test_readiness_sin_base_de_datos(client, app, monkeypatch):
    engine_caido = create_engine("sqlite:////directorio-que-no-existe/medconecta.db")
    monkeypatch.setattr(app.state, "engine", engine_caido)
    response = client.get("/api/health/readiness")
    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["status"] == "not_ready"
