"""
Tests del manejo global de errores.
"""
from fastapi import status
from fastapi.testclient import TestClient


def test_json_malformado_es_400(client, crear_hospital, auth_headers):
    hospital = crear_hospital()
    response = client.put(
        f"/api/hospital/{hospital.id}/beds",
        content=b"{no es json",
        headers={**auth_headers(hospital), "Content-Type": "application/json"}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "errors" in response.json()


def test_error_inesperado_es_500(app):
    @app.get("/api/explota")
    def explota():
        raise RuntimeError("fallo de prueba")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/explota")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"detail": "Internal server error"}
