"""
Tests para endpoints de inventarios hospitalarios.
"""
import pytest
from fastapi import status
from sqlmodel import select

from medconecta.models.recursos import InventarioCamas, InventarioSangre


CAMAS = {"ICU": 5, "General": 10, "Emergency": 2, "Maternity": 1, "Pediatric": 3}
SANGRE = {"A_Positive": 8, "B_Positive": 4, "O_Positive": 12, "AB_Positive": 1}


class TestLecturaRecursos:
    """Tests de GET /hospital/{id}/{tipo}."""

    def test_leer_sin_sesion(self, client, crear_hospital):
        hospital = crear_hospital()
        response = client.get(f"/api/hospital/{hospital.id}/beds")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_leer_con_token_invalido(self, client, crear_hospital):
        hospital = crear_hospital()
        response = client.get(
            f"/api/hospital/{hospital.id}/beds",
            headers={"Authorization": "Bearer no-es-un-jwt"}
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_leer_registro_inexistente(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital()
        response = client.get(
            f"/api/hospital/{hospital.id}/oxygen",
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_paciente_puede_leer(self, client, crear_hospital, crear_paciente, auth_headers):
        """Cualquier sesión válida puede leer inventarios."""
        hospital = crear_hospital()
        paciente = crear_paciente()
        client.put(f"/api/hospital/{hospital.id}/beds", json=CAMAS, headers=auth_headers(hospital))

        response = client.get(f"/api/hospital/{hospital.id}/beds", headers=auth_headers(paciente))
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == CAMAS

    def test_tipo_desconocido(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital()
        response = client.get(
            f"/api/hospital/{hospital.id}/ventiladores",
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_hospital_id_no_numerico(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital()
        response = client.get("/api/hospital/abc/beds", headers=auth_headers(hospital))
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestUpsertRecursos:
    """Tests de PUT /hospital/{id}/{tipo}."""

    def test_camas_ida_y_vuelta(self, client, crear_hospital, auth_headers):
        """Lo que se guarda es exactamente lo que se lee."""
        hospital = crear_hospital()
        headers = auth_headers(hospital)

        response = client.put(f"/api/hospital/{hospital.id}/beds", json=CAMAS, headers=headers)
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == CAMAS

        response = client.get(f"/api/hospital/{hospital.id}/beds", headers=headers)
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == CAMAS

    def test_oxigeno_hospital_42(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital(id=42)
        headers = auth_headers(hospital)
        payload = {"Oxygen Cylinders": 12, "Liquid Oxygen": 3}

        response = client.put("/api/hospital/42/oxygen", json=payload, headers=headers)
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == payload

        response = client.get("/api/hospital/42/oxygen", headers=headers)
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == payload

    def test_ambulancias_con_alias_snake_case(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital()
        response = client.put(
            f"/api/hospital/{hospital.id}/ambulance",
            json={"total": 6, "in_operation": 4, "under_maintenance": 2},
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"total": 6, "inOperation": 4, "underMaintenance": 2}

    def test_ambulancias_sin_restriccion_entre_campos(self, client, crear_hospital, auth_headers):
        """inOperation + underMaintenance puede superar el total."""
        hospital = crear_hospital()
        response = client.put(
            f"/api/hospital/{hospital.id}/ambulance",
            json={"Total": 1, "In Operation": 5, "Under Maintenance": 5},
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"total": 1, "inOperation": 5, "underMaintenance": 5}

    def test_campos_ausentes_quedan_en_cero(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital()
        response = client.put(
            f"/api/hospital/{hospital.id}/beds",
            json={"ICU": 4},
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"ICU": 4, "General": 0, "Emergency": 0, "Maternity": 0, "Pediatric": 0}

    def test_sobrescribe_todos_los_campos(self, client, crear_hospital, auth_headers):
        """Un segundo PUT reemplaza el registro completo, no lo mezcla."""
        hospital = crear_hospital()
        headers = auth_headers(hospital)
        client.put(f"/api/hospital/{hospital.id}/beds", json=CAMAS, headers=headers)

        response = client.put(f"/api/hospital/{hospital.id}/beds", json={"General": 7}, headers=headers)
        assert response.json() == {"ICU": 0, "General": 7, "Emergency": 0, "Maternity": 0, "Pediatric": 0}

    def test_upsert_idempotente(self, client, session, crear_hospital, auth_headers):
        hospital = crear_hospital()
        headers = auth_headers(hospital)

        primera = client.put(f"/api/hospital/{hospital.id}/beds", json=CAMAS, headers=headers)
        segunda = client.put(f"/api/hospital/{hospital.id}/beds", json=CAMAS, headers=headers)

        assert primera.json() == segunda.json() == CAMAS
        registros = session.exec(
            select(InventarioCamas).where(InventarioCamas.hospital_id == hospital.id)
        ).all()
        assert len(registros) == 1

    def test_precedencia_de_alias(self, client, crear_hospital, auth_headers):
        """La etiqueta principal gana sobre camelCase y snake_case."""
        hospital = crear_hospital()
        headers = auth_headers(hospital)
        payload = {"A_Positive": 3, "aPositive": 50, "a_positive": 70, "oPositive": 9, "o_positive": 1}

        for _ in range(3):
            response = client.put(f"/api/hospital/{hospital.id}/blood", json=payload, headers=headers)
            assert response.status_code == status.HTTP_200_OK
            assert response.json() == {
                "A_Positive": 3, "B_Positive": 0, "O_Positive": 9, "AB_Positive": 0
            }

    @pytest.mark.parametrize("valor", [-1, "12", True, 2.5, [1], 2**31, 10**30])
    def test_valor_invalido_no_escribe(self, client, crear_hospital, auth_headers, valor):
        hospital = crear_hospital()
        headers = auth_headers(hospital)
        client.put(f"/api/hospital/{hospital.id}/blood", json=SANGRE, headers=headers)

        response = client.put(
            f"/api/hospital/{hospital.id}/blood",
            json={**SANGRE, "A_Positive": valor},
            headers=headers
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

        response = client.get(f"/api/hospital/{hospital.id}/blood", headers=headers)
        assert response.json() == SANGRE

    def test_detalle_de_valor_invalido(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital()
        response = client.put(
            f"/api/hospital/{hospital.id}/beds",
            json={"ICU": 10**30},
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "'ICU' cannot exceed 2147483647"

    def test_valor_invalido_sin_registro_previo(self, client, session, crear_hospital, auth_headers):
        hospital = crear_hospital()
        response = client.put(
            f"/api/hospital/{hospital.id}/blood",
            json={"A_Positive": -1},
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert session.exec(select(InventarioSangre)).all() == []

    def test_cuerpo_no_es_objeto(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital()
        response = client.put(
            f"/api/hospital/{hospital.id}/beds",
            json=[1, 2, 3],
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_hospital_inexistente(self, client, session, crear_hospital, auth_headers):
        hospital = crear_hospital()
        response = client.put(
            "/api/hospital/999/blood",
            json=SANGRE,
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert session.exec(
            select(InventarioSangre).where(InventarioSangre.hospital_id == 999)
        ).all() == []


class TestPermisosRecursos:
    """Solo el hospital dueño puede escribir sus inventarios."""

    def test_escribir_sin_sesion(self, client, crear_hospital):
        hospital = crear_hospital()
        response = client.put(f"/api/hospital/{hospital.id}/beds", json=CAMAS)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_sin_sesion_gana_sobre_payload_invalido(self, client, crear_hospital):
        hospital = crear_hospital()
        response = client.put(f"/api/hospital/{hospital.id}/beds", json={"ICU": -5})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_otro_hospital(self, client, crear_hospital, auth_headers):
        dueno = crear_hospital()
        otro = crear_hospital()
        response = client.put(
            f"/api/hospital/{dueno.id}/beds",
            json=CAMAS,
            headers=auth_headers(otro)
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_paciente_no_puede_escribir(self, client, crear_hospital, crear_paciente, auth_headers):
        hospital = crear_hospital()
        paciente = crear_paciente()
        response = client.put(
            f"/api/hospital/{hospital.id}/beds",
            json=CAMAS,
            headers=auth_headers(paciente)
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN
