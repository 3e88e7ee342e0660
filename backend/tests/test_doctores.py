"""
Tests para el directorio de doctores.
"""
from fastapi import status
from sqlmodel import select

from medconecta.models.doctor import Doctor, DoctorFavorito


class TestDoctores:
    """Tests para operaciones del directorio de doctores."""

    def test_listar_vacio(self, client, crear_hospital):
        hospital = crear_hospital()
        response = client.get(f"/api/hospital/{hospital.id}/doctors")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_listar_solo_del_hospital(self, client, crear_hospital, crear_doctor):
        hospital = crear_hospital()
        otro = crear_hospital()
        crear_doctor(hospital.id, nombre="Dr. Pérez")
        crear_doctor(hospital.id, nombre="Dra. Muñoz")
        crear_doctor(otro.id, nombre="Dr. Lagos")

        response = client.get(f"/api/hospital/{hospital.id}/doctors")
        assert response.status_code == status.HTTP_200_OK
        assert [d["name"] for d in response.json()] == ["Dr. Pérez", "Dra. Muñoz"]
        assert all(d["hospitalId"] == hospital.id for d in response.json())

    def test_crear_doctor(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital()
        response = client.post(
            f"/api/hospital/{hospital.id}/doctors",
            json={"name": "Dr. House", "specialization": "Diagnóstico", "shift": "Noche"},
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_201_CREATED

        data = response.json()
        assert data["name"] == "Dr. House"
        assert data["shift"] == "Noche"
        assert data["hospitalId"] == hospital.id

    def test_crear_doctor_sin_turno(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital()
        response = client.post(
            f"/api/hospital/{hospital.id}/doctors",
            json={"name": "Dra. Vidal", "specialization": "Pediatría"},
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["shift"] == "Not Assigned"

    def test_crear_doctor_campos_faltantes(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital()
        response = client.post(
            f"/api/hospital/{hospital.id}/doctors",
            json={"name": "Dra. Vidal"},
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_crear_doctor_sin_sesion(self, client, crear_hospital):
        hospital = crear_hospital()
        response = client.post(
            f"/api/hospital/{hospital.id}/doctors",
            json={"name": "Dr. X", "specialization": "Y"}
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_crear_doctor_en_otro_hospital(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital()
        otro = crear_hospital()
        response = client.post(
            f"/api/hospital/{otro.id}/doctors",
            json={"name": "Dr. X", "specialization": "Y"},
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_crear_doctor_hospital_inexistente(self, client, crear_hospital, auth_headers):
        """Un hospital que no existe es una referencia inválida, no un permiso."""
        hospital = crear_hospital()
        response = client.post(
            "/api/hospital/999/doctors",
            json={"name": "Dr. X", "specialization": "Y"},
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Hospital not found"

    def test_crear_doctor_como_paciente(self, client, crear_hospital, crear_paciente, auth_headers):
        hospital = crear_hospital()
        response = client.post(
            f"/api/hospital/{hospital.id}/doctors",
            json={"name": "Dr. X", "specialization": "Y"},
            headers=auth_headers(crear_paciente())
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_actualizar_doctor(self, client, crear_hospital, crear_doctor, auth_headers):
        hospital = crear_hospital()
        doctor = crear_doctor(hospital.id, turno="Mañana")

        response = client.put(
            f"/api/hospital/{hospital.id}/doctors",
            json={"id": doctor.id, "shift": "Tarde"},
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["shift"] == "Tarde"
        assert response.json()["name"] == doctor.nombre

    def test_actualizar_doctor_de_otro_hospital(self, client, crear_hospital, crear_doctor, auth_headers):
        """Un doctor ajeno se trata como inexistente."""
        hospital = crear_hospital()
        otro = crear_hospital()
        ajeno = crear_doctor(otro.id)

        response = client.put(
            f"/api/hospital/{hospital.id}/doctors",
            json={"id": ajeno.id, "name": "Cambiado"},
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_actualizar_doctor_sin_id(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital()
        response = client.put(
            f"/api/hospital/{hospital.id}/doctors",
            json={"name": "Sin id"},
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_eliminar_doctor(self, client, session, crear_hospital, crear_doctor, auth_headers):
        hospital = crear_hospital()
        doctor = crear_doctor(hospital.id)
        doctor_id = doctor.id

        response = client.delete(
            f"/api/hospital/{hospital.id}/doctors?id={doctor_id}",
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert session.get(Doctor, doctor_id) is None

    def test_eliminar_doctor_inexistente(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital()
        response = client.delete(
            f"/api/hospital/{hospital.id}/doctors?id=12345",
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_eliminar_doctor_quita_favoritos(
        self, client, session, crear_hospital, crear_paciente, crear_doctor, auth_headers
    ):
        hospital = crear_hospital()
        paciente = crear_paciente()
        doctor = crear_doctor(hospital.id)
        doctor_id = doctor.id
        headers_paciente = auth_headers(paciente)

        client.post("/api/medical-profile/submit", json={"userId": paciente.id}, headers=headers_paciente)
        client.put(
            f"/api/medical-profile/{paciente.id}/favorite-doctors/{doctor_id}",
            headers=headers_paciente
        )

        response = client.delete(
            f"/api/hospital/{hospital.id}/doctors?id={doctor_id}",
            headers=auth_headers(hospital)
        )
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert session.exec(
            select(DoctorFavorito).where(DoctorFavorito.doctor_id == doctor_id)
        ).all() == []
