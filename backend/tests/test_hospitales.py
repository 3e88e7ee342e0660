"""
Tests para endpoints de hospitales.
"""
from fastapi import status


class TestHospitales:
    """Tests para operaciones de hospitales."""

    def test_obtener_hospitales_vacio(self, client):
        """Test obtener hospitales cuando no hay ninguno."""
        response = client.get("/api/hospital")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_obtener_hospitales(self, client, crear_hospital):
        crear_hospital(nombre="Hospital A")
        crear_hospital(nombre="Hospital B")

        response = client.get("/api/hospital")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert len(data) == 2
        assert {h["name"] for h in data} == {"Hospital A", "Hospital B"}
        assert "hashedPassword" not in data[0]
        assert "contactPerson" in data[0]

    def test_listado_mapea_campos_del_modelo(self, client, crear_hospital):
        """El listado usa el mismo mapeo que el detalle, sin inventarios."""
        hospital = crear_hospital(nombre="Hospital Norte", numero_licencia="LIC-NORTE")

        response = client.get("/api/hospital")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [{
            "id": hospital.id,
            "name": "Hospital Norte",
            "address": "Calle Falsa 123, Ciudad",
            "contactPerson": "Contacto Test",
            "phone": "+56900000000",
            "email": hospital.email,
            "licenseNumber": "LIC-NORTE",
            "latitude": -33.0,
            "longitude": -70.0,
        }]

    def test_obtener_hospital_sin_inventarios(self, client, crear_hospital):
        hospital = crear_hospital(nombre="Hospital Test")

        response = client.get(f"/api/hospital/{hospital.id}")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["name"] == "Hospital Test"
        assert data["beds"] is None
        assert data["blood"] is None
        assert data["oxygen"] is None
        assert data["ambulance"] is None

    def test_obtener_hospital_con_inventarios(self, client, crear_hospital, auth_headers):
        hospital = crear_hospital()
        client.put(
            f"/api/hospital/{hospital.id}/oxygen",
            json={"oxygenCylinders": 4, "liquidOxygen": 1},
            headers=auth_headers(hospital)
        )

        response = client.get(f"/api/hospital/{hospital.id}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["oxygen"] == {"Oxygen Cylinders": 4, "Liquid Oxygen": 1}
        assert response.json()["beds"] is None

    def test_obtener_hospital_no_existe(self, client):
        response = client.get("/api/hospital/12345")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_obtener_hospital_id_invalido(self, client):
        response = client.get("/api/hospital/no-existe")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
