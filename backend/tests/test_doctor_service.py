"""
Tests unitarios para DoctorService.
"""
import pytest

from medconecta.core.exceptions import ReferenciaInvalidaError, DoctorNotFoundError
from medconecta.schemas.doctor import DoctorCreate, DoctorUpdate
from medconecta.services.doctor_service import DoctorService


class TestDoctorService:

    def test_crear_en_hospital_inexistente(self, session):
        with pytest.raises(ReferenciaInvalidaError):
            DoctorService(session).crear(
                999, DoctorCreate(name="Dr. X", specialization="Cirugía")
            )

    def test_actualizacion_parcial(self, session, crear_hospital, crear_doctor):
        hospital = crear_hospital()
        doctor = crear_doctor(hospital.id, nombre="Dr. A", especialidad="Traumatología")

        actualizado = DoctorService(session).actualizar(
            hospital.id, DoctorUpdate(id=doctor.id, specialization="Ortopedia")
        )

        assert actualizado.nombre == "Dr. A"
        assert actualizado.especialidad == "Ortopedia"

    def test_eliminar_de_otro_hospital(self, session, crear_hospital, crear_doctor):
        hospital = crear_hospital()
        otro = crear_hospital()
        doctor = crear_doctor(otro.id)

        with pytest.raises(DoctorNotFoundError):
            DoctorService(session).eliminar(hospital.id, doctor.id)
