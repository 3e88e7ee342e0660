"""
Servicio del directorio de Doctores.
"""
from typing import List
from sqlmodel import Session
import logging

from medconecta.models.doctor import Doctor, TURNO_NO_ASIGNADO
from medconecta.repositories.doctor_repo import DoctorRepository
from medconecta.repositories.hospital_repo import HospitalRepository
from medconecta.schemas.doctor import DoctorCreate, DoctorUpdate
from medconecta.core.exceptions import (
    ReferenciaInvalidaError,
    DoctorNotFoundError,
)

logger = logging.getLogger("medconecta.doctores")


class DoctorService:
    """
    Servicio para el directorio de doctores de cada hospital.

    Las modificaciones y bajas se limitan al hospital de la ruta: un doctor
    de otro hospital se trata como inexistente.
    """

    def __init__(self, session: Session):
        self.session = session
        self.repo = DoctorRepository(session)
        self.hospital_repo = HospitalRepository(session)

    def listar(self, hospital_id: int) -> List[Doctor]:
        return self.repo.obtener_por_hospital(hospital_id)

    def crear(self, hospital_id: int, data: DoctorCreate) -> Doctor:
        """
        Crea un doctor en un hospital.

        Raises:
            ReferenciaInvalidaError: si el hospital no existe
        """
        if not self.hospital_repo.existe(hospital_id):
            raise ReferenciaInvalidaError("Hospital not found")

        doctor = self.repo.crear_desde_dict({
            "nombre": data.name,
            "especialidad": data.specialization,
            "turno": data.shift or TURNO_NO_ASIGNADO,
            "hospital_id": hospital_id,
        })

        logger.info(f"Doctor {doctor.id} creado en hospital {hospital_id}")
        return doctor

    def actualizar(self, hospital_id: int, data: DoctorUpdate) -> Doctor:
        """
        Actualiza nombre, especialidad y/o turno.

        Raises:
            DoctorNotFoundError: si el doctor no existe en ese hospital
        """
        doctor = self.repo.obtener_de_hospital(data.id, hospital_id)
        if not doctor:
            raise DoctorNotFoundError(data.id)

        doctor = self.repo.actualizar_desde_dict(doctor, {
            "nombre": data.name,
            "especialidad": data.specialization,
            "turno": data.shift,
        })

        logger.info(f"Doctor {doctor.id} actualizado en hospital {hospital_id}")
        return doctor

    def eliminar(self, hospital_id: int, doctor_id: int) -> None:
        """
        Elimina un doctor y lo quita de los favoritos de los pacientes.

        Raises:
            DoctorNotFoundError: si el doctor no existe en ese hospital
        """
        doctor = self.repo.obtener_de_hospital(doctor_id, hospital_id)
        if not doctor:
            raise DoctorNotFoundError(doctor_id)

        self.repo.eliminar_favoritos(doctor_id)
        self.repo.eliminar(doctor)

        logger.info(f"Doctor {doctor_id} eliminado de hospital {hospital_id}")
