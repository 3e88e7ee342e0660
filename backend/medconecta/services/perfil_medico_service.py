"""
Servicio de Perfil Médico.
"""
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session
from datetime import datetime
import logging

from medconecta.models.perfil_medico import PerfilMedico
from medconecta.repositories.perfil_medico_repo import PerfilMedicoRepository
from medconecta.repositories.paciente_repo import PacienteRepository
from medconecta.repositories.doctor_repo import DoctorRepository
from medconecta.schemas.perfil_medico import PerfilMedicoCreate
from medconecta.utils.helpers import safe_json_dumps
from medconecta.core.exceptions import (
    ValidationError,
    ConflictoError,
    PacienteNotFoundError,
    PerfilMedicoNotFoundError,
    DoctorNotFoundError,
)

logger = logging.getLogger("medconecta.perfil_medico")


class PerfilMedicoService:
    """
    Servicio para el perfil médico de los pacientes.

    Maneja:
    - Consulta de existencia y lectura del perfil
    - Registro (uno por paciente)
    - Doctores favoritos
    """

    def __init__(self, session: Session):
        self.session = session
        self.repo = PerfilMedicoRepository(session)
        self.paciente_repo = PacienteRepository(session)
        self.doctor_repo = DoctorRepository(session)

    @staticmethod
    def requerir_usuario(user_id: Optional[int]) -> int:
        if not user_id:
            raise ValidationError("User ID is required")
        return user_id

    def requerir_paciente(self, user_id: Optional[int]) -> int:
        """userId presente y de un paciente existente."""
        user_id = self.requerir_usuario(user_id)
        if not self.paciente_repo.obtener_por_id(user_id):
            raise PacienteNotFoundError(user_id)
        return user_id

    def existe(self, user_id: Optional[int]) -> bool:
        user_id = self.requerir_usuario(user_id)
        return self.repo.obtener_por_paciente(user_id) is not None

    def obtener(self, user_id: int) -> PerfilMedico:
        perfil = self.repo.obtener_por_paciente(user_id)
        if not perfil:
            raise PerfilMedicoNotFoundError(user_id)
        return perfil

    def registrar(self, data: PerfilMedicoCreate) -> PerfilMedico:
        """
        Registra el perfil médico de un paciente.

        Raises:
            ValidationError: falta el userId
            PacienteNotFoundError: el paciente no existe
            ConflictoError: el paciente ya tiene perfil
        """
        user_id = self.requerir_paciente(data.user_id)

        if self.repo.obtener_por_paciente(user_id):
            raise ConflictoError("Medical profile already exists")

        try:
            perfil = self.repo.crear_desde_dict({
                "paciente_id": user_id,
                "tipo_sangre": data.blood_type or "",
                "alergias": safe_json_dumps(data.allergies),
                "medicamentos": safe_json_dumps(data.medications),
                "condiciones": safe_json_dumps(data.conditions),
                "vacunas": safe_json_dumps(data.vaccinations),
                "ultimo_control": data.last_checkup,
            })
        except IntegrityError:
            self.session.rollback()
            raise ConflictoError("Medical profile already exists")

        logger.info(f"Perfil médico registrado para paciente {user_id}")
        return perfil

    # ============================================
    # DOCTORES FAVORITOS
    # ============================================

    def agregar_favorito(self, user_id: int, doctor_id: int) -> PerfilMedico:
        perfil = self.obtener(user_id)
        doctor = self.doctor_repo.obtener_por_id(doctor_id)
        if not doctor:
            raise DoctorNotFoundError(doctor_id)

        if doctor not in perfil.doctores_favoritos:
            perfil.doctores_favoritos.append(doctor)
            perfil.updated_at = datetime.utcnow()
            perfil = self.repo.guardar(perfil)
            logger.info(f"Doctor {doctor_id} agregado a favoritos de paciente {user_id}")

        return perfil

    def quitar_favorito(self, user_id: int, doctor_id: int) -> PerfilMedico:
        perfil = self.obtener(user_id)
        doctor = self.doctor_repo.obtener_por_id(doctor_id)
        if not doctor:
            raise DoctorNotFoundError(doctor_id)

        if doctor in perfil.doctores_favoritos:
            perfil.doctores_favoritos.remove(doctor)
            perfil.updated_at = datetime.utcnow()
            perfil = self.repo.guardar(perfil)
            logger.info(f"Doctor {doctor_id} quitado de favoritos de paciente {user_id}")

        return perfil
