"""
Schemas de Perfil Médico.
"""
from typing import Optional, List
from datetime import datetime

from medconecta.schemas.base import CamelModel
from medconecta.schemas.doctor import DoctorResponse


class PerfilCheckRequest(CamelModel):
    user_id: Optional[int] = None


class PerfilCheckResponse(CamelModel):
    exists: bool


class PerfilMedicoCreate(CamelModel):
    """Schema para registrar el perfil médico de un paciente."""
    user_id: Optional[int] = None
    blood_type: Optional[str] = None
    allergies: Optional[List[str]] = None
    medications: Optional[List[str]] = None
    conditions: Optional[List[str]] = None
    vaccinations: Optional[List[str]] = None
    last_checkup: Optional[datetime] = None


class PacienteResumen(CamelModel):
    id: int
    name: str
    email: str


class PerfilMedicoResponse(CamelModel):
    """Perfil médico con doctores favoritos y resumen del paciente."""
    id: int
    user_id: int
    blood_type: str
    allergies: List[str]
    medications: List[str]
    conditions: List[str]
    vaccinations: List[str]
    last_checkup: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    favorite_doctors: List[DoctorResponse] = []
    user: Optional[PacienteResumen] = None

    @classmethod
    def desde_modelo(cls, perfil) -> "PerfilMedicoResponse":
        paciente = perfil.paciente
        return cls(
            id=perfil.id,
            user_id=perfil.paciente_id,
            blood_type=perfil.tipo_sangre,
            allergies=perfil.get_lista("alergias"),
            medications=perfil.get_lista("medicamentos"),
            conditions=perfil.get_lista("condiciones"),
            vaccinations=perfil.get_lista("vacunas"),
            last_checkup=perfil.ultimo_control,
            created_at=perfil.created_at,
            updated_at=perfil.updated_at,
            favorite_doctors=[
                DoctorResponse.desde_modelo(d) for d in perfil.doctores_favoritos
            ],
            user=PacienteResumen(
                id=paciente.id, name=paciente.nombre, email=paciente.email
            ) if paciente else None,
        )
