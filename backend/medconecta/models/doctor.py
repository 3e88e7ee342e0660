"""
Modelo de Doctor y tabla de favoritos.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING
from datetime import datetime

if TYPE_CHECKING:
    from medconecta.models.hospital import Hospital

TURNO_NO_ASIGNADO = "Not Assigned"


class DoctorFavorito(SQLModel, table=True):
    """Tabla de enlace perfil médico <-> doctor favorito."""
    __tablename__ = "doctor_favorito"

    perfil_id: Optional[int] = Field(
        default=None, foreign_key="perfil_medico.id", primary_key=True
    )
    doctor_id: Optional[int] = Field(
        default=None, foreign_key="doctor.id", primary_key=True
    )


class Doctor(SQLModel, table=True):
    """Doctor adscrito a un hospital."""
    __tablename__ = "doctor"

    id: Optional[int] = Field(default=None, primary_key=True)
    nombre: str
    especialidad: str
    turno: str = Field(default=TURNO_NO_ASIGNADO)
    hospital_id: int = Field(foreign_key="hospital.id", index=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)

    hospital: Optional["Hospital"] = Relationship(back_populates="doctores")

    def __repr__(self) -> str:
        return f"Doctor(id={self.id}, nombre={self.nombre}, hospital_id={self.hospital_id})"
