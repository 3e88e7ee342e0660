"""
Modelo de Paciente (cuenta de usuario paciente).
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING
from datetime import datetime

if TYPE_CHECKING:
    from medconecta.models.perfil_medico import PerfilMedico


class Paciente(SQLModel, table=True):
    """Cuenta de paciente registrada con email y contraseña."""
    __tablename__ = "paciente"

    id: Optional[int] = Field(default=None, primary_key=True)
    nombre: str
    email: str = Field(unique=True, index=True)
    hashed_password: str
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    perfil_medico: Optional["PerfilMedico"] = Relationship(
        back_populates="paciente",
        sa_relationship_kwargs={"uselist": False}
    )

    def __repr__(self) -> str:
        return f"Paciente(id={self.id}, email={self.email})"
