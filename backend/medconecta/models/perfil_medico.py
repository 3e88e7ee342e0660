"""
Modelo de Perfil Médico del paciente.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime

from medconecta.models.doctor import Doctor, DoctorFavorito
from medconecta.utils.helpers import safe_json_loads

if TYPE_CHECKING:
    from medconecta.models.paciente import Paciente


class PerfilMedico(SQLModel, table=True):
    """
    Perfil médico, a lo más uno por paciente.

    Las listas (alergias, medicamentos, ...) se guardan como JSON string.
    """
    __tablename__ = "perfil_medico"

    id: Optional[int] = Field(default=None, primary_key=True)
    paciente_id: int = Field(foreign_key="paciente.id", unique=True, index=True)
    tipo_sangre: str = Field(default="")

    # ============================================
    # LISTAS CLÍNICAS (JSON como string)
    # ============================================
    alergias: Optional[str] = Field(default=None)
    medicamentos: Optional[str] = Field(default=None)
    condiciones: Optional[str] = Field(default=None)
    vacunas: Optional[str] = Field(default=None)

    ultimo_control: Optional[datetime] = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    # ============================================
    # RELACIONES
    # ============================================
    paciente: Optional["Paciente"] = Relationship(back_populates="perfil_medico")
    doctores_favoritos: List[Doctor] = Relationship(link_model=DoctorFavorito)

    def get_lista(self, campo: str) -> list:
        """
        Obtiene un campo JSON como lista.

        Args:
            campo: Nombre del campo (alergias, medicamentos, ...)

        Returns:
            Lista de valores
        """
        return safe_json_loads(getattr(self, campo, None), [])

    def __repr__(self) -> str:
        return f"PerfilMedico(id={self.id}, paciente_id={self.paciente_id})"
