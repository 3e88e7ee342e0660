"""
Modelo de Hospital.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime

if TYPE_CHECKING:
    from medconecta.models.doctor import Doctor


class Hospital(SQLModel, table=True):
    """
    Modelo de Hospital.

    Ancla de identidad: todos los recursos, doctores y sesiones de tipo
    hospital apuntan a esta tabla.
    """
    __tablename__ = "hospital"

    id: Optional[int] = Field(default=None, primary_key=True)
    nombre: str = Field(index=True)
    direccion: str
    persona_contacto: str
    telefono: str
    email: str = Field(unique=True, index=True)
    numero_licencia: str = Field(unique=True, index=True)
    hashed_password: str
    latitud: Optional[float] = Field(default=None)
    longitud: Optional[float] = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.utcnow)

    # Relaciones
    doctores: List["Doctor"] = Relationship(back_populates="hospital")

    def __repr__(self) -> str:
        return f"Hospital(id={self.id}, nombre={self.nombre}, licencia={self.numero_licencia})"
