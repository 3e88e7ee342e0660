"""
Schemas de Doctor.
"""
from pydantic import Field
from typing import Optional

from medconecta.schemas.base import CamelModel


class DoctorCreate(CamelModel):
    """Schema para crear un doctor."""
    name: str = Field(..., min_length=1)
    specialization: str = Field(..., min_length=1)
    shift: Optional[str] = None


class DoctorUpdate(CamelModel):
    """Schema para actualizar un doctor; el id viaja en el cuerpo."""
    id: int
    name: Optional[str] = Field(None, min_length=1)
    specialization: Optional[str] = Field(None, min_length=1)
    shift: Optional[str] = None


class DoctorResponse(CamelModel):
    """Schema de respuesta para doctor."""
    id: int
    name: str
    specialization: str
    shift: str
    hospital_id: int

    @classmethod
    def desde_modelo(cls, doctor) -> "DoctorResponse":
        return cls(
            id=doctor.id,
            name=doctor.nombre,
            specialization=doctor.especialidad,
            shift=doctor.turno,
            hospital_id=doctor.hospital_id,
        )
