"""
Schemas de Hospital.
"""
from typing import Optional, Dict

from medconecta.schemas.base import CamelModel


class HospitalResponse(CamelModel):
    """Datos públicos de un hospital."""
    id: int
    name: str
    address: str
    contact_person: str
    phone: str
    email: str
    license_number: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @classmethod
    def desde_modelo(cls, hospital, **extra) -> "HospitalResponse":
        return cls(
            id=hospital.id,
            name=hospital.nombre,
            address=hospital.direccion,
            contact_person=hospital.persona_contacto,
            phone=hospital.telefono,
            email=hospital.email,
            license_number=hospital.numero_licencia,
            latitude=hospital.latitud,
            longitude=hospital.longitud,
            **extra
        )


class HospitalDetailResponse(HospitalResponse):
    """Hospital con el registro canónico de cada inventario (null si no existe)."""
    beds: Optional[Dict[str, int]] = None
    blood: Optional[Dict[str, int]] = None
    oxygen: Optional[Dict[str, int]] = None
    ambulance: Optional[Dict[str, int]] = None
