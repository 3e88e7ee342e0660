"""
Schemas del tablero comunitario.
"""
from pydantic import Field
from typing import List
from datetime import datetime

from medconecta.schemas.base import CamelModel


class SolicitudCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class RespuestaCreate(CamelModel):
    request_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class RespuestaResponse(CamelModel):
    name: str
    message: str


class SolicitudResponse(CamelModel):
    """Solicitud con sus respuestas en orden de llegada."""
    id: str
    name: str
    description: str
    created_at: datetime
    replies: List[RespuestaResponse] = []

    @classmethod
    def desde_modelo(cls, solicitud) -> "SolicitudResponse":
        return cls(
            id=solicitud.id,
            name=solicitud.nombre,
            description=solicitud.descripcion,
            created_at=solicitud.created_at,
            replies=[
                RespuestaResponse(name=r.nombre, message=r.mensaje)
                for r in solicitud.respuestas
            ],
        )
