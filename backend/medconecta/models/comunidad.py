"""
Modelos del tablero de ayuda comunitaria.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import List, Optional
from datetime import datetime
import uuid


class SolicitudComunidad(SQLModel, table=True):
    """Solicitud de ayuda publicada en el tablero."""
    __tablename__ = "solicitud_comunidad"

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True
    )
    nombre: str
    descripcion: str
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)

    respuestas: List["RespuestaComunidad"] = Relationship(
        back_populates="solicitud",
        sa_relationship_kwargs={"order_by": "RespuestaComunidad.orden"}
    )


class RespuestaComunidad(SQLModel, table=True):
    """Respuesta a una solicitud; solo se agregan, nunca se editan."""
    __tablename__ = "respuesta_comunidad"

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True
    )
    solicitud_id: str = Field(foreign_key="solicitud_comunidad.id", index=True)
    orden: int = Field(default=0)
    nombre: str
    mensaje: str
    created_at: datetime = Field(default_factory=datetime.utcnow)

    solicitud: Optional[SolicitudComunidad] = Relationship(back_populates="respuestas")
