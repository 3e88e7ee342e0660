"""
Servicio del tablero de ayuda comunitaria.
"""
from typing import List
from sqlmodel import Session
import logging

from medconecta.models.comunidad import SolicitudComunidad, RespuestaComunidad
from medconecta.repositories.comunidad_repo import ComunidadRepository
from medconecta.schemas.comunidad import SolicitudCreate, RespuestaCreate
from medconecta.core.exceptions import SolicitudNotFoundError

logger = logging.getLogger("medconecta.comunidad")


class ComunidadService:
    """Solicitudes públicas de ayuda y sus respuestas."""

    def __init__(self, session: Session):
        self.session = session
        self.repo = ComunidadRepository(session)

    def listar(self) -> List[SolicitudComunidad]:
        return self.repo.obtener_recientes()

    def publicar(self, data: SolicitudCreate) -> SolicitudComunidad:
        solicitud = self.repo.crear_desde_dict({
            "nombre": data.name,
            "descripcion": data.description,
        })
        logger.info(f"Solicitud comunitaria publicada: {solicitud.id}")
        return solicitud

    def responder(self, data: RespuestaCreate) -> RespuestaComunidad:
        """
        Agrega una respuesta al final de la solicitud.

        Raises:
            SolicitudNotFoundError: la solicitud no existe
        """
        if not self.repo.obtener_por_id(data.request_id):
            raise SolicitudNotFoundError(data.request_id)

        respuesta = RespuestaComunidad(
            solicitud_id=data.request_id,
            orden=self.repo.contar_respuestas(data.request_id),
            nombre=data.name,
            mensaje=data.message,
        )
        self.session.add(respuesta)
        self.session.commit()
        self.session.refresh(respuesta)

        logger.info(f"Respuesta agregada a solicitud {data.request_id}")
        return respuesta
