"""
Repository del tablero comunitario.
"""
from typing import List
from sqlmodel import Session, select, func

from medconecta.repositories.base import BaseRepository
from medconecta.models.comunidad import SolicitudComunidad, RespuestaComunidad


class ComunidadRepository(BaseRepository[SolicitudComunidad]):
    """Repository para solicitudes y respuestas de la comunidad."""

    def __init__(self, session: Session):
        super().__init__(session, SolicitudComunidad)

    def obtener_recientes(self) -> List[SolicitudComunidad]:
        """Solicitudes de la más nueva a la más antigua."""
        query = select(SolicitudComunidad).order_by(
            SolicitudComunidad.created_at.desc()
        )
        return list(self.session.exec(query).all())

    def contar_respuestas(self, solicitud_id: str) -> int:
        result = self.session.exec(
            select(func.count())
            .select_from(RespuestaComunidad)
            .where(RespuestaComunidad.solicitud_id == solicitud_id)
        ).first()
        return result or 0
