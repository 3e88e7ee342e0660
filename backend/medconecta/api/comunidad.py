"""
Endpoints del tablero de ayuda comunitaria (públicos).
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from typing import List

from medconecta.core.database import get_session
from medconecta.core.exceptions import SolicitudNotFoundError
from medconecta.services.comunidad_service import ComunidadService
from medconecta.schemas.comunidad import SolicitudCreate, RespuestaCreate, SolicitudResponse
from medconecta.schemas.responses import SuccessResponse

router = APIRouter()


@router.get("", response_model=List[SolicitudResponse])
def obtener_solicitudes(session: Session = Depends(get_session)):
    """Solicitudes de la más reciente a la más antigua, con sus respuestas."""
    solicitudes = ComunidadService(session).listar()
    return [SolicitudResponse.desde_modelo(s) for s in solicitudes]


@router.post("/submit", response_model=SuccessResponse)
def publicar_solicitud(data: SolicitudCreate, session: Session = Depends(get_session)):
    solicitud = ComunidadService(session).publicar(data)
    return SuccessResponse(success=True, id=solicitud.id)


@router.post("/reply", response_model=SuccessResponse)
def responder_solicitud(data: RespuestaCreate, session: Session = Depends(get_session)):
    try:
        ComunidadService(session).responder(data)
    except SolicitudNotFoundError:
        raise HTTPException(status_code=404, detail="Request not found")

    return SuccessResponse(success=True)
