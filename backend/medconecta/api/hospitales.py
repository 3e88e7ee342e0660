"""
Endpoints del directorio de Hospitales.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from typing import List

from medconecta.core.database import get_session
from medconecta.core.exceptions import RecursoNotFoundError
from medconecta.models.enums import TipoRecursoEnum
from medconecta.repositories.hospital_repo import HospitalRepository
from medconecta.services.recursos_service import RecursoService
from medconecta.schemas.hospital import HospitalResponse, HospitalDetailResponse

router = APIRouter()


@router.get("", response_model=List[HospitalResponse])
def obtener_hospitales(session: Session = Depends(get_session)):
    """Obtiene todos los hospitales registrados."""
    repo = HospitalRepository(session)
    return [HospitalResponse.desde_modelo(h) for h in repo.obtener_ordenados()]


@router.get("/{hospital_id}", response_model=HospitalDetailResponse)
def obtener_hospital(hospital_id: int, session: Session = Depends(get_session)):
    """Obtiene un hospital con el estado de todos sus inventarios."""
    hospital = HospitalRepository(session).obtener_por_id(hospital_id)

    if not hospital:
        raise HTTPException(status_code=404, detail="Hospital not found")

    service = RecursoService(session)
    inventarios = {}
    for tipo in TipoRecursoEnum:
        try:
            inventarios[tipo.value] = service.leer(hospital_id, tipo)
        except RecursoNotFoundError:
            inventarios[tipo.value] = None

    return HospitalDetailResponse.desde_modelo(hospital, **inventarios)
