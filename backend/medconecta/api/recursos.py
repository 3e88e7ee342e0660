"""
Endpoints de inventarios hospitalarios.

Una ruta GET/PUT por tipo de recurso bajo /hospital/{hospital_id}/:
beds, blood, oxygen, ambulance.
"""
from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlmodel import Session
from typing import Any, Dict

from medconecta.core.database import get_session
from medconecta.core.auth_dependencies import get_current_identity, require_hospital_owner
from medconecta.core.exceptions import (
    ValidationError,
    HospitalNotFoundError,
    RecursoNotFoundError,
)
from medconecta.models.enums import TipoRecursoEnum
from medconecta.services.auth_service import Identidad
from medconecta.services.recursos_service import RecursoService
from medconecta.schemas.responses import ErrorResponse

router = APIRouter(
    responses={
        401: {"model": ErrorResponse, "description": "Sin sesión válida"},
        404: {"model": ErrorResponse, "description": "Hospital o registro inexistente"},
    }
)


def _registrar_rutas(tipo: TipoRecursoEnum) -> None:
    ruta = f"/{{hospital_id}}/{tipo.value}"

    @router.get(ruta, response_model=Dict[str, int], name=f"leer_{tipo.value}")
    def leer_recurso(
        hospital_id: int,
        session: Session = Depends(get_session),
        identidad: Identidad = Depends(get_current_identity)
    ):
        try:
            return RecursoService(session).leer(hospital_id, tipo)
        except RecursoNotFoundError:
            raise HTTPException(status_code=404, detail="Record not found")

    @router.put(ruta, response_model=Dict[str, int], name=f"actualizar_{tipo.value}")
    def actualizar_recurso(
        hospital_id: int,
        payload: Dict[str, Any] = Body(...),
        session: Session = Depends(get_session),
        identidad: Identidad = Depends(require_hospital_owner(status_si_no_existe=status.HTTP_404_NOT_FOUND))
    ):
        try:
            return RecursoService(session).upsert(hospital_id, tipo, payload)
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=e.message)
        except HospitalNotFoundError:
            raise HTTPException(status_code=404, detail="Hospital not found")

    leer_recurso.__doc__ = f"Registro canónico de {tipo.value} del hospital."
    actualizar_recurso.__doc__ = (
        f"Crea o sobrescribe el registro de {tipo.value}. "
        "Acepta las claves en cualquiera de sus alias."
    )


for _tipo in TipoRecursoEnum:
    _registrar_rutas(_tipo)
