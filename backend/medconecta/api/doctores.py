"""
Endpoints del directorio de Doctores de un hospital.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlmodel import Session
from typing import List

from medconecta.core.database import get_session
from medconecta.core.auth_dependencies import require_hospital_owner
from medconecta.core.exceptions import ReferenciaInvalidaError, DoctorNotFoundError
from medconecta.services.auth_service import Identidad
from medconecta.services.doctor_service import DoctorService
from medconecta.schemas.doctor import DoctorCreate, DoctorUpdate, DoctorResponse

router = APIRouter()


@router.get("/{hospital_id}/doctors", response_model=List[DoctorResponse])
def obtener_doctores(hospital_id: int, session: Session = Depends(get_session)):
    """Lista los doctores de un hospital."""
    doctores = DoctorService(session).listar(hospital_id)
    return [DoctorResponse.desde_modelo(d) for d in doctores]


@router.post(
    "/{hospital_id}/doctors",
    response_model=DoctorResponse,
    status_code=status.HTTP_201_CREATED
)
def crear_doctor(
    hospital_id: int,
    data: DoctorCreate,
    session: Session = Depends(get_session),
    identidad: Identidad = Depends(require_hospital_owner(status_si_no_existe=status.HTTP_400_BAD_REQUEST))
):
    """
    Agrega un doctor al hospital. Sin turno queda como 'Not Assigned'.

    Un hospital inexistente es una referencia inválida (400), no un 404.
    """
    try:
        doctor = DoctorService(session).crear(hospital_id, data)
    except ReferenciaInvalidaError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return DoctorResponse.desde_modelo(doctor)


@router.put("/{hospital_id}/doctors", response_model=DoctorResponse)
def actualizar_doctor(
    hospital_id: int,
    data: DoctorUpdate,
    session: Session = Depends(get_session),
    identidad: Identidad = Depends(require_hospital_owner())
):
    """Actualiza un doctor del hospital; el id viaja en el cuerpo."""
    try:
        doctor = DoctorService(session).actualizar(hospital_id, data)
    except DoctorNotFoundError:
        raise HTTPException(status_code=404, detail="Doctor not found")

    return DoctorResponse.desde_modelo(doctor)


@router.delete("/{hospital_id}/doctors", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_doctor(
    hospital_id: int,
    doctor_id: int = Query(..., alias="id"),
    session: Session = Depends(get_session),
    identidad: Identidad = Depends(require_hospital_owner())
):
    """Elimina un doctor del hospital (?id=)."""
    try:
        DoctorService(session).eliminar(hospital_id, doctor_id)
    except DoctorNotFoundError:
        raise HTTPException(status_code=404, detail="Doctor not found")

    return Response(status_code=status.HTTP_204_NO_CONTENT)
