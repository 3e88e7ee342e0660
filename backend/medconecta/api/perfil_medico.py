"""
Endpoints del Perfil Médico del paciente.
Requieren sesión válida; cada perfil solo lo maneja su propio paciente.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from medconecta.core.database import get_session
from medconecta.core.auth_dependencies import (
    get_current_identity,
    require_patient_owner,
    verificar_paciente_owner,
)
from medconecta.core.exceptions import (
    ValidationError,
    ConflictoError,
    PacienteNotFoundError,
    PerfilMedicoNotFoundError,
    DoctorNotFoundError,
)
from medconecta.services.auth_service import Identidad
from medconecta.services.perfil_medico_service import PerfilMedicoService
from medconecta.schemas.perfil_medico import (
    PerfilCheckRequest,
    PerfilCheckResponse,
    PerfilMedicoCreate,
    PerfilMedicoResponse,
)

router = APIRouter(dependencies=[Depends(get_current_identity)])


@router.post("/check", response_model=PerfilCheckResponse)
def verificar_perfil(
    data: PerfilCheckRequest,
    session: Session = Depends(get_session),
    identidad: Identidad = Depends(get_current_identity)
):
    """Indica si el paciente ya completó su perfil médico."""
    service = PerfilMedicoService(session)
    try:
        user_id = service.requerir_usuario(data.user_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    verificar_paciente_owner(identidad, user_id)

    return PerfilCheckResponse(exists=service.existe(user_id))


@router.post("/submit", response_model=PerfilMedicoResponse)
def registrar_perfil(
    data: PerfilMedicoCreate,
    session: Session = Depends(get_session),
    identidad: Identidad = Depends(get_current_identity)
):
    """
    Registra el perfil médico. Solo uno por paciente.

    Orden: userId (400), paciente existe (404), dueño (403), duplicado (409).
    """
    service = PerfilMedicoService(session)
    try:
        user_id = service.requerir_paciente(data.user_id)
        verificar_paciente_owner(identidad, user_id)
        perfil = service.registrar(data)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except PacienteNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except ConflictoError as e:
        raise HTTPException(status_code=409, detail=e.message)

    return PerfilMedicoResponse.desde_modelo(perfil)


@router.get("/{user_id}", response_model=PerfilMedicoResponse)
def obtener_perfil(
    user_id: int,
    session: Session = Depends(get_session),
    identidad: Identidad = Depends(require_patient_owner())
):
    try:
        perfil = PerfilMedicoService(session).obtener(user_id)
    except PerfilMedicoNotFoundError:
        raise HTTPException(status_code=404, detail="Medical profile not found")

    return PerfilMedicoResponse.desde_modelo(perfil)


# ============================================
# DOCTORES FAVORITOS
# ============================================

@router.put("/{user_id}/favorite-doctors/{doctor_id}", response_model=PerfilMedicoResponse)
def agregar_favorito(
    user_id: int,
    doctor_id: int,
    session: Session = Depends(get_session),
    identidad: Identidad = Depends(require_patient_owner())
):
    try:
        perfil = PerfilMedicoService(session).agregar_favorito(user_id, doctor_id)
    except PerfilMedicoNotFoundError:
        raise HTTPException(status_code=404, detail="Medical profile not found")
    except DoctorNotFoundError:
        raise HTTPException(status_code=404, detail="Doctor not found")

    return PerfilMedicoResponse.desde_modelo(perfil)


@router.delete("/{user_id}/favorite-doctors/{doctor_id}", response_model=PerfilMedicoResponse)
def quitar_favorito(
    user_id: int,
    doctor_id: int,
    session: Session = Depends(get_session),
    identidad: Identidad = Depends(require_patient_owner())
):
    try:
        perfil = PerfilMedicoService(session).quitar_favorito(user_id, doctor_id)
    except PerfilMedicoNotFoundError:
        raise HTTPException(status_code=404, detail="Medical profile not found")
    except DoctorNotFoundError:
        raise HTTPException(status_code=404, detail="Doctor not found")

    return PerfilMedicoResponse.desde_modelo(perfil)
