"""
Router de Autenticación.
Registro de hospitales y pacientes, login y sesión actual.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from medconecta.core.database import get_session
from medconecta.core.exceptions import ValidationError, CredencialesInvalidasError
from medconecta.core.auth_dependencies import get_auth_service, get_current_identity
from medconecta.services.auth_service import AuthService, Identidad
from medconecta.schemas.auth_schemas import (
    HospitalRegisterRequest,
    PatientRegisterRequest,
    LoginRequest,
    IdentityResponse,
    TokenResponse,
)
from medconecta.schemas.responses import MessageResponse


router = APIRouter(prefix="/auth", tags=["Autenticación"])


def _identidad_response(identidad: Identidad) -> IdentityResponse:
    return IdentityResponse(
        id=identidad.id,
        role=identidad.rol,
        email=identidad.email,
        name=identidad.nombre,
        license_number=identidad.numero_licencia,
    )


# ============================================
# REGISTRO
# ============================================

@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def registrar_hospital(
    data: HospitalRegisterRequest,
    session: Session = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service)
):
    """Registra un hospital con su licencia y ubicación."""
    try:
        hospital = auth_service.register_hospital(data, session)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return MessageResponse(message="Hospital registered successfully", id=hospital.id)


@router.post("/patient/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def registrar_paciente(
    data: PatientRegisterRequest,
    session: Session = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service)
):
    """Registra un paciente."""
    try:
        paciente = auth_service.register_patient(data, session)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return MessageResponse(message="User created successfully", id=paciente.id)


# ============================================
# LOGIN
# ============================================

@router.post("/login", response_model=TokenResponse)
def login(
    data: LoginRequest,
    session: Session = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Inicia sesión como hospital (email + contraseña + licencia)
    o como paciente (email + contraseña), según el campo role.
    """
    try:
        identidad = auth_service.authenticate(data.root, session)
    except CredencialesInvalidasError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message
        )

    return TokenResponse(
        access_token=auth_service.create_access_token(identidad),
        expires_in=auth_service.expires_in,
        identity=_identidad_response(identidad),
    )


@router.get("/me", response_model=IdentityResponse)
async def obtener_sesion(identidad: Identidad = Depends(get_current_identity)):
    """Identidad de la sesión actual."""
    return _identidad_response(identidad)
