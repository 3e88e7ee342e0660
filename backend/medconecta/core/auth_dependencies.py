"""
Dependencies de autenticación para FastAPI.
Provee dependencies para proteger endpoints.
"""
from typing import Optional
from fastapi import Depends, HTTPException, status, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from medconecta.core.database import get_session
from medconecta.models.enums import RolEnum
from medconecta.repositories.hospital_repo import HospitalRepository
from medconecta.services.auth_service import AuthService, Identidad
from medconecta.utils.constants import MENSAJE_NO_AUTENTICADO


# Esquema de seguridad Bearer
security = HTTPBearer(auto_error=False)


class AuthError(HTTPException):
    """Excepción personalizada de autenticación."""
    def __init__(self, detail: str = MENSAJE_NO_AUTENTICADO, status_code: int = status.HTTP_401_UNAUTHORIZED):
        super().__init__(
            status_code=status_code,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"}
        )


class PermissionError(HTTPException):
    """Excepción de permisos insuficientes."""
    def __init__(self, detail: str = "You don't have permission to perform this action"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


def get_auth_service(request: Request) -> AuthService:
    """Servicio de autenticación construido por la factory de la aplicación."""
    return request.app.state.auth_service


# ============================================
# DEPENDENCIES BÁSICAS
# ============================================

async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    session: Session = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service)
) -> Identidad:
    """
    Obtiene la identidad de la sesión actual.
    Lanza error 401 si no hay sesión válida.
    """
    if not credentials:
        raise AuthError()

    payload = auth_service.decode_token(credentials.credentials)

    if not payload or payload.type != "access":
        raise AuthError()

    identidad = auth_service.resolve_identity(payload, session)

    if not identidad:
        raise AuthError()

    return identidad


# ============================================
# DEPENDENCY CON VERIFICACIÓN DE HOSPITAL
# ============================================

def require_hospital_owner(status_si_no_existe: Optional[int] = None):
    """
    Verifica que la sesión sea del mismo hospital que el recurso.
    Usado para los endpoints de escritura bajo /hospital/{hospital_id}.

    Con status_si_no_existe un hospital inexistente responde con ese
    código antes de revisar permisos (404 para inventarios, 400 para
    altas que lo referencian).
    """
    async def hospital_checker(
        hospital_id: int,
        identidad: Identidad = Depends(get_current_identity),
        session: Session = Depends(get_session)
    ) -> Identidad:
        if status_si_no_existe and not HospitalRepository(session).existe(hospital_id):
            raise HTTPException(status_code=status_si_no_existe, detail="Hospital not found")

        if identidad.rol != RolEnum.HOSPITAL:
            raise PermissionError("Only a hospital can modify its resources")

        if identidad.id != hospital_id:
            raise PermissionError("You don't have access to this hospital")

        return identidad

    return hospital_checker


# ============================================
# DEPENDENCY CON VERIFICACIÓN DE PACIENTE
# ============================================

def verificar_paciente_owner(identidad: Identidad, user_id: int) -> None:
    """El perfil médico solo lo maneja el propio paciente."""
    if identidad.rol != RolEnum.PACIENTE or identidad.id != user_id:
        raise PermissionError("You don't have access to this medical profile")


def require_patient_owner():
    """Versión dependency de verificar_paciente_owner para rutas /{user_id}."""
    async def patient_checker(
        user_id: int,
        identidad: Identidad = Depends(get_current_identity)
    ) -> Identidad:
        verificar_paciente_owner(identidad, user_id)
        return identidad

    return patient_checker
