"""
Servicio de Autenticación.
Manejo de JWT, hashing de contraseñas, registro y estrategias de login
(hospital y paciente).
"""
from datetime import datetime, timedelta
from dataclasses import dataclass
from typing import Optional, Union
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlmodel import Session
import logging

from medconecta.config import Settings
from medconecta.core.exceptions import CredencialesInvalidasError, ValidationError
from medconecta.models.enums import RolEnum
from medconecta.models.hospital import Hospital
from medconecta.models.paciente import Paciente
from medconecta.repositories.hospital_repo import HospitalRepository
from medconecta.repositories.paciente_repo import PacienteRepository
from medconecta.schemas.auth_schemas import (
    HospitalCredentials,
    PatientCredentials,
    HospitalRegisterRequest,
    PatientRegisterRequest,
    TokenPayload,
)

logger = logging.getLogger("medconecta.auth")

# Contexto de hashing de contraseñas
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass
class Identidad:
    """Quién está detrás de una sesión válida."""
    id: int
    rol: RolEnum
    email: str
    nombre: str
    numero_licencia: Optional[str] = None

    @classmethod
    def de_hospital(cls, hospital: Hospital) -> "Identidad":
        return cls(
            id=hospital.id,
            rol=RolEnum.HOSPITAL,
            email=hospital.email,
            nombre=hospital.nombre,
            numero_licencia=hospital.numero_licencia,
        )

    @classmethod
    def de_paciente(cls, paciente: Paciente) -> "Identidad":
        return cls(
            id=paciente.id,
            rol=RolEnum.PACIENTE,
            email=paciente.email,
            nombre=paciente.nombre,
        )


def hash_password(password: str) -> str:
    """Hashea una contraseña."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verifica una contraseña contra su hash."""
    return pwd_context.verify(plain_password, hashed_password)


# ============================================
# ESTRATEGIAS DE CREDENCIALES
# ============================================

class HospitalCredentialStrategy:
    """Login de hospital: licencia + email + contraseña."""

    def verify(self, credenciales: HospitalCredentials, session: Session) -> Identidad:
        hospital = HospitalRepository(session).obtener_por_licencia(credenciales.license_number)

        if not hospital or hospital.email != credenciales.email.lower():
            raise CredencialesInvalidasError()

        if not verify_password(credenciales.password, hospital.hashed_password):
            raise CredencialesInvalidasError()

        return Identidad.de_hospital(hospital)


class PatientCredentialStrategy:
    """Login de paciente: email + contraseña."""

    def verify(self, credenciales: PatientCredentials, session: Session) -> Identidad:
        paciente = PacienteRepository(session).obtener_por_email(credenciales.email)

        if not paciente:
            raise CredencialesInvalidasError()

        if not verify_password(credenciales.password, paciente.hashed_password):
            raise CredencialesInvalidasError()

        return Identidad.de_paciente(paciente)


class AuthService:
    """Servicio de autenticación."""

    def __init__(self, app_settings: Settings):
        self.secret_key = app_settings.JWT_SECRET_KEY
        self.algorithm = app_settings.JWT_ALGORITHM
        self.access_token_expire = timedelta(minutes=app_settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
        self.hospital_strategy = HospitalCredentialStrategy()
        self.patient_strategy = PatientCredentialStrategy()

    # ============================================
    # LOGIN
    # ============================================

    def authenticate(
        self,
        credenciales: Union[HospitalCredentials, PatientCredentials],
        session: Session
    ) -> Identidad:
        """
        Verifica credenciales con la estrategia que corresponde al rol.

        Raises:
            CredencialesInvalidasError: si no coinciden
        """
        rol = RolEnum(credenciales.role)

        if rol == RolEnum.HOSPITAL:
            identidad = self.hospital_strategy.verify(credenciales, session)
        elif rol == RolEnum.PACIENTE:
            identidad = self.patient_strategy.verify(credenciales, session)
        else:
            raise CredencialesInvalidasError()

        logger.info(f"Login exitoso: {identidad.rol.value} {identidad.email}")
        return identidad

    # ============================================
    # JWT TOKENS
    # ============================================

    @property
    def expires_in(self) -> int:
        """Duración del access token en segundos."""
        return int(self.access_token_expire.total_seconds())

    def create_access_token(
        self,
        identidad: Identidad,
        expires_delta: Optional[timedelta] = None
    ) -> str:
        """Crea un access token JWT."""
        ahora = datetime.utcnow()
        expire = ahora + (expires_delta or self.access_token_expire)

        payload = {
            "sub": str(identidad.id),
            "rol": identidad.rol.value,
            "email": identidad.email,
            "exp": expire,
            "iat": ahora,
            "type": "access"
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Optional[TokenPayload]:
        """Decodifica y valida un JWT token."""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm]
            )
            return TokenPayload(**payload)
        except (JWTError, ValueError):
            return None

    def resolve_identity(self, payload: TokenPayload, session: Session) -> Optional[Identidad]:
        """
        Busca la cuenta dueña del token.

        Returns:
            La identidad o None si la cuenta ya no existe
        """
        try:
            cuenta_id = int(payload.sub)
        except ValueError:
            return None

        if payload.rol == RolEnum.HOSPITAL:
            hospital = HospitalRepository(session).obtener_por_id(cuenta_id)
            return Identidad.de_hospital(hospital) if hospital else None

        paciente = PacienteRepository(session).obtener_por_id(cuenta_id)
        return Identidad.de_paciente(paciente) if paciente else None

    # ============================================
    # REGISTRO
    # ============================================

    def register_hospital(self, data: HospitalRegisterRequest, session: Session) -> Hospital:
        """
        Registra un hospital.

        Raises:
            ValidationError: si el email o la licencia ya están registrados
        """
        repo = HospitalRepository(session)

        if repo.obtener_por_email(data.email) or repo.obtener_por_licencia(data.license_number):
            raise ValidationError("User already exists")

        hospital = repo.crear_desde_dict({
            "nombre": data.name,
            "direccion": data.address,
            "persona_contacto": data.contact_person,
            "telefono": data.phone,
            "email": data.email,
            "numero_licencia": data.license_number,
            "hashed_password": hash_password(data.password),
            "latitud": data.latitude,
            "longitud": data.longitude,
        })

        logger.info(f"Hospital registrado: {hospital.nombre} (id={hospital.id})")
        return hospital

    def register_patient(self, data: PatientRegisterRequest, session: Session) -> Paciente:
        """
        Registra un paciente.

        Raises:
            ValidationError: si el email ya está en uso
        """
        repo = PacienteRepository(session)

        if repo.obtener_por_email(data.email):
            raise ValidationError("Email already in use")

        paciente = repo.crear_desde_dict({
            "nombre": data.name,
            "email": data.email,
            "hashed_password": hash_password(data.password),
        })

        logger.info(f"Paciente registrado: {paciente.email} (id={paciente.id})")
        return paciente
