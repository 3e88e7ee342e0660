"""
Schemas de autenticación.
Validación de datos para registro, login y tokens.
"""
from pydantic import BaseModel, EmailStr, Field, RootModel, field_validator, model_validator
from typing import Annotated, Literal, Optional, Union

from medconecta.models.enums import RolEnum
from medconecta.schemas.base import CamelModel


# ============================================
# REGISTRO
# ============================================

class HospitalRegisterRequest(CamelModel):
    """Schema para registro de hospital."""
    name: str = Field(..., min_length=3)
    address: str = Field(..., min_length=10)
    contact_person: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=10)
    email: EmailStr
    license_number: str = Field(..., min_length=5)
    password: str = Field(..., min_length=6)
    confirm_password: str = Field(..., min_length=6)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    @field_validator('email')
    @classmethod
    def email_minusculas(cls, v: str) -> str:
        return v.lower()

    @model_validator(mode='after')
    def passwords_coinciden(self) -> "HospitalRegisterRequest":
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class PatientRegisterRequest(CamelModel):
    """Schema para registro de paciente."""
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator('email')
    @classmethod
    def email_minusculas(cls, v: str) -> str:
        return v.lower()


# ============================================
# LOGIN (variante etiquetada por rol)
# ============================================

class HospitalCredentials(CamelModel):
    """Credenciales de hospital: email + contraseña + licencia."""
    role: Literal["hospital"]
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    license_number: str = Field(..., min_length=1)


class PatientCredentials(CamelModel):
    """Credenciales de paciente: email + contraseña."""
    role: Literal["patient"]
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginRequest(RootModel[Annotated[
    Union[HospitalCredentials, PatientCredentials],
    Field(discriminator="role")
]]):
    """Credenciales de login; el campo role decide la variante."""


# ============================================
# RESPUESTAS
# ============================================

class IdentityResponse(CamelModel):
    """Identidad autenticada (hospital o paciente)."""
    id: int
    role: RolEnum
    email: str
    name: str
    license_number: Optional[str] = None


class TokenResponse(CamelModel):
    """Schema de respuesta del login."""
    message: str = "Login successful"
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # segundos hasta expiración
    identity: IdentityResponse


class TokenPayload(BaseModel):
    """Claims del JWT de acceso."""
    sub: str
    rol: RolEnum
    email: str
    exp: int
    iat: Optional[int] = None
    type: str = "access"
