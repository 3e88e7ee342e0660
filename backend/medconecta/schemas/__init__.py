"""
Schemas Pydantic de entrada y salida de la API.
"""
from medconecta.schemas.auth_schemas import (
    HospitalRegisterRequest,
    PatientRegisterRequest,
    HospitalCredentials,
    PatientCredentials,
    LoginRequest,
    IdentityResponse,
    TokenResponse,
    TokenPayload,
)
from medconecta.schemas.hospital import HospitalResponse, HospitalDetailResponse
from medconecta.schemas.doctor import DoctorCreate, DoctorUpdate, DoctorResponse
from medconecta.schemas.perfil_medico import (
    PerfilCheckRequest,
    PerfilCheckResponse,
    PerfilMedicoCreate,
    PerfilMedicoResponse,
)
from medconecta.schemas.comunidad import SolicitudCreate, RespuestaCreate, SolicitudResponse
from medconecta.schemas.chatbot import ChatRequest, ChatResponse
from medconecta.schemas.responses import MessageResponse, SuccessResponse, ErrorResponse
