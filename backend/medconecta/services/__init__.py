"""
Servicios de negocio.
"""
from medconecta.services.auth_service import AuthService, Identidad
from medconecta.services.recursos_service import RecursoService
from medconecta.services.doctor_service import DoctorService
from medconecta.services.perfil_medico_service import PerfilMedicoService
from medconecta.services.comunidad_service import ComunidadService
from medconecta.services.chatbot_service import DrBeraClient

__all__ = [
    "AuthService",
    "Identidad",
    "RecursoService",
    "DoctorService",
    "PerfilMedicoService",
    "ComunidadService",
    "DrBeraClient",
]
