"""
Módulo core: funcionalidades centrales del sistema.
"""
from medconecta.core.database import (
    crear_engine,
    create_db_and_tables,
    get_engine,
    get_session,
)
from medconecta.core.exceptions import (
    BaseAppException,
    ValidationError,
    ReferenciaInvalidaError,
    ConflictoError,
    NotFoundError,
    HospitalNotFoundError,
    PacienteNotFoundError,
    DoctorNotFoundError,
    RecursoNotFoundError,
    CredencialesInvalidasError,
    ServicioExternoError,
)

__all__ = [
    "crear_engine",
    "create_db_and_tables",
    "get_engine",
    "get_session",
    "BaseAppException",
    "ValidationError",
    "ReferenciaInvalidaError",
    "ConflictoError",
    "NotFoundError",
    "HospitalNotFoundError",
    "PacienteNotFoundError",
    "DoctorNotFoundError",
    "RecursoNotFoundError",
    "CredencialesInvalidasError",
    "ServicioExternoError",
]
