"""
Repositories para acceso a datos.
Abstraen las queries SQL y proporcionan una interfaz limpia.
"""
from medconecta.repositories.base import BaseRepository
from medconecta.repositories.hospital_repo import HospitalRepository
from medconecta.repositories.paciente_repo import PacienteRepository
from medconecta.repositories.recurso_repo import RecursoRepository
from medconecta.repositories.doctor_repo import DoctorRepository
from medconecta.repositories.perfil_medico_repo import PerfilMedicoRepository
from medconecta.repositories.comunidad_repo import ComunidadRepository

__all__ = [
    "BaseRepository",
    "HospitalRepository",
    "PacienteRepository",
    "RecursoRepository",
    "DoctorRepository",
    "PerfilMedicoRepository",
    "ComunidadRepository",
]
