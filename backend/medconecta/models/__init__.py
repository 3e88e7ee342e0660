"""
Modelos de datos del sistema.
Re-exporta todos los modelos para imports simplificados.
"""
from medconecta.models.enums import RolEnum, TipoRecursoEnum

from medconecta.models.hospital import Hospital
from medconecta.models.paciente import Paciente
from medconecta.models.recursos import (
    InventarioCamas,
    InventarioSangre,
    InventarioOxigeno,
    InventarioAmbulancias,
)
from medconecta.models.doctor import Doctor, DoctorFavorito
from medconecta.models.perfil_medico import PerfilMedico
from medconecta.models.comunidad import SolicitudComunidad, RespuestaComunidad

__all__ = [
    # Enums
    "RolEnum",
    "TipoRecursoEnum",
    # Models
    "Hospital",
    "Paciente",
    "InventarioCamas",
    "InventarioSangre",
    "InventarioOxigeno",
    "InventarioAmbulancias",
    "Doctor",
    "DoctorFavorito",
    "PerfilMedico",
    "SolicitudComunidad",
    "RespuestaComunidad",
]
