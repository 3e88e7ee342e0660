"""
Enumeraciones del sistema.
Centralizadas para evitar imports circulares.
"""
from enum import Enum


class RolEnum(str, Enum):
    """Tipo de cuenta que inicia sesión."""
    HOSPITAL = "hospital"
    PACIENTE = "patient"


class TipoRecursoEnum(str, Enum):
    """
    Tipos de recurso operativo que cada hospital publica.

    El valor es el segmento de URL: /hospital/{id}/{tipo}.
    """
    CAMAS = "beds"
    SANGRE = "blood"
    OXIGENO = "oxygen"
    AMBULANCIA = "ambulance"
