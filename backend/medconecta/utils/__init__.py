"""
Utilidades compartidas del sistema.
"""
from medconecta.utils.helpers import safe_json_loads, safe_json_dumps
from medconecta.utils.logger import configurar_logging, get_logger

__all__ = [
    "safe_json_loads",
    "safe_json_dumps",
    "configurar_logging",
    "get_logger",
]
