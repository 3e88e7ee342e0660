"""
Configuración de logging del sistema.
"""
import logging
from typing import Optional

from medconecta.config import settings


def configurar_logging(nivel: Optional[str] = None, formato_log: Optional[str] = None) -> logging.Logger:
    """
    Configura y retorna el logger principal del sistema.

    Args:
        nivel: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        formato_log: Formato de las líneas de log

    Returns:
        Logger configurado
    """
    if nivel is None:
        nivel = settings.LOG_LEVEL
    if formato_log is None:
        formato_log = settings.LOG_FORMAT

    # Convertir string a nivel
    nivel_num = getattr(logging, nivel.upper(), logging.INFO)

    formato = logging.Formatter(formato_log, datefmt='%Y-%m-%d %H:%M:%S')

    # Handler para consola
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formato)

    # Logger principal
    logger = logging.getLogger('medconecta')
    logger.setLevel(nivel_num)

    # Evitar duplicación de handlers
    if not logger.handlers:
        logger.addHandler(console_handler)

    return logger


def get_logger(nombre: str) -> logging.Logger:
    """
    Obtiene un logger para un módulo específico.

    Args:
        nombre: Nombre del módulo

    Returns:
        Logger hijo de 'medconecta'
    """
    return logging.getLogger(f'medconecta.{nombre}')
