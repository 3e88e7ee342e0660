"""
Funciones auxiliares compartidas.
"""
import json
from typing import Any


def safe_json_loads(value: Any, default: Any = None) -> Any:
    """
    Parsea JSON de manera segura.

    Args:
        value: Valor a parsear
        default: Valor por defecto si falla

    Returns:
        Valor parseado o default
    """
    if default is None:
        default = []

    if not value:
        return default

    if isinstance(value, list):
        return value

    if isinstance(value, str):
        try:
            parsed = json.loads(value)
            return parsed if isinstance(parsed, list) else default
        except (json.JSONDecodeError, TypeError):
            return default

    return default


def safe_json_dumps(value: Any) -> str:
    """
    Convierte a JSON string de manera segura.

    Args:
        value: Valor a convertir

    Returns:
        String JSON
    """
    if value is None:
        return "[]"

    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return "[]"
