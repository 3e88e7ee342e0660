"""
Schemas de Respuestas Comunes.
"""
from pydantic import BaseModel
from typing import Optional


class MessageResponse(BaseModel):
    """Respuesta genérica con mensaje."""
    message: str
    id: Optional[int] = None


class SuccessResponse(BaseModel):
    """Respuesta de operaciones del tablero comunitario."""
    success: bool
    id: Optional[str] = None


class ErrorResponse(BaseModel):
    """Respuesta de error."""
    detail: str
