"""
Cliente del asistente Dr. Bera.
Reenvía el mensaje del usuario al servicio externo y devuelve su respuesta
como texto.
"""
from typing import Optional
import logging

import httpx

from medconecta.config import Settings
from medconecta.core.exceptions import (
    ValidationError,
    ServicioExternoError,
    ServicioNoConfiguradoError,
)

logger = logging.getLogger("medconecta.chatbot")

SERVICIO = "Dr. Bera"


class DrBeraClient:
    """Envoltorio delgado sobre httpx para poder simularlo en los tests."""

    def __init__(
        self,
        base_url: Optional[str],
        timeout: float = 15.0,
        transport: Optional[httpx.BaseTransport] = None
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        self._client = httpx.Client(
            timeout=httpx.Timeout(timeout, connect=5.0),
            transport=transport,
        )

    @classmethod
    def desde_settings(cls, app_settings: Settings) -> "DrBeraClient":
        return cls(app_settings.BERA_API_URL, app_settings.BERA_TIMEOUT_SECONDS)

    @property
    def configurado(self) -> bool:
        return bool(self.base_url)

    def preguntar(self, mensaje: str) -> str:
        """
        Envía un mensaje al asistente.

        Args:
            mensaje: Texto del usuario

        Returns:
            Respuesta del asistente

        Raises:
            ValidationError: mensaje vacío
            ServicioNoConfiguradoError: falta BERA_API_URL
            ServicioExternoError: el servicio falló o no respondió a tiempo
        """
        mensaje = (mensaje or "").strip()
        if not mensaje:
            raise ValidationError("Message is required")

        if not self.configurado:
            raise ServicioNoConfiguradoError(SERVICIO)

        try:
            r = self._client.post(f"{self.base_url}/get", data={"msg": mensaje})
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"{SERVICIO} respondió {e.response.status_code}")
            raise ServicioExternoError(SERVICIO, f"upstream returned {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.warning(f"{SERVICIO} no disponible: {e}")
            raise ServicioExternoError(SERVICIO, "no response")

        return r.text

    def close(self) -> None:
        self._client.close()
