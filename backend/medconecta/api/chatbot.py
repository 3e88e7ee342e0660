"""
Endpoint del asistente Dr. Bera.
"""
from fastapi import APIRouter, Depends, HTTPException, Request, status

from medconecta.core.exceptions import (
    ValidationError,
    ServicioExternoError,
    ServicioNoConfiguradoError,
)
from medconecta.services.chatbot_service import DrBeraClient
from medconecta.schemas.chatbot import ChatRequest, ChatResponse
from medconecta.utils.constants import SALUDO_DR_BERA

router = APIRouter()


def get_chatbot(request: Request) -> DrBeraClient:
    """Cliente construido por la factory de la aplicación."""
    return request.app.state.chatbot


@router.get("", response_model=ChatResponse)
async def saludo():
    """Mensaje con el que el asistente abre la conversación."""
    return ChatResponse(reply=SALUDO_DR_BERA)


@router.post("", response_model=ChatResponse)
def conversar(data: ChatRequest, chatbot: DrBeraClient = Depends(get_chatbot)):
    """Reenvía el mensaje al asistente y devuelve su respuesta."""
    try:
        respuesta = chatbot.preguntar(data.msg)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ServicioNoConfiguradoError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
    except ServicioExternoError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

    return ChatResponse(reply=respuesta)
