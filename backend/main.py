"""
API Principal de MedConecta.
Coordinación de recursos hospitalarios (camas, sangre, oxígeno, ambulancias),
directorio de doctores y servicios para pacientes.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from medconecta.config import Settings, settings
from medconecta.core.database import crear_engine, create_db_and_tables
from medconecta.api.router import api_router
from medconecta.services.auth_service import AuthService
from medconecta.services.chatbot_service import DrBeraClient
from medconecta.utils.constants import MENSAJE_ERROR_INTERNO
from medconecta.utils.logger import configurar_logging, get_logger

logger = get_logger("main")


# ============================================
# MANEJO DE ERRORES
# ============================================

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Cuerpos, parámetros o JSON inválidos se responden con 400."""
    errores = [
        {"loc": [str(parte) for parte in e.get("loc", ())], "msg": e.get("msg", "")}
        for e in exc.errors()
    ]
    detalle = errores[0]["msg"] if errores else "Invalid request"
    logger.warning(f"Request inválido {request.method} {request.url.path}: {detalle}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detalle, "errors": errores}
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Error no controlado en {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": MENSAJE_ERROR_INTERNO}
    )


# ============================================
# FACTORY
# ============================================

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Construye la aplicación.

    El engine, el servicio de autenticación y el cliente de Dr. Bera se
    crean aquí y quedan en ``app.state``; nada se conecta al importar.
    """
    app_settings = app_settings or settings
    configurar_logging(app_settings.LOG_LEVEL, app_settings.LOG_FORMAT)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        create_db_and_tables(app.state.engine)
        logger.info(f"{app_settings.APP_TITLE} iniciado ({app_settings.APP_ENV})")
        yield
        app.state.chatbot.close()

    app = FastAPI(
        title=app_settings.APP_TITLE,
        description=app_settings.APP_DESCRIPTION,
        version=app_settings.APP_VERSION,
        lifespan=lifespan
    )

    # Configurar CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=app_settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=app_settings.CORS_ALLOW_METHODS,
        allow_headers=app_settings.CORS_ALLOW_HEADERS,
    )

    app.state.settings = app_settings
    app.state.engine = crear_engine(app_settings)
    app.state.auth_service = AuthService(app_settings)
    app.state.chatbot = DrBeraClient.desde_settings(app_settings)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
