"""
Endpoints de Health Check.
Verificación de estado del sistema y sus componentes.
"""
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from datetime import datetime

from medconecta.core.database import check_database_health

router = APIRouter(
    prefix="/health",
    tags=["health"],
    responses={
        200: {"description": "Sistema saludable"},
        503: {"description": "Sistema no disponible"}
    }
)


@router.get("", summary="Health Check General", response_model=None)
async def health_check(request: Request) -> JSONResponse:
    """
    Health check básico.
    Retorna 200 si la aplicación está corriendo.
    """
    app_settings = request.app.state.settings
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "version": app_settings.APP_VERSION,
            "environment": app_settings.APP_ENV
        }
    )


@router.get("/liveness", summary="Liveness Probe", response_model=None)
async def liveness_probe() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "alive",
            "timestamp": datetime.now().isoformat()
        }
    )


@router.get("/readiness", summary="Readiness Probe", response_model=None)
def readiness_probe(request: Request) -> JSONResponse:
    """
    Readiness probe.

    Ejecuta un SELECT 1 contra la base de datos; si falla responde 503
    para que el balanceador no envíe tráfico.
    """
    db_ok = check_database_health(request.app.state.engine)

    return JSONResponse(
        status_code=status.HTTP_200_OK if db_ok else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if db_ok else "not_ready",
            "timestamp": datetime.now().isoformat(),
            "components": {
                "database": {"status": "healthy" if db_ok else "unhealthy"}
            }
        }
    )
