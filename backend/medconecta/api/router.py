"""
Router principal que agrupa todos los sub-routers.
"""
from fastapi import APIRouter

from medconecta.api.auth_router import router as auth_router
from medconecta.api import health
from medconecta.api import hospitales
from medconecta.api import doctores
from medconecta.api import recursos
from medconecta.api import perfil_medico
from medconecta.api import comunidad
from medconecta.api import chatbot

api_router = APIRouter()
api_router.include_router(auth_router)

# ============================================
# INCLUIR TODOS LOS ROUTERS
# ============================================

# Health Check (sin autenticación para load balancers)
api_router.include_router(health.router)

api_router.include_router(
    hospitales.router,
    prefix="/hospital",
    tags=["Hospitales"]
)

api_router.include_router(
    doctores.router,
    prefix="/hospital",
    tags=["Doctores"]
)

api_router.include_router(
    recursos.router,
    prefix="/hospital",
    tags=["Recursos"]
)

api_router.include_router(
    perfil_medico.router,
    prefix="/medical-profile",
    tags=["Perfil Médico"]
)

api_router.include_router(
    comunidad.router,
    prefix="/community",
    tags=["Comunidad"]
)

api_router.include_router(
    chatbot.router,
    prefix="/drbera",
    tags=["Dr. Bera"]
)
