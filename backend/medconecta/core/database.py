"""
Configuración de Base de Datos.
Gestión de conexiones y sesiones SQLModel.

El engine se construye una sola vez en ``create_app`` y se guarda en
``app.state.engine``; los endpoints lo reciben a través de ``get_session``.
"""
from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session
from typing import Generator

from medconecta.config import Settings


def crear_engine(app_settings: Settings) -> Engine:
    """
    Crea el engine con la configuración según el tipo de base de datos.

    Args:
        app_settings: Configuración de la aplicación

    Returns:
        Engine de SQLAlchemy
    """
    connect_args = {}
    if "sqlite" in app_settings.DATABASE_URL:
        connect_args["check_same_thread"] = False

    return create_engine(
        app_settings.DATABASE_URL,
        echo=app_settings.DEBUG,
        connect_args=connect_args
    )


def create_db_and_tables(engine: Engine) -> None:
    """
    Crea todas las tablas en la base de datos.
    Se llama al inicio de la aplicación.
    """
    # Registrar todos los modelos en el metadata
    import medconecta.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_engine(request: Request) -> Engine:
    """Engine construido por la factory de la aplicación."""
    return request.app.state.engine


def get_session(request: Request) -> Generator[Session, None, None]:
    """
    Generador de sesiones para dependency injection en FastAPI.

    Uso:
        @router.get("/endpoint")
        def endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(get_engine(request)) as session:
        yield session


def check_database_health(engine: Engine) -> bool:
    """Ejecuta un SELECT 1 contra la base de datos."""
    try:
        with Session(engine) as session:
            session.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
