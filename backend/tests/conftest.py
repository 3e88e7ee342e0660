"""
Fixtures de pytest para tests.
"""
import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlmodel.pool import StaticPool

import medconecta.models  # noqa: F401
from medconecta.config import Settings
from medconecta.core.database import get_session
from medconecta.services.auth_service import Identidad, hash_password
from main import create_app


PASSWORD_TEST = "secreto123"
HASH_TEST = hash_password(PASSWORD_TEST)


# Engine para tests (SQLite en memoria)
@pytest.fixture(name="engine")
def engine_fixture():
    """Crea un engine de test en memoria."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Crea una sesión de test."""
    with Session(engine) as session:
        yield session


@pytest.fixture(name="test_settings")
def settings_fixture():
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET_KEY="clave-de-test",
        BERA_API_URL=None,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture(name="app")
def app_fixture(engine, test_settings):
    """Aplicación construida con la configuración de test."""
    app = create_app(test_settings)
    app.state.engine = engine
    return app


@pytest.fixture(name="client")
def client_fixture(app, session):
    """Crea un cliente de test con sesión inyectada."""
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


# Fixtures de datos de prueba

@pytest.fixture
def hospital_data():
    """Datos de registro de hospital de prueba."""
    return {
        "name": "Hospital Central",
        "address": "Av. Libertador 1234, Santiago",
        "contactPerson": "María González",
        "phone": "+56912345678",
        "email": "contacto@hospitalcentral.cl",
        "licenseNumber": "LIC-00042",
        "password": PASSWORD_TEST,
        "confirmPassword": PASSWORD_TEST,
        "latitude": -33.45,
        "longitude": -70.66,
    }


@pytest.fixture
def crear_hospital(session):
    """Factory fixture para crear hospitales."""
    from medconecta.models.hospital import Hospital

    contador = {"n": 0}

    def _crear_hospital(nombre="Hospital Test", email=None, numero_licencia=None, id=None):
        contador["n"] += 1
        hospital = Hospital(
            id=id,
            nombre=nombre,
            direccion="Calle Falsa 123, Ciudad",
            persona_contacto="Contacto Test",
            telefono="+56900000000",
            email=email or f"hospital{contador['n']}@test.cl",
            numero_licencia=numero_licencia or f"LIC-TEST-{contador['n']}",
            hashed_password=HASH_TEST,
            latitud=-33.0,
            longitud=-70.0,
        )
        session.add(hospital)
        session.commit()
        session.refresh(hospital)
        return hospital

    return _crear_hospital


@pytest.fixture
def crear_paciente(session):
    """Factory fixture para crear pacientes."""
    from medconecta.models.paciente import Paciente

    contador = {"n": 0}

    def _crear_paciente(nombre="Paciente Test", email=None):
        contador["n"] += 1
        paciente = Paciente(
            nombre=nombre,
            email=email or f"paciente{contador['n']}@test.cl",
            hashed_password=HASH_TEST,
        )
        session.add(paciente)
        session.commit()
        session.refresh(paciente)
        return paciente

    return _crear_paciente


@pytest.fixture
def crear_doctor(session):
    """Factory fixture para crear doctores."""
    from medconecta.models.doctor import Doctor

    def _crear_doctor(hospital_id, nombre="Dra. Rojas", especialidad="Cardiología", turno="Mañana"):
        doctor = Doctor(
            nombre=nombre,
            especialidad=especialidad,
            turno=turno,
            hospital_id=hospital_id,
        )
        session.add(doctor)
        session.commit()
        session.refresh(doctor)
        return doctor

    return _crear_doctor


@pytest.fixture
def auth_headers(app):
    """Headers Authorization con un token real para un hospital o paciente."""
    from medconecta.models.hospital import Hospital

    def _auth_headers(cuenta):
        if isinstance(cuenta, Hospital):
            identidad = Identidad.de_hospital(cuenta)
        else:
            identidad = Identidad.de_paciente(cuenta)
        token = app.state.auth_service.create_access_token(identidad)
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
