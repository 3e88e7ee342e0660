#!/usr/bin/env python3
"""
Script para inicializar la base de datos con datos de demostración.
Ejecutar con: python init_db.py
"""
import sys
from pathlib import Path

# Agregar el directorio raíz al path
sys.path.insert(0, str(Path(__file__).parent))

from sqlmodel import Session

from medconecta.config import settings
from medconecta.core.database import crear_engine, create_db_and_tables
from medconecta.models.enums import TipoRecursoEnum
from medconecta.models.doctor import Doctor
from medconecta.repositories.hospital_repo import HospitalRepository
from medconecta.schemas.auth_schemas import HospitalRegisterRequest, PatientRegisterRequest
from medconecta.services.auth_service import AuthService
from medconecta.services.recursos_service import RecursoService
from medconecta.utils.logger import configurar_logging

PASSWORD_DEMO = "Demo123!"

HOSPITAL_DEMO = {
    "name": "Hospital Regional Demo",
    "address": "Av. Principal 1000, Centro",
    "contact_person": "Dra. Paula Herrera",
    "phone": "+56221234567",
    "email": "demo@hospital.cl",
    "license_number": "LIC-DEMO-001",
    "password": PASSWORD_DEMO,
    "confirm_password": PASSWORD_DEMO,
    "latitude": -33.4489,
    "longitude": -70.6693,
}

INVENTARIOS_DEMO = {
    TipoRecursoEnum.CAMAS: {"ICU": 4, "General": 60, "Emergency": 8, "Maternity": 10, "Pediatric": 12},
    TipoRecursoEnum.SANGRE: {"A_Positive": 20, "B_Positive": 9, "O_Positive": 35, "AB_Positive": 4},
    TipoRecursoEnum.OXIGENO: {"Oxygen Cylinders": 48, "Liquid Oxygen": 6},
    TipoRecursoEnum.AMBULANCIA: {"total": 5, "inOperation": 4, "underMaintenance": 1},
}

DOCTORES_DEMO = [
    ("Dr. Ignacio Soto", "Medicina Interna", "Mañana"),
    ("Dra. Valentina Ríos", "Pediatría", "Tarde"),
    ("Dr. Tomás Vera", "Cardiología", "Noche"),
]


def main():
    """Inicializar base de datos con datos de demostración."""
    configurar_logging()
    print("=" * 60)
    print("INICIALIZANDO BASE DE DATOS")
    print("=" * 60)

    engine = crear_engine(settings)
    create_db_and_tables(engine)
    auth_service = AuthService(settings)

    with Session(engine) as session:
        if HospitalRepository(session).obtener_por_licencia(HOSPITAL_DEMO["license_number"]):
            print("\nLos datos de demostración ya existen, nada que hacer.")
            return

        hospital = auth_service.register_hospital(HospitalRegisterRequest(**HOSPITAL_DEMO), session)
        auth_service.register_patient(
            PatientRegisterRequest(name="Paciente Demo", email="paciente@demo.cl", password=PASSWORD_DEMO),
            session
        )

        recursos = RecursoService(session)
        for tipo, payload in INVENTARIOS_DEMO.items():
            recursos.upsert(hospital.id, tipo, payload)

        for nombre, especialidad, turno in DOCTORES_DEMO:
            session.add(Doctor(nombre=nombre, especialidad=especialidad, turno=turno, hospital_id=hospital.id))
        session.commit()

    print("\n✅ ¡Base de datos inicializada exitosamente!")
    print("\n" + "=" * 60)
    print("CREDENCIALES DE ACCESO")
    print("=" * 60)
    print("\nHospital:")
    print(f"  Email: {HOSPITAL_DEMO['email']}")
    print(f"  Licencia: {HOSPITAL_DEMO['license_number']}")
    print(f"  Contraseña: {PASSWORD_DEMO}")
    print("\nPaciente:")
    print("  Email: paciente@demo.cl")
    print(f"  Contraseña: {PASSWORD_DEMO}")
    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
