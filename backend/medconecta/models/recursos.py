"""
Modelos de recursos operativos por hospital.

Cada tabla guarda a lo más un registro por hospital (hospital_id único):
el upsert se hace siempre sobre esa clave.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime


class InventarioCamas(SQLModel, table=True):
    """Camas disponibles por área."""
    __tablename__ = "inventario_camas"

    id: Optional[int] = Field(default=None, primary_key=True)
    hospital_id: int = Field(foreign_key="hospital.id", unique=True, index=True)
    uci: int = Field(default=0)
    general: int = Field(default=0)
    emergencia: int = Field(default=0)
    maternidad: int = Field(default=0)
    pediatria: int = Field(default=0)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class InventarioSangre(SQLModel, table=True):
    """Unidades de sangre por grupo."""
    __tablename__ = "inventario_sangre"

    id: Optional[int] = Field(default=None, primary_key=True)
    hospital_id: int = Field(foreign_key="hospital.id", unique=True, index=True)
    a_positivo: int = Field(default=0)
    b_positivo: int = Field(default=0)
    o_positivo: int = Field(default=0)
    ab_positivo: int = Field(default=0)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class InventarioOxigeno(SQLModel, table=True):
    """Existencias de oxígeno."""
    __tablename__ = "inventario_oxigeno"

    id: Optional[int] = Field(default=None, primary_key=True)
    hospital_id: int = Field(foreign_key="hospital.id", unique=True, index=True)
    cilindros: int = Field(default=0)
    oxigeno_liquido: int = Field(default=0)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class InventarioAmbulancias(SQLModel, table=True):
    """
    Flota de ambulancias.

    en_operacion + en_mantenimiento no se valida contra total.
    """
    __tablename__ = "inventario_ambulancias"

    id: Optional[int] = Field(default=None, primary_key=True)
    hospital_id: int = Field(foreign_key="hospital.id", unique=True, index=True)
    total: int = Field(default=0)
    en_operacion: int = Field(default=0)
    en_mantenimiento: int = Field(default=0)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
