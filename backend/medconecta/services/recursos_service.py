"""
Servicio de Recursos Hospitalarios.
Normaliza, valida y persiste los inventarios por hospital
(camas, sangre, oxígeno, ambulancias).

Flujo de un upsert:
    payload -> resolución de alias -> validación -> hospital existe
    -> upsert por hospital_id -> registro canónico
"""
from typing import Any, Dict, Mapping, Tuple, Type
from dataclasses import dataclass
from datetime import datetime
import logging
import math

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel

from medconecta.models.enums import TipoRecursoEnum
from medconecta.models.recursos import (
    InventarioCamas,
    InventarioSangre,
    InventarioOxigeno,
    InventarioAmbulancias,
)
from medconecta.repositories.hospital_repo import HospitalRepository
from medconecta.repositories.recurso_repo import RecursoRepository
from medconecta.core.exceptions import (
    ValidationError,
    HospitalNotFoundError,
    RecursoNotFoundError,
)
from medconecta.utils.constants import (
    CAMPOS_CAMAS,
    CAMPOS_SANGRE,
    CAMPOS_OXIGENO,
    CAMPOS_AMBULANCIA,
    NOMBRE_RECURSO,
    MAX_CONTADOR,
)

logger = logging.getLogger("medconecta.recursos")


@dataclass(frozen=True)
class CampoRecurso:
    """Un contador del registro canónico."""
    clave: str
    columna: str
    alias: Tuple[str, ...]


@dataclass(frozen=True)
class DefinicionRecurso:
    """Tabla de alias y modelo de un tipo de recurso."""
    tipo: TipoRecursoEnum
    modelo: Type[SQLModel]
    campos: Tuple[CampoRecurso, ...]

    @property
    def nombre(self) -> str:
        return NOMBRE_RECURSO[self.tipo.value]


def _definir(tipo: TipoRecursoEnum, modelo: Type[SQLModel], campos: tuple) -> DefinicionRecurso:
    return DefinicionRecurso(
        tipo=tipo,
        modelo=modelo,
        campos=tuple(CampoRecurso(clave, columna, alias) for clave, columna, alias in campos),
    )


DEFINICIONES: Dict[TipoRecursoEnum, DefinicionRecurso] = {
    TipoRecursoEnum.CAMAS: _definir(TipoRecursoEnum.CAMAS, InventarioCamas, CAMPOS_CAMAS),
    TipoRecursoEnum.SANGRE: _definir(TipoRecursoEnum.SANGRE, InventarioSangre, CAMPOS_SANGRE),
    TipoRecursoEnum.OXIGENO: _definir(TipoRecursoEnum.OXIGENO, InventarioOxigeno, CAMPOS_OXIGENO),
    TipoRecursoEnum.AMBULANCIA: _definir(TipoRecursoEnum.AMBULANCIA, InventarioAmbulancias, CAMPOS_AMBULANCIA),
}


# ============================================
# NORMALIZACIÓN Y VALIDACIÓN
# ============================================

def resolver_alias(campo: CampoRecurso, payload: Mapping[str, Any]) -> Any:
    """
    Devuelve el valor del primer alias presente en el payload.

    Un alias con valor null cuenta como ausente. Sin ningún alias
    presente el valor es 0.
    """
    for alias in campo.alias:
        valor = payload.get(alias)
        if valor is not None:
            return valor
    return 0


def validar_contador(clave: str, valor: Any) -> int:
    """
    Valida que el valor sea un contador: número finito, entero,
    >= 0 y que quepa en la columna.

    Args:
        clave: Clave canónica (para el mensaje de error)
        valor: Valor recibido

    Returns:
        El valor como int

    Raises:
        ValidationError: si no es numérico, no es entero, es negativo
            o supera MAX_CONTADOR
    """
    # bool es subclase de int en Python, pero no es un contador
    if isinstance(valor, bool) or not isinstance(valor, (int, float)):
        raise ValidationError(f"'{clave}' must be a number")

    if isinstance(valor, float):
        if not math.isfinite(valor):
            raise ValidationError(f"'{clave}' must be a finite number")
        if not valor.is_integer():
            raise ValidationError(f"'{clave}' must be a whole number")
        valor = int(valor)

    if valor < 0:
        raise ValidationError(f"'{clave}' cannot be negative")

    if valor > MAX_CONTADOR:
        raise ValidationError(f"'{clave}' cannot exceed {MAX_CONTADOR}")

    return valor


def normalizar_payload(tipo: TipoRecursoEnum, payload: Mapping[str, Any]) -> Dict[str, int]:
    """
    Convierte un payload con claves heterogéneas en el registro canónico.

    Args:
        tipo: Tipo de recurso
        payload: Cuerpo JSON recibido

    Returns:
        Diccionario {clave canónica: valor} en el orden de la definición

    Raises:
        ValidationError: si algún campo no es un contador válido
    """
    definicion = DEFINICIONES[tipo]
    return {
        campo.clave: validar_contador(campo.clave, resolver_alias(campo, payload))
        for campo in definicion.campos
    }


def registro_canonico(tipo: TipoRecursoEnum, registro: SQLModel) -> Dict[str, int]:
    """Proyecta un registro de la BD a su forma canónica externa."""
    definicion = DEFINICIONES[tipo]
    return {campo.clave: getattr(registro, campo.columna) for campo in definicion.campos}


# ============================================
# SERVICIO
# ============================================

class RecursoService:
    """
    Servicio para lectura y upsert de inventarios.

    Maneja:
    - Lectura del registro canónico de un hospital
    - Upsert idempotente (sobrescribe todos los campos)
    """

    def __init__(self, session: Session):
        self.session = session
        self.hospital_repo = HospitalRepository(session)

    def _repo(self, tipo: TipoRecursoEnum) -> RecursoRepository:
        return RecursoRepository(self.session, DEFINICIONES[tipo].modelo)

    def leer(self, hospital_id: int, tipo: TipoRecursoEnum) -> Dict[str, int]:
        """
        Obtiene el registro canónico de un hospital.

        Args:
            hospital_id: ID del hospital
            tipo: Tipo de recurso

        Returns:
            Registro canónico

        Raises:
            RecursoNotFoundError: si el hospital aún no tiene registro
        """
        registro = self._repo(tipo).obtener_por_hospital(hospital_id)
        if registro is None:
            raise RecursoNotFoundError(DEFINICIONES[tipo].nombre, hospital_id)
        return registro_canonico(tipo, registro)

    def upsert(
        self,
        hospital_id: int,
        tipo: TipoRecursoEnum,
        payload: Mapping[str, Any]
    ) -> Dict[str, int]:
        """
        Crea o sobrescribe el registro de un hospital.

        Args:
            hospital_id: ID del hospital
            tipo: Tipo de recurso
            payload: Cuerpo con claves en cualquiera de los alias aceptados

        Returns:
            Registro canónico tal como quedó guardado

        Raises:
            ValidationError: payload inválido (no se escribe nada)
            HospitalNotFoundError: el hospital no existe (no se escribe nada)
        """
        definicion = DEFINICIONES[tipo]

        try:
            valores = normalizar_payload(tipo, payload)
        except ValidationError as e:
            logger.warning(
                f"Payload de {definicion.nombre} rechazado para hospital {hospital_id}: {e.message}"
            )
            raise

        if not self.hospital_repo.existe(hospital_id):
            raise HospitalNotFoundError(hospital_id)

        repo = self._repo(tipo)
        registro = repo.obtener_por_hospital(hospital_id)
        if registro is None:
            registro = definicion.modelo(hospital_id=hospital_id)

        try:
            registro = repo.guardar(self._aplicar(definicion, registro, valores))
        except IntegrityError:
            # Otro request creó el registro entre la lectura y el insert
            self.session.rollback()
            existente = repo.obtener_por_hospital(hospital_id)
            if existente is None:
                raise
            registro = repo.guardar(self._aplicar(definicion, existente, valores))

        logger.info(f"Inventario de {definicion.nombre} actualizado para hospital {hospital_id}: {valores}")

        return registro_canonico(tipo, registro)

    @staticmethod
    def _aplicar(definicion: DefinicionRecurso, registro: SQLModel, valores: Dict[str, int]) -> SQLModel:
        for campo in definicion.campos:
            setattr(registro, campo.columna, valores[campo.clave])
        registro.updated_at = datetime.utcnow()
        return registro
