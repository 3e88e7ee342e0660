"""
Repository de registros de recursos (camas, sangre, oxígeno, ambulancias).
"""
from typing import Optional, Type
from sqlmodel import Session, SQLModel, select

from medconecta.repositories.base import BaseRepository


class RecursoRepository(BaseRepository[SQLModel]):
    """
    Repository genérico para las tablas de inventario.

    Todas comparten la columna única ``hospital_id``.
    """

    def __init__(self, session: Session, model: Type[SQLModel]):
        super().__init__(session, model)

    def obtener_por_hospital(self, hospital_id: int) -> Optional[SQLModel]:
        """
        Obtiene el registro de un hospital.

        Args:
            hospital_id: ID del hospital

        Returns:
            El registro o None si el hospital aún no lo publica
        """
        query = select(self.model).where(self.model.hospital_id == hospital_id)
        return self.session.exec(query).first()
