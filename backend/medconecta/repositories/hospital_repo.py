"""
Repository de Hospital.
"""
from typing import Optional, List
from sqlmodel import Session, select

from medconecta.repositories.base import BaseRepository
from medconecta.models.hospital import Hospital


class HospitalRepository(BaseRepository[Hospital]):
    """Repository para operaciones de hospitales."""

    def __init__(self, session: Session):
        super().__init__(session, Hospital)

    def obtener_por_email(self, email: str) -> Optional[Hospital]:
        query = select(Hospital).where(Hospital.email == email.lower())
        return self.session.exec(query).first()

    def obtener_por_licencia(self, numero_licencia: str) -> Optional[Hospital]:
        """
        Obtiene un hospital por su número de licencia.

        Args:
            numero_licencia: Licencia sanitaria (única)

        Returns:
            El hospital o None
        """
        query = select(Hospital).where(Hospital.numero_licencia == numero_licencia)
        return self.session.exec(query).first()

    def existe(self, hospital_id: int) -> bool:
        return self.obtener_por_id(hospital_id) is not None

    def obtener_ordenados(self) -> List[Hospital]:
        """Todos los hospitales ordenados por nombre."""
        query = select(Hospital).order_by(Hospital.nombre)
        return list(self.session.exec(query).all())
