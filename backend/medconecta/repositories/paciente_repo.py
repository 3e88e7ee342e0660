"""
Repository de Paciente.
"""
from typing import Optional
from sqlmodel import Session, select

from medconecta.repositories.base import BaseRepository
from medconecta.models.paciente import Paciente


class PacienteRepository(BaseRepository[Paciente]):
    """Repository para cuentas de paciente."""

    def __init__(self, session: Session):
        super().__init__(session, Paciente)

    def obtener_por_email(self, email: str) -> Optional[Paciente]:
        query = select(Paciente).where(Paciente.email == email.lower())
        return self.session.exec(query).first()
