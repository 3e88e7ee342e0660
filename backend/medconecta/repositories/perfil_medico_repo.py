"""
Repository de Perfil Médico.
"""
from typing import Optional
from sqlmodel import Session, select

from medconecta.repositories.base import BaseRepository
from medconecta.models.perfil_medico import PerfilMedico


class PerfilMedicoRepository(BaseRepository[PerfilMedico]):
    """Repository para perfiles médicos."""

    def __init__(self, session: Session):
        super().__init__(session, PerfilMedico)

    def obtener_por_paciente(self, paciente_id: int) -> Optional[PerfilMedico]:
        query = select(PerfilMedico).where(PerfilMedico.paciente_id == paciente_id)
        return self.session.exec(query).first()
