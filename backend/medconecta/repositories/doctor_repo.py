"""
Repository de Doctor.
"""
from typing import Optional, List
from sqlmodel import Session, select

from medconecta.repositories.base import BaseRepository
from medconecta.models.doctor import Doctor, DoctorFavorito


class DoctorRepository(BaseRepository[Doctor]):
    """Repository para el directorio de doctores."""

    def __init__(self, session: Session):
        super().__init__(session, Doctor)

    def obtener_por_hospital(self, hospital_id: int) -> List[Doctor]:
        query = (
            select(Doctor)
            .where(Doctor.hospital_id == hospital_id)
            .order_by(Doctor.id)
        )
        return list(self.session.exec(query).all())

    def obtener_de_hospital(self, doctor_id: int, hospital_id: int) -> Optional[Doctor]:
        """
        Obtiene un doctor solo si pertenece al hospital indicado.

        Args:
            doctor_id: ID del doctor
            hospital_id: ID del hospital dueño

        Returns:
            El doctor o None
        """
        doctor = self.obtener_por_id(doctor_id)
        if doctor is None or doctor.hospital_id != hospital_id:
            return None
        return doctor

    def eliminar_favoritos(self, doctor_id: int) -> None:
        """Quita al doctor de los favoritos de todos los perfiles (sin commit)."""
        query = select(DoctorFavorito).where(DoctorFavorito.doctor_id == doctor_id)
        for enlace in self.session.exec(query).all():
            self.session.delete(enlace)
