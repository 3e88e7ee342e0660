"""Migración inicial - Crear todas las tablas

Revision ID: 001_initial
Revises: 
Create Date: 2024-06-01 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TABLAS_INVENTARIO = {
    'inventario_camas': ['uci', 'general', 'emergencia', 'maternidad', 'pediatria'],
    'inventario_sangre': ['a_positivo', 'b_positivo', 'o_positivo', 'ab_positivo'],
    'inventario_oxigeno': ['cilindros', 'oxigeno_liquido'],
    'inventario_ambulancias': ['total', 'en_operacion', 'en_mantenimiento'],
}


def upgrade() -> None:
    """Crea todas las tablas del sistema."""

    # Tabla Hospital
    op.create_table(
        'hospital',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nombre', sa.String(), nullable=False),
        sa.Column('direccion', sa.String(), nullable=False),
        sa.Column('persona_contacto', sa.String(), nullable=False),
        sa.Column('telefono', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('numero_licencia', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('latitud', sa.Float(), nullable=True),
        sa.Column('longitud', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_hospital_nombre', 'hospital', ['nombre'])
    op.create_index('ix_hospital_email', 'hospital', ['email'], unique=True)
    op.create_index('ix_hospital_numero_licencia', 'hospital', ['numero_licencia'], unique=True)

    # Tabla Paciente
    op.create_table(
        'paciente',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nombre', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_paciente_email', 'paciente', ['email'], unique=True)

    # Inventarios (un registro por hospital)
    for tabla, columnas in TABLAS_INVENTARIO.items():
        op.create_table(
            tabla,
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('hospital_id', sa.Integer(), nullable=False),
            *[sa.Column(c, sa.Integer(), nullable=False, default=0) for c in columnas],
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['hospital_id'], ['hospital.id']),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(f'ix_{tabla}_hospital_id', tabla, ['hospital_id'], unique=True)

    # Tabla Doctor
    op.create_table(
        'doctor',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nombre', sa.String(), nullable=False),
        sa.Column('especialidad', sa.String(), nullable=False),
        sa.Column('turno', sa.String(), nullable=False, default='Not Assigned'),
        sa.Column('hospital_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['hospital_id'], ['hospital.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_doctor_hospital_id', 'doctor', ['hospital_id'])

    # Tabla Perfil Médico
    op.create_table(
        'perfil_medico',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('paciente_id', sa.Integer(), nullable=False),
        sa.Column('tipo_sangre', sa.String(), nullable=False),
        sa.Column('alergias', sa.String(), nullable=True),
        sa.Column('medicamentos', sa.String(), nullable=True),
        sa.Column('condiciones', sa.String(), nullable=True),
        sa.Column('vacunas', sa.String(), nullable=True),
        sa.Column('ultimo_control', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['paciente_id'], ['paciente.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_perfil_medico_paciente_id', 'perfil_medico', ['paciente_id'], unique=True)

    # Favoritos (perfil <-> doctor)
    op.create_table(
        'doctor_favorito',
        sa.Column('perfil_id', sa.Integer(), nullable=False),
        sa.Column('doctor_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['perfil_id'], ['perfil_medico.id']),
        sa.ForeignKeyConstraint(['doctor_id'], ['doctor.id']),
        sa.PrimaryKeyConstraint('perfil_id', 'doctor_id')
    )

    # Tablero comunitario
    op.create_table(
        'solicitud_comunidad',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('nombre', sa.String(), nullable=False),
        sa.Column('descripcion', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_solicitud_comunidad_created_at', 'solicitud_comunidad', ['created_at'])

    op.create_table(
        'respuesta_comunidad',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('solicitud_id', sa.String(), nullable=False),
        sa.Column('orden', sa.Integer(), nullable=False, default=0),
        sa.Column('nombre', sa.String(), nullable=False),
        sa.Column('mensaje', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['solicitud_id'], ['solicitud_comunidad.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_respuesta_comunidad_solicitud_id', 'respuesta_comunidad', ['solicitud_id'])


def downgrade() -> None:
    """Elimina todas las tablas."""
    op.drop_table('respuesta_comunidad')
    op.drop_table('solicitud_comunidad')
    op.drop_table('doctor_favorito')
    op.drop_table('perfil_medico')
    op.drop_table('doctor')
    for tabla in reversed(list(TABLAS_INVENTARIO)):
        op.drop_table(tabla)
    op.drop_table('paciente')
    op.drop_table('hospital')
