"""initial medical records schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _owned_columns():
    return [
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('owner_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('display_name', sa.String(), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('gender', sa.String(), nullable=True),
        sa.Column('blood_group', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'chronic_conditions',
        *_owned_columns(),
        sa.Column('condition', sa.String(), nullable=False),
        sa.Column('diagnosis_date', sa.Date(), nullable=True),
        sa.Column('severity', sa.String(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
    )
    op.create_index('idx_chronic_conditions_owner_created', 'chronic_conditions', ['owner_id', 'created_at'], unique=False)

    op.create_table(
        'allergies',
        *_owned_columns(),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('severity', sa.String(), nullable=True),
        sa.Column('reaction', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
    )
    op.create_index('idx_allergies_owner_created', 'allergies', ['owner_id', 'created_at'], unique=False)

    op.create_table(
        'current_medications',
        *_owned_columns(),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('dosage', sa.String(), nullable=False),
        sa.Column('frequency', sa.String(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('prescribed_by', sa.String(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
    )
    op.create_index('idx_current_medications_owner_created', 'current_medications', ['owner_id', 'created_at'], unique=False)

    op.create_table(
        'insurances',
        *_owned_columns(),
        sa.Column('provider', sa.String(), nullable=False),
        sa.Column('policy_number', sa.String(), nullable=False),
        sa.Column('group_number', sa.String(), nullable=True),
        sa.Column('coverage_type', sa.String(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index('idx_insurances_owner_created', 'insurances', ['owner_id', 'created_at'], unique=False)

    op.create_table(
        'appointments',
        *_owned_columns(),
        sa.Column('doctor_name', sa.String(), nullable=False),
        sa.Column('hospital_name', sa.String(), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('time', sa.String(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('status', sa.String(), nullable=False, server_default='Scheduled'),
    )
    op.create_index('idx_appointments_owner_date', 'appointments', ['owner_id', 'date'], unique=False)

    op.create_table(
        'medical_records',
        *_owned_columns(),
        sa.Column('record_type', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('doctor_name', sa.String(), nullable=True),
        sa.Column('hospital_name', sa.String(), nullable=True),
        sa.Column('file_url', sa.Text(), nullable=True),
    )
    op.create_index('idx_medical_records_owner_date', 'medical_records', ['owner_id', 'date'], unique=False)

    op.create_table(
        'prescriptions',
        *_owned_columns(),
        sa.Column('doctor_name', sa.String(), nullable=False),
        sa.Column('medication', sa.String(), nullable=False),
        sa.Column('dosage', sa.String(), nullable=False),
        sa.Column('frequency', sa.String(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('refills', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('status', sa.String(), nullable=False, server_default='Active'),
    )
    op.create_index('idx_prescriptions_owner_start_date', 'prescriptions', ['owner_id', 'start_date'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_prescriptions_owner_start_date', table_name='prescriptions')
    op.drop_table('prescriptions')
    op.drop_index('idx_medical_records_owner_date', table_name='medical_records')
    op.drop_table('medical_records')
    op.drop_index('idx_appointments_owner_date', table_name='appointments')
    op.drop_table('appointments')
    op.drop_index('idx_insurances_owner_created', table_name='insurances')
    op.drop_table('insurances')
    op.drop_index('idx_current_medications_owner_created', table_name='current_medications')
    op.drop_table('current_medications')
    op.drop_index('idx_allergies_owner_created', table_name='allergies')
    op.drop_table('allergies')
    op.drop_index('idx_chronic_conditions_owner_created', table_name='chronic_conditions')
    op.drop_table('chronic_conditions')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
