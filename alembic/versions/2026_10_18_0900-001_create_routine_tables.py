"""Create catalog, routine, session log and settings tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create exercises, routines, session_logs and app_settings tables."""
    op.create_table('exercises', sa.Column('id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('category', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column('mode', sqlmodel.sql.sqltypes.AutoString(length=16), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('duration_seconds', sa.Integer(), nullable=True),
        sa.Column('sets', sa.Integer(), nullable=False),
        sa.Column('rest_between_sets', sa.Integer(), nullable=False),
        sa.Column('difficulty', sqlmodel.sql.sqltypes.AutoString(length=16), nullable=False),
        sa.Column('equipment', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('image_url', sqlmodel.sql.sqltypes.AutoString(length=500), nullable=True),
        sa.Column('target_muscles', sa.JSON(), nullable=False),
        sa.Column('instructions', sa.JSON(), nullable=False),
        sa.Column('form_cues', sa.JSON(), nullable=False),
        sa.Column('contraindications', sa.JSON(), nullable=False),
        sa.Column('modifications', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_exercises_category'), 'exercises', ['category'], unique=False)

    op.create_table('routines', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('kind', sqlmodel.sql.sqltypes.AutoString(length=16), nullable=False),
        sa.Column('exercise_ids', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_routines_kind'), 'routines', ['kind'], unique=False)

    op.create_table('session_logs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('routine_id', sa.Integer(), nullable=False),
        sa.Column('session_date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=True),
        sa.Column('completions', sa.JSON(), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_session_logs_routine_id'), 'session_logs', ['routine_id'], unique=False)
    op.create_index(op.f('ix_session_logs_session_date'), 'session_logs', ['session_date'], unique=False)
    op.create_index(op.f('ix_session_logs_completed'), 'session_logs', ['completed'], unique=False)

    op.create_table('app_settings', sa.Column('key', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('value', sa.JSON(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('key'))


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('app_settings')
    op.drop_index(op.f('ix_session_logs_completed'), table_name='session_logs')
    op.drop_index(op.f('ix_session_logs_session_date'), table_name='session_logs')
    op.drop_index(op.f('ix_session_logs_routine_id'), table_name='session_logs')
    op.drop_table('session_logs')
    op.drop_index(op.f('ix_routines_kind'), table_name='routines')
    op.drop_table('routines')
    op.drop_index(op.f('ix_exercises_category'), table_name='exercises')
    op.drop_table('exercises')
