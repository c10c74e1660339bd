"""Workout programming and load monitoring tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

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
    """Create users, catalog, assignment, session, log and readiness tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('full_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('role', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False, server_default='member'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)

    op.create_table('exercises', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('category', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_exercises_name'), 'exercises', ['name'], unique=False)

    op.create_table('workout_templates', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('category', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workout_templates_title'), 'workout_templates', ['title'], unique=False)

    op.create_table('workout_template_exercises', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('template_id', sa.Integer(), nullable=False),
        sa.Column('exercise_id', sa.Integer(), nullable=False),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('prescribed_sets', sa.Integer(), nullable=True),
        sa.Column('prescribed_reps', sa.Integer(), nullable=True),
        sa.Column('prescribed_weight', sa.Float(), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.ForeignKeyConstraint(['template_id'], ['workout_templates.id']),
        sa.ForeignKeyConstraint(['exercise_id'], ['exercises.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workout_template_exercises_template_id'), 'workout_template_exercises',
                    ['template_id'], unique=False)
    op.create_index(op.f('ix_workout_template_exercises_exercise_id'), 'workout_template_exercises',
                    ['exercise_id'], unique=False)

    op.create_table('workout_assignments', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sa.Integer(), nullable=False),
        sa.Column('template_id', sa.Integer(), nullable=False),
        sa.Column('week_start', sa.Date(), nullable=False),
        sa.Column('week_end', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['athlete_id'], ['users.id']),
        sa.ForeignKeyConstraint(['template_id'], ['workout_templates.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workout_assignments_athlete_id'), 'workout_assignments', ['athlete_id'], unique=False)
    op.create_index(op.f('ix_workout_assignments_template_id'), 'workout_assignments', ['template_id'],
                    unique=False)
    op.create_index(op.f('ix_workout_assignments_week_start'), 'workout_assignments', ['week_start'], unique=False)
    op.create_index(op.f('ix_workout_assignments_week_end'), 'workout_assignments', ['week_end'], unique=False)

    op.create_table('workout_sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('workout_assignment_id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sa.Integer(), nullable=False),
        sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False,
                  server_default='in_progress'),
        sa.Column('started_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['workout_assignment_id'], ['workout_assignments.id']),
        sa.ForeignKeyConstraint(['athlete_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('workout_assignment_id'))
    op.create_index(op.f('ix_workout_sessions_athlete_id'), 'workout_sessions', ['athlete_id'], unique=False)
    op.create_index(op.f('ix_workout_sessions_started_at'), 'workout_sessions', ['started_at'], unique=False)

    op.create_table('exercise_logs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('workout_session_id', sa.Integer(), nullable=False),
        sa.Column('exercise_id', sa.Integer(), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('sets', sa.Integer(), nullable=True),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('logged_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['workout_session_id'], ['workout_sessions.id']),
        sa.ForeignKeyConstraint(['exercise_id'], ['exercises.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('workout_session_id', 'exercise_id', name='uq_exercise_log_session_exercise'))
    op.create_index(op.f('ix_exercise_logs_workout_session_id'), 'exercise_logs', ['workout_session_id'],
                    unique=False)
    op.create_index(op.f('ix_exercise_logs_exercise_id'), 'exercise_logs', ['exercise_id'], unique=False)
    op.create_index(op.f('ix_exercise_logs_logged_at'), 'exercise_logs', ['logged_at'], unique=False)

    op.create_table('athlete_readiness_logs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sa.Integer(), nullable=False),
        sa.Column('log_date', sa.Date(), nullable=False),
        sa.Column('soreness', sa.Integer(), nullable=False),
        sa.Column('fatigue', sa.Integer(), nullable=False),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['athlete_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('athlete_id', 'log_date', name='uq_readiness_athlete_date'))
    op.create_index(op.f('ix_athlete_readiness_logs_athlete_id'), 'athlete_readiness_logs', ['athlete_id'],
                    unique=False)
    op.create_index(op.f('ix_athlete_readiness_logs_log_date'), 'athlete_readiness_logs', ['log_date'],
                    unique=False)


def downgrade() -> None:
    """Drop every table created by this revision."""
    op.drop_table('athlete_readiness_logs')
    op.drop_table('exercise_logs')
    op.drop_table('workout_sessions')
    op.drop_table('workout_assignments')
    op.drop_table('workout_template_exercises')
    op.drop_table('workout_templates')
    op.drop_table('exercises')
    op.drop_index(op.f('ix_users_role'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
