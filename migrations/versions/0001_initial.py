"""Initial schema: users, groups, projects, holidays and time entries

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-18 09:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


USER_ROLES = ('employee', 'admin')
ENTRY_STATUSES = ('draft', 'submitted', 'approved', 'rejected')


def upgrade() -> None:
    op.create_table(
        'groups',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False, unique=True),
        sa.Column('description', sa.Text()),
        sa.Column('color', sa.String(length=7), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'users',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('username', sa.String(length=100), nullable=False, unique=True),
        sa.Column('email', sa.String(length=255)),
        sa.Column('first_name', sa.String(length=100)),
        sa.Column('last_name', sa.String(length=100)),
        sa.Column('role', sa.Enum(*USER_ROLES, name='userrole', native_enum=False, length=20), nullable=False),
        sa.Column('group_id', sa.String(length=36), sa.ForeignKey('groups.id', ondelete='SET NULL')),
        sa.Column('hourly_rate', sa.Numeric(8, 2)),
        sa.Column('target_hours_per_day', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint(
            'target_hours_per_day >= 0 AND target_hours_per_day <= 24',
            name='user_valid_target_hours'
        ),
    )
    op.create_index('idx_users_role', 'users', ['role'])

    op.create_table(
        'projects',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('color', sa.String(length=7), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'holidays',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('is_recurring', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('idx_holidays_date', 'holidays', ['date'])

    op.create_table(
        'time_entries',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('project_id', sa.String(length=36), sa.ForeignKey('projects.id')),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime()),
        sa.Column('break_minutes', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('status', sa.Enum(*ENTRY_STATUSES, name='timeentrystatus', native_enum=False, length=20), nullable=False),
        sa.Column('is_running', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('end_time IS NULL OR end_time >= start_time', name='time_entry_valid_range'),
        sa.CheckConstraint('break_minutes >= 0', name='time_entry_valid_break'),
    )
    op.create_index('idx_time_entries_user_date', 'time_entries', ['user_id', 'date'])
    op.create_index('idx_time_entries_date', 'time_entries', ['date'])
    op.create_index(
        'uq_time_entries_running_user', 'time_entries', ['user_id'],
        unique=True,
        postgresql_where=sa.text('is_running'),
        sqlite_where=sa.text('is_running = 1')
    )


def downgrade() -> None:
    op.drop_index('uq_time_entries_running_user', table_name='time_entries')
    op.drop_index('idx_time_entries_date', table_name='time_entries')
    op.drop_index('idx_time_entries_user_date', table_name='time_entries')
    op.drop_table('time_entries')
    op.drop_index('idx_holidays_date', table_name='holidays')
    op.drop_table('holidays')
    op.drop_table('projects')
    op.drop_index('idx_users_role', table_name='users')
    op.drop_table('users')
    op.drop_table('groups')
