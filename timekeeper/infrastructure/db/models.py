"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Boolean,
    Numeric, Date, ForeignKey, Enum as SQLEnum,
    Index, CheckConstraint, text
)
from sqlalchemy.orm import relationship

from timekeeper.domain.models.base import utcnow
from timekeeper.domain.models.time_entry import TimeEntryStatus
from timekeeper.domain.models.user import UserRole

from .database import Base


def _enum_column(enum_class):
    """Store enum values (not names) as plain strings on every backend."""
    return SQLEnum(
        enum_class,
        values_callable=lambda members: [member.value for member in members],
        native_enum=False,
        length=20
    )


class GroupModel(Base):
    """Employee group table"""
    __tablename__ = 'groups'

    id = Column(String(36), primary_key=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text)
    color = Column(String(7), nullable=False, default='#10b981')
    is_active = Column(Boolean, nullable=False, default=True)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    members = relationship("UserModel", back_populates="group")


class UserModel(Base):
    """User table"""
    __tablename__ = 'users'

    id = Column(String(36), primary_key=True)
    username = Column(String(100), nullable=False, unique=True)
    email = Column(String(255))
    first_name = Column(String(100))
    last_name = Column(String(100))
    role = Column(_enum_column(UserRole), nullable=False, default=UserRole.EMPLOYEE)
    group_id = Column(String(36), ForeignKey('groups.id', ondelete='SET NULL'))

    # Work settings
    hourly_rate = Column(Numeric(8, 2))
    target_hours_per_day = Column(Integer, nullable=False, default=8)
    is_active = Column(Boolean, nullable=False, default=True)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    group = relationship("GroupModel", back_populates="members")
    time_entries = relationship("TimeEntryModel", back_populates="user", passive_deletes=True)

    __table_args__ = (
        Index('idx_users_role', 'role'),
        CheckConstraint('target_hours_per_day >= 0 AND target_hours_per_day <= 24', name='user_valid_target_hours'),
    )


class ProjectModel(Base):
    """Project table"""
    __tablename__ = 'projects'

    id = Column(String(36), primary_key=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    color = Column(String(7), nullable=False, default='#3b82f6')
    is_active = Column(Boolean, nullable=False, default=True)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    time_entries = relationship("TimeEntryModel", back_populates="project")


class HolidayModel(Base):
    """Public holiday table"""
    __tablename__ = 'holidays'

    id = Column(String(36), primary_key=True)
    name = Column(String(200), nullable=False)
    date = Column(Date, nullable=False)
    is_recurring = Column(Boolean, nullable=False, default=False)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index('idx_holidays_date', 'date'),
    )


class TimeEntryModel(Base):
    """Time entry table"""
    __tablename__ = 'time_entries'

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    project_id = Column(String(36), ForeignKey('projects.id'))

    date = Column(Date, nullable=False)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime)
    break_minutes = Column(Integer, nullable=False, default=0)
    description = Column(Text)

    # Workflow
    status = Column(_enum_column(TimeEntryStatus), nullable=False, default=TimeEntryStatus.DRAFT)
    is_running = Column(Boolean, nullable=False, default=False)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    user = relationship("UserModel", back_populates="time_entries", lazy="joined")
    project = relationship("ProjectModel", back_populates="time_entries", lazy="joined")

    # Constraints and indexes
    __table_args__ = (
        Index('idx_time_entries_user_date', 'user_id', 'date'),
        Index('idx_time_entries_date', 'date'),
        CheckConstraint('end_time IS NULL OR end_time >= start_time', name='time_entry_valid_range'),
        CheckConstraint('break_minutes >= 0', name='time_entry_valid_break'),
        # At most one running timer per user
        Index(
            'uq_time_entries_running_user', 'user_id',
            unique=True,
            postgresql_where=text('is_running'),
            sqlite_where=text('is_running = 1')
        ),
    )
