"""
Shared FastAPI dependencies for the routers.
Every repository of a request works on the same database session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from timekeeper.application.use_cases.base_use_case import Clock
from timekeeper.config import settings
from timekeeper.infrastructure.db.database import get_db
from timekeeper.infrastructure.export.export_service import ReportExporter
from timekeeper.infrastructure.repositories.time_entry_repository import SQLAlchemyTimeEntryRepository
from timekeeper.infrastructure.repositories.user_repository import SQLAlchemyGroupRepository
from timekeeper.infrastructure.repositories.project_repository import (
    SQLAlchemyProjectRepository,
    SQLAlchemyHolidayRepository
)


def get_time_entry_repository(session: Session = Depends(get_db)) -> SQLAlchemyTimeEntryRepository:
    """Dependency to get time entry repository."""
    return SQLAlchemyTimeEntryRepository(session)


def get_project_repository(session: Session = Depends(get_db)) -> SQLAlchemyProjectRepository:
    """Dependency to get project repository."""
    return SQLAlchemyProjectRepository(session)


def get_group_repository(session: Session = Depends(get_db)) -> SQLAlchemyGroupRepository:
    """Dependency to get group repository."""
    return SQLAlchemyGroupRepository(session)


def get_holiday_repository(session: Session = Depends(get_db)) -> SQLAlchemyHolidayRepository:
    """Dependency to get holiday repository."""
    return SQLAlchemyHolidayRepository(session)


def get_clock() -> Clock:
    """Clock deriving calendar days in the configured timezone."""
    return Clock(settings.timezone)


def get_report_exporter() -> ReportExporter:
    return ReportExporter()
