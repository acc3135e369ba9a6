"""
Database infrastructure for the time tracking backend.
"""

from .database import engine, SessionLocal, get_db, Base, build_engine
from .models import GroupModel, UserModel, ProjectModel, HolidayModel, TimeEntryModel

__all__ = [
    "engine",
    "SessionLocal",
    "get_db",
    "Base",
    "build_engine",
    "GroupModel",
    "UserModel",
    "ProjectModel",
    "HolidayModel",
    "TimeEntryModel",
]
