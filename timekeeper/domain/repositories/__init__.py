"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .time_entry_repository import TimeEntryRepository
from .user_repository import UserRepository
from .project_repository import ProjectRepository
from .group_repository import GroupRepository
from .holiday_repository import HolidayRepository

__all__ = [
    "TimeEntryRepository",
    "UserRepository",
    "ProjectRepository",
    "GroupRepository",
    "HolidayRepository",
]
