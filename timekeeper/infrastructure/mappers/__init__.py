"""
Infrastructure mappers module.
Contains mappers for converting between domain entities and database models.
"""

from .user_mapper import UserMapper, GroupMapper
from .project_mapper import ProjectMapper, HolidayMapper
from .time_entry_mapper import TimeEntryMapper

__all__ = [
    "UserMapper",
    "GroupMapper",
    "ProjectMapper",
    "HolidayMapper",
    "TimeEntryMapper",
]
