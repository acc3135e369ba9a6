"""
Infrastructure repositories module.
Contains SQLAlchemy implementations of domain repositories.
"""

from .user_repository import SQLAlchemyUserRepository, SQLAlchemyGroupRepository
from .project_repository import SQLAlchemyProjectRepository, SQLAlchemyHolidayRepository
from .time_entry_repository import SQLAlchemyTimeEntryRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyGroupRepository",
    "SQLAlchemyProjectRepository",
    "SQLAlchemyHolidayRepository",
    "SQLAlchemyTimeEntryRepository",
]
