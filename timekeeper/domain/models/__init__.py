"""
Domain models for the time tracking system.
This module exports all domain entities and value objects.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainEvent,
    DomainException,
    ValidationError,
    BusinessRuleViolation,
    EntityNotFoundError,
    DuplicateEntityError,
    AuthenticationError,
    AuthorizationError,
    ValueObject,
    TimeRange,
    utcnow
)

# Domain entities
from .time_entry import TimeEntry, TimeEntryStatus, REVIEW_STATUSES
from .user import User, UserRole
from .project import Project
from .group import Group
from .holiday import Holiday

__all__ = [
    # Base classes
    "BaseEntity",
    "DomainEvent",
    "DomainException",
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "AuthenticationError",
    "AuthorizationError",
    "ValueObject",
    "TimeRange",
    "utcnow",

    # Entities
    "TimeEntry",
    "TimeEntryStatus",
    "REVIEW_STATUSES",
    "User",
    "UserRole",
    "Project",
    "Group",
    "Holiday",
]
