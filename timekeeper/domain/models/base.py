"""
Base entity and value objects for the domain layer.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime, timezone
from typing import Optional, Any, Dict
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import uuid


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the storage convention for timestamps."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id() -> str:
    """Generate a new entity identifier."""
    return str(uuid.uuid4())


class DomainEvent(ABC):
    """Base class for domain events."""

    def __init__(self):
        self.occurred_at = utcnow()
        self.event_id = new_id()

    @property
    @abstractmethod
    def event_name(self) -> str:
        """Return the name of the event."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary."""
        data = {
            key: value for key, value in self.__dict__.items()
            if key not in ("occurred_at", "event_id")
        }
        return {
            "event_id": self.event_id,
            "event_name": self.event_name,
            "occurred_at": self.occurred_at.isoformat(),
            "data": data
        }


@dataclass
class BaseEntity(ABC):
    """
    Base class for all domain entities.
    Provides common attributes and behavior for all entities.
    """

    id: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    # Domain events
    _events: list[DomainEvent] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        """Initialize entity after creation."""
        if self.created_at is None:
            self.created_at = utcnow()
        if self.updated_at is None:
            self.updated_at = self.created_at

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and are of the same type."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if self.id is None:
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    def mark_as_updated(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utcnow()

    def add_event(self, event: DomainEvent) -> None:
        """Add a domain event."""
        self._events.append(event)

    def pull_events(self) -> list[DomainEvent]:
        """Get and clear all domain events."""
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def is_new(self) -> bool:
        """Check if entity is new (not persisted)."""
        return self.id is None

    def validate(self) -> None:
        """
        Validate the entity's state.
        Should be overridden by subclasses to implement specific validation rules.
        Raises ValidationError if the entity is in an invalid state.
        """
        pass


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when entity validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class BusinessRuleViolation(DomainException):
    """Exception raised when a business rule is violated."""

    def __init__(self, message: str):
        super().__init__(message, "BUSINESS_RULE_VIOLATION")


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateEntityError(DomainException):
    """Exception raised when trying to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: Any):
        message = f"{entity_type} with {field}='{value}' already exists"
        super().__init__(message, "DUPLICATE_ENTITY")
        self.entity_type = entity_type
        self.field = field
        self.value = value


class AuthenticationError(DomainException):
    """Exception raised when the caller cannot be identified."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, "AUTHENTICATION_REQUIRED")


class AuthorizationError(DomainException):
    """Exception raised when the caller lacks the role or ownership for an action."""

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message, "FORBIDDEN")


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.
    Value objects are immutable and are compared by their values.
    """

    def __post_init__(self):
        """Validate value object after creation."""
        self.validate()

    @abstractmethod
    def validate(self) -> None:
        """Validate the value object's state."""
        pass


@dataclass(frozen=True)
class TimeRange(ValueObject):
    """
    Half-open time range [start, end).
    An open range (no end) represents a running timer.
    """

    start: datetime
    end: Optional[datetime] = None

    def validate(self) -> None:
        """Validate time range."""
        if self.end is not None and self.end < self.start:
            raise ValidationError("End time cannot be before start time", "end_time")

    @property
    def is_open(self) -> bool:
        """Check if the time range is open (no end time)."""
        return self.end is None

    def close(self, end_time: Optional[datetime] = None) -> 'TimeRange':
        """Close the time range with an end time."""
        if not self.is_open:
            raise BusinessRuleViolation("Time range is already closed")
        return TimeRange(self.start, end_time or utcnow())

    def overlaps_with(self, other: 'TimeRange') -> bool:
        """
        Check if this time range overlaps with another.
        Open ranges never overlap; touching boundaries do not overlap.
        """
        if self.is_open or other.is_open:
            return False

        return self.start < other.end and other.start < self.end
