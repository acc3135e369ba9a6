"""
User domain model.
Represents an employee or administrator with their working-time parameters.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional
from enum import Enum

from timekeeper.domain.models.base import (
    BaseEntity,
    ValidationError,
    BusinessRuleViolation,
    DomainEvent
)


DEFAULT_TARGET_HOURS_PER_DAY = 8


class UserRole(str, Enum):
    """System-wide user roles."""
    EMPLOYEE = "employee"
    ADMIN = "admin"


# Domain Events

class UserCreatedEvent(DomainEvent):
    """Event raised when a new user is created."""

    def __init__(self, user_id: Optional[str], username: str):
        super().__init__()
        self.user_id = user_id
        self.username = username

    @property
    def event_name(self) -> str:
        return "user.created"


class UserPromotedEvent(DomainEvent):
    """Event raised when a user is granted the administrator role."""

    def __init__(self, user_id: Optional[str]):
        super().__init__()
        self.user_id = user_id

    @property
    def event_name(self) -> str:
        return "user.promoted"


@dataclass
class User(BaseEntity):
    """
    User entity.

    hourly_rate is used for cost reporting only; target_hours_per_day drives
    the balance calculation.
    """

    username: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: UserRole = UserRole.EMPLOYEE
    group_id: Optional[str] = None
    hourly_rate: Optional[Decimal] = None
    target_hours_per_day: int = DEFAULT_TARGET_HOURS_PER_DAY
    is_active: bool = True

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.role, str):
            self.role = UserRole(self.role)
        if self.target_hours_per_day is None:
            self.target_hours_per_day = DEFAULT_TARGET_HOURS_PER_DAY
        self.validate()

    def validate(self) -> None:
        """Validate user state."""
        if not self.username or len(self.username.strip()) < 3:
            raise ValidationError("Username must be at least 3 characters", "username")

        if len(self.username) > 100:
            raise ValidationError("Username too long (max 100 characters)", "username")

        if self.email and ('@' not in self.email or len(self.email) > 255):
            raise ValidationError(f"Invalid email format: {self.email}", "email")

        if self.hourly_rate is not None and self.hourly_rate < 0:
            raise ValidationError("Hourly rate cannot be negative", "hourly_rate")

        if self.target_hours_per_day < 0 or self.target_hours_per_day > 24:
            raise ValidationError(
                "Target hours per day must be between 0 and 24",
                "target_hours_per_day"
            )

    @property
    def is_admin(self) -> bool:
        """Check if user has the administrator role."""
        return self.role == UserRole.ADMIN

    @property
    def full_name(self) -> str:
        """First and last name joined; empty when neither is set."""
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    @property
    def hourly_rate_value(self) -> float:
        """Hourly rate as a float; a missing or unparseable rate counts as zero."""
        if self.hourly_rate is None:
            return 0.0
        try:
            return float(Decimal(str(self.hourly_rate)))
        except (InvalidOperation, ValueError):
            return 0.0

    def update_profile(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        group_id: Optional[str] = None,
        hourly_rate: Optional[Decimal] = None,
        target_hours_per_day: Optional[int] = None,
        role: Optional[UserRole] = None,
        is_active: Optional[bool] = None
    ) -> None:
        """Update profile fields that were provided."""
        if username is not None:
            self.username = username.strip()
        if email is not None:
            self.email = email or None
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        if group_id is not None:
            self.group_id = group_id or None
        if hourly_rate is not None:
            self.hourly_rate = hourly_rate
        if target_hours_per_day is not None:
            self.target_hours_per_day = target_hours_per_day
        if role is not None:
            self.role = UserRole(role)
        if is_active is not None:
            self.is_active = is_active

        self.validate()
        self.mark_as_updated()

    def promote_to_admin(self) -> None:
        """Grant the administrator role."""
        if self.is_admin:
            raise BusinessRuleViolation("User is already an administrator")

        self.role = UserRole.ADMIN
        self.mark_as_updated()
        self.add_event(UserPromotedEvent(self.id))
