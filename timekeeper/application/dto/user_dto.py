"""
User DTOs for the application layer.
Data Transfer Objects for user management operations.
"""

from typing import Optional
from decimal import Decimal
from pydantic import Field, field_validator

from timekeeper.domain.models.user import User, UserRole, DEFAULT_TARGET_HOURS_PER_DAY

from .base_dto import BaseDTO, ResponseDTO, CreateRequestDTO, UpdateRequestDTO


# Request DTOs
class CreateUserRequestDTO(CreateRequestDTO):
    """DTO for user creation requests."""

    username: str = Field(min_length=3, max_length=100, description="Unique login name")
    email: Optional[str] = Field(default=None, max_length=255, description="Email address")
    first_name: Optional[str] = Field(default=None, max_length=100, description="First name")
    last_name: Optional[str] = Field(default=None, max_length=100, description="Last name")
    role: UserRole = Field(default=UserRole.EMPLOYEE, description="User role")
    group_id: Optional[str] = Field(default=None, description="Group the user belongs to")
    hourly_rate: Optional[Decimal] = Field(default=None, ge=0, max_digits=8, decimal_places=2, description="Hourly rate")
    target_hours_per_day: int = Field(
        default=DEFAULT_TARGET_HOURS_PER_DAY, ge=0, le=24, description="Daily target hours"
    )

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        """Usernames are stored without surrounding whitespace."""
        v = v.strip()
        if len(v) < 3:
            raise ValueError('Username must be at least 3 characters')
        return v

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        """Empty email strings are treated as absent."""
        if v is not None and not v.strip():
            return None
        if v is not None and '@' not in v:
            raise ValueError('Invalid email format')
        return v


class UpdateUserRequestDTO(UpdateRequestDTO):
    """DTO for user update requests."""

    username: Optional[str] = Field(default=None, min_length=3, max_length=100)
    email: Optional[str] = Field(default=None, max_length=255)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    role: Optional[UserRole] = Field(default=None)
    group_id: Optional[str] = Field(default=None)
    hourly_rate: Optional[Decimal] = Field(default=None, ge=0, max_digits=8, decimal_places=2)
    target_hours_per_day: Optional[int] = Field(default=None, ge=0, le=24)
    is_active: Optional[bool] = Field(default=None)


# Response DTOs
class UserSummaryDTO(BaseDTO):
    """Compact user representation embedded in other responses."""

    id: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserSummaryDTO":
        return cls(
            id=user.id,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name
        )


class UserResponseDTO(ResponseDTO):
    """DTO for user responses."""

    username: str = Field(description="Login name")
    email: Optional[str] = Field(default=None, description="Email address")
    first_name: Optional[str] = Field(default=None, description="First name")
    last_name: Optional[str] = Field(default=None, description="Last name")
    role: UserRole = Field(description="User role")
    group_id: Optional[str] = Field(default=None, description="Group ID")
    hourly_rate: Optional[Decimal] = Field(default=None, description="Hourly rate")
    target_hours_per_day: int = Field(description="Daily target hours")
    is_active: bool = Field(description="Whether the account is active")

    @classmethod
    def from_domain(cls, user: User) -> "UserResponseDTO":
        """Create response DTO from a domain user."""
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            group_id=user.group_id,
            hourly_rate=user.hourly_rate,
            target_hours_per_day=user.target_hours_per_day,
            is_active=user.is_active,
            created_at=user.created_at
        )
