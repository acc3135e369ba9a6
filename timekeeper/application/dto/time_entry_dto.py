"""
Time Entry DTOs for the application layer.
Data Transfer Objects for time tracking operations.
"""

from typing import Optional
from datetime import datetime, date as Date
from pydantic import Field, field_validator, model_validator

from timekeeper.domain.models.time_entry import TimeEntry, TimeEntryStatus, MAX_DESCRIPTION_LENGTH
from timekeeper.domain.services.timer_service import entry_hours

from .base_dto import ResponseDTO, RequestDTO, CreateRequestDTO, UpdateRequestDTO, to_naive_utc
from .user_dto import UserSummaryDTO
from .project_dto import ProjectSummaryDTO


def _blank_to_none(v):
    if v is not None and len(v.strip()) == 0:
        return None
    return v


# Request DTOs
class StartTimerRequestDTO(RequestDTO):
    """DTO for starting a timer."""

    project_id: Optional[str] = Field(default=None, description="Project ID (optional)")
    description: Optional[str] = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH, description="Work description")

    @field_validator('project_id', 'description')
    @classmethod
    def validate_blank(cls, v):
        """Blank strings are treated as absent."""
        return _blank_to_none(v)


class CreateTimeEntryRequestDTO(CreateRequestDTO):
    """DTO for manual time entry creation."""

    project_id: Optional[str] = Field(default=None, description="Project ID (optional)")
    date: Optional[Date] = Field(default=None, description="Day the entry is attributed to, defaults to the start day")
    start_time: datetime = Field(description="Start timestamp")
    end_time: datetime = Field(description="End timestamp")
    break_minutes: int = Field(default=0, ge=0, le=24 * 60, description="Break in minutes")
    description: Optional[str] = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH, description="Work description")
    status: TimeEntryStatus = Field(default=TimeEntryStatus.DRAFT, description="Approval status")

    @field_validator('start_time', 'end_time')
    @classmethod
    def normalize_timestamps(cls, v):
        """Store timestamps as naive UTC."""
        return to_naive_utc(v)

    @field_validator('project_id')
    @classmethod
    def validate_project_id(cls, v):
        return _blank_to_none(v)

    @model_validator(mode='after')
    def validate_time_range(self):
        """Validate end time is after start time."""
        if self.end_time <= self.start_time:
            raise ValueError('End time must be after start time')
        return self


class UpdateTimeEntryRequestDTO(UpdateRequestDTO):
    """
    DTO for time entry update requests.
    Only fields present in the payload are applied; an explicit null
    project_id detaches the entry from its project.
    """

    project_id: Optional[str] = Field(default=None, description="Project ID")
    date: Optional[Date] = Field(default=None, description="Day the entry is attributed to")
    start_time: Optional[datetime] = Field(default=None, description="Start timestamp")
    end_time: Optional[datetime] = Field(default=None, description="End timestamp")
    break_minutes: Optional[int] = Field(default=None, ge=0, le=24 * 60, description="Break in minutes")
    description: Optional[str] = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH, description="Work description")
    status: Optional[TimeEntryStatus] = Field(default=None, description="Approval status")

    @field_validator('start_time', 'end_time')
    @classmethod
    def normalize_timestamps(cls, v):
        return to_naive_utc(v)

    @model_validator(mode='after')
    def validate_time_range(self):
        """Validate end time is after start time when both are sent."""
        if self.start_time and self.end_time and self.end_time <= self.start_time:
            raise ValueError('End time must be after start time')
        return self

    @property
    def clears_project(self) -> bool:
        return 'project_id' in self.model_fields_set and not self.project_id


# Response DTOs
class TimeEntryResponseDTO(ResponseDTO):
    """DTO for time entry responses, with embedded user and project."""

    user_id: str = Field(description="Owner user ID")
    project_id: Optional[str] = Field(default=None, description="Project ID")
    date: Date = Field(description="Day the entry is attributed to")
    start_time: datetime = Field(description="Start timestamp (UTC)")
    end_time: Optional[datetime] = Field(default=None, description="End timestamp (UTC), absent while running")
    break_minutes: int = Field(description="Break in minutes")
    description: Optional[str] = Field(default=None, description="Work description")
    status: TimeEntryStatus = Field(description="Approval status")
    is_running: bool = Field(description="Whether the timer is running")
    duration_hours: float = Field(description="Net hours; running entries are measured until now")
    updated_at: Optional[datetime] = None
    user: Optional[UserSummaryDTO] = None
    project: Optional[ProjectSummaryDTO] = None

    @classmethod
    def from_domain(cls, entry: TimeEntry, now: Optional[datetime] = None) -> "TimeEntryResponseDTO":
        """Create response DTO from a domain time entry."""
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            project_id=entry.project_id,
            date=entry.date,
            start_time=entry.start_time,
            end_time=entry.end_time,
            break_minutes=entry.break_minutes,
            description=entry.description,
            status=entry.status,
            is_running=entry.is_running,
            duration_hours=round(entry_hours(entry, now), 2),
            created_at=entry.created_at,
            updated_at=entry.updated_at,
            user=UserSummaryDTO.from_domain(entry.user) if entry.user else None,
            project=ProjectSummaryDTO.from_domain(entry.project) if entry.project else None
        )
