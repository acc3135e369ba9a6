"""
TimeEntry domain model.
Represents a block of working time a user logged, either manually or with a timer.
"""

from dataclasses import dataclass, field
from datetime import datetime, date as Date
from typing import Optional, TYPE_CHECKING
from enum import Enum

from timekeeper.domain.models.base import (
    BaseEntity,
    TimeRange,
    ValidationError,
    BusinessRuleViolation,
    DomainEvent,
    utcnow
)

if TYPE_CHECKING:
    from timekeeper.domain.models.user import User
    from timekeeper.domain.models.project import Project


MAX_DESCRIPTION_LENGTH = 1000


class TimeEntryStatus(str, Enum):
    """Approval workflow status of a time entry."""
    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"


# Statuses only an administrator may assign
REVIEW_STATUSES = (TimeEntryStatus.APPROVED, TimeEntryStatus.REJECTED)


# Domain Events

class TimeEntryStartedEvent(DomainEvent):
    """Event raised when a timer is started."""

    def __init__(self, entry_id: Optional[str], user_id: str, project_id: Optional[str]):
        super().__init__()
        self.entry_id = entry_id
        self.user_id = user_id
        self.project_id = project_id

    @property
    def event_name(self) -> str:
        return "time_entry.started"


class TimeEntryStoppedEvent(DomainEvent):
    """Event raised when a running timer is stopped."""

    def __init__(self, entry_id: Optional[str], user_id: str, ended_at: datetime):
        super().__init__()
        self.entry_id = entry_id
        self.user_id = user_id
        self.ended_at = ended_at

    @property
    def event_name(self) -> str:
        return "time_entry.stopped"


class TimeEntryStatusChangedEvent(DomainEvent):
    """Event raised when the approval status of an entry changes."""

    def __init__(self, entry_id: Optional[str], old_status: str, new_status: str):
        super().__init__()
        self.entry_id = entry_id
        self.old_status = old_status
        self.new_status = new_status

    @property
    def event_name(self) -> str:
        return "time_entry.status_changed"


@dataclass
class TimeEntry(BaseEntity):
    """
    TimeEntry entity.

    A running entry has no end time; at most one entry per user may be running.
    The related user and project are read-only snapshots loaded alongside the
    entry for reporting and are never written back.
    """

    user_id: Optional[str] = None
    project_id: Optional[str] = None
    date: Optional[Date] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    break_minutes: int = 0
    description: Optional[str] = None
    status: TimeEntryStatus = TimeEntryStatus.DRAFT
    is_running: bool = False

    user: Optional["User"] = field(default=None, repr=False, compare=False)
    project: Optional["Project"] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.status, str):
            self.status = TimeEntryStatus(self.status)
        if self.date is None and self.start_time is not None:
            self.date = self.start_time.date()
        if self.break_minutes is None:
            self.break_minutes = 0
        self.validate()

    def validate(self) -> None:
        """Validate time entry state."""
        if not self.user_id:
            raise ValidationError("User ID is required", "user_id")

        if self.date is None:
            raise ValidationError("Date is required", "date")

        if self.start_time is None:
            raise ValidationError("Start time is required", "start_time")

        if self.break_minutes < 0:
            raise ValidationError("Break minutes cannot be negative", "break_minutes")

        if self.description and len(self.description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Description too long (max {MAX_DESCRIPTION_LENGTH} characters)",
                "description"
            )

        if self.is_running and self.end_time is not None:
            raise ValidationError("A running entry cannot have an end time", "end_time")

        # Raises on an end before the start
        TimeRange(self.start_time, self.end_time)

    @property
    def time_range(self) -> TimeRange:
        """Get the entry's time range (open while running)."""
        return TimeRange(self.start_time, self.end_time)

    @property
    def is_closed(self) -> bool:
        """Check whether both start and end time are recorded."""
        return self.start_time is not None and self.end_time is not None

    @classmethod
    def start_timer(
        cls,
        user_id: str,
        started_at: datetime,
        entry_date: Date,
        project_id: Optional[str] = None,
        description: Optional[str] = None
    ) -> "TimeEntry":
        """
        Create a new running entry.
        The started event is recorded once the entry has been stored and has an ID.
        """
        return cls(
            user_id=user_id,
            project_id=project_id,
            date=entry_date,
            start_time=started_at,
            end_time=None,
            description=description,
            status=TimeEntryStatus.DRAFT,
            is_running=True
        )

    def stop_timer(self, end_time: Optional[datetime] = None) -> None:
        """Stop the running timer."""
        if not self.is_running:
            raise BusinessRuleViolation("Timer is not running")

        closed = self.time_range.close(end_time or utcnow())
        self.end_time = closed.end
        self.is_running = False
        self.mark_as_updated()

        self.add_event(TimeEntryStoppedEvent(self.id, self.user_id, self.end_time))

    def update_details(
        self,
        project_id: Optional[str] = None,
        entry_date: Optional[Date] = None,
        start_time: Optional[datetime] = None,
        end_time: Optional[datetime] = None,
        break_minutes: Optional[int] = None,
        description: Optional[str] = None,
        clear_project: bool = False
    ) -> None:
        """
        Update the editable fields of the entry.
        Setting an end time on a running entry stops it.
        """
        if clear_project:
            self.project_id = None
        elif project_id is not None:
            self.project_id = project_id

        if entry_date is not None:
            self.date = entry_date

        if start_time is not None:
            self.start_time = start_time

        if end_time is not None:
            self.end_time = end_time
            if self.is_running:
                self.is_running = False
                self.add_event(TimeEntryStoppedEvent(self.id, self.user_id, end_time))

        if break_minutes is not None:
            self.break_minutes = break_minutes

        if description is not None:
            self.description = description

        self.validate()
        self.mark_as_updated()

    def change_status(self, status: TimeEntryStatus) -> None:
        """Move the entry to another approval status."""
        status = TimeEntryStatus(status)
        if status == self.status:
            return

        old_status = self.status
        self.status = status
        self.mark_as_updated()

        self.add_event(TimeEntryStatusChangedEvent(self.id, old_status.value, status.value))
