"""Timer service for managing time tracking logic.
Handles duration math, the running-timer state machine and overlap detection.
"""

from typing import List, Optional, Tuple
from datetime import datetime, date

from timekeeper.domain.models.base import BusinessRuleViolation, ValidationError
from timekeeper.domain.models.time_entry import TimeEntry


def calculate_duration(
    start_time: datetime,
    end_time: datetime,
    break_minutes: Optional[int] = 0
) -> float:
    """
    Net worked hours between two timestamps minus the break.
    Never negative: a break longer than the interval yields 0.
    """
    gross_hours = (end_time - start_time).total_seconds() / 3600
    return max(0.0, gross_hours - (break_minutes or 0) / 60)


def entry_hours(entry: TimeEntry, now: Optional[datetime] = None) -> float:
    """
    Net hours of a time entry.
    A running entry is measured up to `now`; without `now` it counts as 0.
    """
    if entry.start_time is None:
        return 0.0

    end_time = entry.end_time
    if end_time is None:
        if now is None:
            return 0.0
        end_time = now

    return calculate_duration(entry.start_time, end_time, entry.break_minutes)


def format_duration(hours: float) -> str:
    """Render hours as a signed H:MMh string, e.g. 7.5 -> '7:30h', -0.25 -> '-0:15h'."""
    total_minutes = int(round(abs(hours) * 60))
    sign = "-" if hours < 0 and total_minutes else ""
    return f"{sign}{total_minutes // 60}:{total_minutes % 60:02d}h"


class TimerService:
    """
    Domain service for time tracking logic and validations.
    Handles timer operations and overlap detection.
    """

    def start_timer(
        self,
        user_id: str,
        now: datetime,
        today: date,
        running_entry: Optional[TimeEntry] = None,
        project_id: Optional[str] = None,
        description: Optional[str] = None
    ) -> Tuple[Optional[TimeEntry], TimeEntry]:
        """
        Start a new timer for a user.

        A timer that is already running is stopped at `now` first, so the
        previous entry ends exactly where the new one begins. Returns the
        stopped entry (or None) and the new running entry.
        """
        if not user_id:
            raise ValidationError("User ID is required", "user_id")

        stopped_entry = None
        if running_entry is not None:
            if running_entry.user_id != user_id:
                raise BusinessRuleViolation("Running entry belongs to another user")
            running_entry.stop_timer(now)
            stopped_entry = running_entry

        new_entry = TimeEntry.start_timer(
            user_id=user_id,
            started_at=now,
            entry_date=today,
            project_id=project_id,
            description=description
        )

        return stopped_entry, new_entry

    def stop_timer(
        self,
        running_entry: Optional[TimeEntry],
        now: datetime
    ) -> TimeEntry:
        """
        Stop the user's running timer.
        """
        if running_entry is None or not running_entry.is_running:
            raise BusinessRuleViolation("No running timer found")

        running_entry.stop_timer(now)
        return running_entry

    def detect_overlapping_entries(
        self,
        time_entries: List[TimeEntry],
        new_entry: TimeEntry
    ) -> List[TimeEntry]:
        """
        Detect time entries that overlap with a new entry.
        Entries without an end time (running) never take part.
        """
        if not new_entry.is_closed:
            return []

        overlapping = []

        for entry in time_entries:
            if new_entry.id is not None and entry.id == new_entry.id:
                continue

            if not entry.is_closed:
                continue

            if new_entry.time_range.overlaps_with(entry.time_range):
                overlapping.append(entry)

        return overlapping

    def has_overlap(self, candidate: TimeEntry, existing: List[TimeEntry]) -> bool:
        """Check whether the candidate conflicts with any existing entry."""
        return bool(self.detect_overlapping_entries(existing, candidate))

    def ensure_no_overlap(self, candidate: TimeEntry, existing: List[TimeEntry]) -> None:
        """Reject a candidate entry that overlaps an existing one."""
        if self.has_overlap(candidate, existing):
            raise ValidationError("Overlapping times detected", "start_time")
