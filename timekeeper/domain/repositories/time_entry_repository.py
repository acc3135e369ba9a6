"""Time Entry repository interface.
Defines the contract for time entry data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from datetime import date

from timekeeper.domain.models.time_entry import TimeEntry


class TimeEntryRepository(ABC):
    """
    Repository interface for TimeEntry entity.
    Entries returned by the query methods carry their user and project snapshots.
    """

    @abstractmethod
    def save(self, time_entry: TimeEntry) -> TimeEntry:
        """
        Save a time entry entity.
        Raises BusinessRuleViolation when a second running entry would be stored.
        """
        pass

    @abstractmethod
    def get_by_id(self, entry_id: str) -> Optional[TimeEntry]:
        """
        Find a time entry by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def list_by_user(
        self,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> List[TimeEntry]:
        """
        Entries of one user whose date lies in the inclusive range,
        newest first (date, then start time).
        """
        pass

    @abstractmethod
    def list_all(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> List[TimeEntry]:
        """Entries of all users in the inclusive date range, newest first."""
        pass

    @abstractmethod
    def list_by_user_and_date(self, user_id: str, entry_date: date) -> List[TimeEntry]:
        """Entries of one user on a single day."""
        pass

    @abstractmethod
    def get_running_entry(self, user_id: str) -> Optional[TimeEntry]:
        """The user's running entry, if any."""
        pass

    @abstractmethod
    def delete(self, entry_id: str) -> bool:
        """Delete a time entry. Returns False when it did not exist."""
        pass
