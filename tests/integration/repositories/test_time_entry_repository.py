"""
Tests for the SQLAlchemy time entry repository on SQLite.
"""

import pytest
from datetime import date, datetime

from timekeeper.domain.models.base import BusinessRuleViolation
from timekeeper.domain.models.time_entry import TimeEntry
from timekeeper.domain.models.user import User
from timekeeper.infrastructure.repositories.time_entry_repository import SQLAlchemyTimeEntryRepository
from timekeeper.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


class TestTimeEntryRepositoryRunningTimer:
    """Test the one-running-timer-per-user constraint at the storage level."""

    @pytest.fixture(autouse=True)
    def setup_repositories(self, session_factory):
        self.session = session_factory()
        self.repository = SQLAlchemyTimeEntryRepository(self.session)
        users = SQLAlchemyUserRepository(self.session)
        self.user = users.save(User(username="anna"))
        self.other = users.save(User(username="ben"))
        self.session.commit()
        yield
        self.session.close()

    def start(self, user_id, hour=9):
        entry = TimeEntry.start_timer(user_id, datetime(2024, 3, 4, hour, 0), date(2024, 3, 4))
        saved = self.repository.save(entry)
        self.session.commit()
        return saved

    def test_second_running_entry_rejected(self):
        """Test a second running entry for the same user is refused by the database."""
        self.start(self.user.id)

        with pytest.raises(BusinessRuleViolation, match="A timer is already running"):
            self.start(self.user.id, hour=10)

        running = self.repository.get_running_entry(self.user.id)
        assert running is not None
        assert running.start_time == datetime(2024, 3, 4, 9, 0)
        assert len(self.repository.list_by_user(self.user.id)) == 1

    def test_stopped_entry_and_new_running_entry_coexist(self):
        """Test stopping a timer frees the slot for a new running entry."""
        first = self.start(self.user.id)
        first.stop_timer(datetime(2024, 3, 4, 10, 0))
        self.repository.save(first)
        self.session.commit()

        second = self.start(self.user.id, hour=11)

        assert self.repository.get_running_entry(self.user.id).id == second.id
        assert len(self.repository.list_by_user(self.user.id)) == 2

    def test_running_entries_of_different_users(self):
        """Test each user may have a running entry of their own."""
        mine = self.start(self.user.id)
        theirs = self.start(self.other.id)

        assert self.repository.get_running_entry(self.user.id).id == mine.id
        assert self.repository.get_running_entry(self.other.id).id == theirs.id
