"""
Unit tests for time entry, timer, user and report use cases.
Use cases run against simple in-memory repositories.
"""

import logging
import pytest
from datetime import date, datetime
from decimal import Decimal

from timekeeper.application.dto.report_dto import ReportRequestDTO
from timekeeper.application.dto.time_entry_dto import (
    StartTimerRequestDTO,
    CreateTimeEntryRequestDTO,
    UpdateTimeEntryRequestDTO
)
from timekeeper.application.use_cases.base_use_case import Clock, CurrentUser
from timekeeper.application.use_cases.report_use_cases import GetReportDataUseCase
from timekeeper.application.use_cases.time_entry_use_cases import (
    CreateTimeEntryUseCase,
    DeleteTimeEntryUseCase,
    ListTimeEntriesUseCase,
    StartTimerUseCase,
    StopTimerUseCase,
    UpdateTimeEntryUseCase
)
from timekeeper.application.use_cases.user_use_cases import DeleteUserUseCase, PromoteUserUseCase
from timekeeper.domain.models.base import (
    AuthorizationError,
    BusinessRuleViolation,
    EntityNotFoundError,
    ValidationError,
    new_id
)
from timekeeper.domain.models.time_entry import TimeEntry, TimeEntryStatus
from timekeeper.domain.models.user import User, UserRole
from timekeeper.domain.services.report_service import ReportGrouping


# Simple in-memory repositories for testing
class MockTimeEntryRepository:
    """In-memory time entry repository."""

    def __init__(self, users=None):
        self.data = {}
        self.users = users if users is not None else {}

    def save(self, entry):
        if entry.is_running:
            running = self.get_running_entry(entry.user_id)
            if running is not None and running.id != entry.id:
                raise BusinessRuleViolation("A timer is already running")
        if entry.id is None:
            entry.id = new_id()
        entry.user = self.users.get(entry.user_id)
        self.data[entry.id] = entry
        return entry

    def get_by_id(self, entry_id):
        return self.data.get(entry_id)

    def _in_range(self, entry, start_date, end_date):
        if start_date and entry.date < start_date:
            return False
        if end_date and entry.date > end_date:
            return False
        return True

    def list_by_user(self, user_id, start_date=None, end_date=None):
        return [
            entry for entry in self.data.values()
            if entry.user_id == user_id and self._in_range(entry, start_date, end_date)
        ]

    def list_all(self, start_date=None, end_date=None):
        return [entry for entry in self.data.values() if self._in_range(entry, start_date, end_date)]

    def list_by_user_and_date(self, user_id, entry_date):
        return self.list_by_user(user_id, entry_date, entry_date)

    def get_running_entry(self, user_id):
        for entry in self.data.values():
            if entry.user_id == user_id and entry.is_running:
                return entry
        return None

    def delete(self, entry_id):
        return self.data.pop(entry_id, None) is not None


class MockUserRepository:
    """In-memory user repository."""

    def __init__(self, *users):
        self.data = {user.id: user for user in users}
        self.locked = []

    def save(self, user):
        if user.id is None:
            user.id = new_id()
        self.data[user.id] = user
        return user

    def get_by_id(self, user_id):
        return self.data.get(user_id)

    def admin_exists(self):
        return any(user.is_admin for user in self.data.values())

    def lock(self, user_id):
        self.locked.append(user_id)
        return self.data.get(user_id)

    def delete(self, user_id):
        return self.data.pop(user_id, None) is not None


class MockProjectRepository:
    """In-memory project repository."""

    def __init__(self, *projects):
        self.data = {project.id: project for project in projects}

    def get_by_id(self, project_id):
        return self.data.get(project_id)


class FixedClock(Clock):
    """Clock frozen at a given UTC moment."""

    def __init__(self, moment: datetime, timezone_name: str = "Europe/Berlin"):
        super().__init__(timezone_name)
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


def make_user(user_id: str, role: UserRole = UserRole.EMPLOYEE, **kwargs) -> User:
    return User(id=user_id, username=f"user-{user_id}", role=role, **kwargs)


class TestTimerUseCases:
    """Test cases for starting and stopping timers."""

    def setup_method(self):
        """Set up test fixtures."""
        self.employee = make_user("u-1")
        self.current_user = CurrentUser(self.employee)
        self.users = MockUserRepository(self.employee)
        self.entries = MockTimeEntryRepository(self.users.data)
        self.projects = MockProjectRepository()
        self.clock = FixedClock(datetime(2024, 1, 15, 8, 0))

    def start(self, request=None):
        use_case = StartTimerUseCase(self.entries, self.users, self.projects, clock=self.clock)
        return use_case.execute(self.current_user, request or StartTimerRequestDTO())

    def test_start_timer(self):
        """Test starting a timer creates a running entry and locks the user."""
        entry = self.start(StartTimerRequestDTO(description="Buchhaltung"))

        assert entry.is_running is True
        assert entry.start_time == datetime(2024, 1, 15, 8, 0)
        assert entry.date == date(2024, 1, 15)
        assert entry.description == "Buchhaltung"
        assert self.users.locked == ["u-1"]

    def test_started_event_carries_stored_id(self, caplog):
        """Test the started event is logged with the ID the entry was saved under."""
        caplog.set_level(logging.INFO, logger="timekeeper.application.use_cases.base_use_case")

        entry = self.start()

        started = [record for record in caplog.records if record.args and record.args[0] == "time_entry.started"]
        assert len(started) == 1
        assert started[0].args[1]["entry_id"] == entry.id
        assert entry.id is not None

    def test_restart_stops_previous_timer(self):
        """Test starting again closes the running timer at the new start."""
        first = self.start()
        self.clock.moment = datetime(2024, 1, 15, 9, 30)

        second = self.start()

        assert first.is_running is False
        assert first.end_time == datetime(2024, 1, 15, 9, 30)
        assert second.is_running is True
        assert second.start_time == first.end_time
        assert [entry.id for entry in self.entries.data.values() if entry.is_running] == [second.id]

    def test_start_with_unknown_project(self):
        """Test a timer cannot reference a missing project."""
        with pytest.raises(ValidationError) as exc_info:
            self.start(StartTimerRequestDTO(project_id="missing"))

        assert exc_info.value.field == "project_id"

    def test_local_date_uses_business_timezone(self):
        """Test a start shortly before midnight UTC counts for the next Berlin day."""
        self.clock.moment = datetime(2024, 1, 15, 23, 30)

        entry = self.start()

        assert entry.date == date(2024, 1, 16)

    def test_stop_timer(self):
        """Test stopping sets the end time to now."""
        self.start()
        self.clock.moment = datetime(2024, 1, 15, 12, 0)

        stopped = StopTimerUseCase(self.entries, self.users, clock=self.clock).execute(self.current_user)

        assert stopped.is_running is False
        assert stopped.end_time == datetime(2024, 1, 15, 12, 0)

    def test_stop_without_running_timer(self):
        """Test stopping with nothing running is rejected."""
        use_case = StopTimerUseCase(self.entries, self.users, clock=self.clock)

        with pytest.raises(BusinessRuleViolation):
            use_case.execute(self.current_user)


class TestManualEntryUseCases:
    """Test cases for creating, editing and deleting entries."""

    def setup_method(self):
        """Set up test fixtures."""
        self.employee = make_user("u-1")
        self.colleague = make_user("u-2")
        self.admin = make_user("a-1", role=UserRole.ADMIN)
        self.users = MockUserRepository(self.employee, self.colleague, self.admin)
        self.entries = MockTimeEntryRepository(self.users.data)
        self.projects = MockProjectRepository()
        self.clock = FixedClock(datetime(2024, 1, 15, 18, 0))

    def create(self, current_user, start_hour, end_hour, **kwargs):
        use_case = CreateTimeEntryUseCase(self.entries, self.users, self.projects, clock=self.clock)
        request = CreateTimeEntryRequestDTO(
            start_time=datetime(2024, 1, 15, start_hour, 0),
            end_time=datetime(2024, 1, 15, end_hour, 0),
            **kwargs
        )
        return use_case.execute(current_user, request)

    def test_create_entry(self):
        """Test a manual entry is stored for the caller."""
        entry = self.create(CurrentUser(self.employee), 9, 12, break_minutes=15)

        assert entry.user_id == "u-1"
        assert entry.date == date(2024, 1, 15)
        assert entry.break_minutes == 15
        assert entry.status == TimeEntryStatus.DRAFT

    def test_overlapping_entry_rejected(self):
        """Test a second entry overlapping the first is rejected."""
        self.create(CurrentUser(self.employee), 9, 12)

        with pytest.raises(ValidationError):
            self.create(CurrentUser(self.employee), 11, 13)

    def test_adjacent_entries_allowed(self):
        """Test entries touching at a boundary do not overlap."""
        self.create(CurrentUser(self.employee), 9, 12)

        entry = self.create(CurrentUser(self.employee), 12, 14)

        assert entry.id is not None

    def test_other_users_do_not_overlap(self):
        """Test overlap is checked per user."""
        self.create(CurrentUser(self.employee), 9, 12)

        entry = self.create(CurrentUser(self.colleague), 9, 12)

        assert entry.user_id == "u-2"

    def test_employee_cannot_approve(self):
        """Test only admins may set approved or rejected."""
        with pytest.raises(AuthorizationError):
            self.create(CurrentUser(self.employee), 9, 12, status=TimeEntryStatus.APPROVED)

        entry = self.create(CurrentUser(self.employee), 9, 12, status=TimeEntryStatus.SUBMITTED)
        assert entry.status == TimeEntryStatus.SUBMITTED

    def test_admin_approves_entry(self):
        """Test an admin can approve someone else's entry."""
        entry = self.create(CurrentUser(self.employee), 9, 12)
        use_case = UpdateTimeEntryUseCase(self.entries, self.projects)

        updated = use_case.execute(
            CurrentUser(self.admin), entry.id, UpdateTimeEntryRequestDTO(status=TimeEntryStatus.APPROVED)
        )

        assert updated.status == TimeEntryStatus.APPROVED

    def test_update_foreign_entry_forbidden(self):
        """Test employees cannot edit other users' entries."""
        entry = self.create(CurrentUser(self.employee), 9, 12)
        use_case = UpdateTimeEntryUseCase(self.entries, self.projects)

        with pytest.raises(AuthorizationError):
            use_case.execute(CurrentUser(self.colleague), entry.id, UpdateTimeEntryRequestDTO(description="x"))

    def test_delete_entry(self):
        """Test deleting own entries and missing entries."""
        entry = self.create(CurrentUser(self.employee), 9, 12)
        use_case = DeleteTimeEntryUseCase(self.entries)

        use_case.execute(CurrentUser(self.employee), entry.id)

        assert self.entries.get_by_id(entry.id) is None
        with pytest.raises(EntityNotFoundError):
            use_case.execute(CurrentUser(self.employee), entry.id)

    def test_list_scoping(self):
        """Test employees see their own entries and admins may see all."""
        self.create(CurrentUser(self.employee), 9, 12)
        self.create(CurrentUser(self.colleague), 9, 12)
        use_case = ListTimeEntriesUseCase(self.entries)

        own = use_case.execute(CurrentUser(self.employee), show_all=True)
        everyone = use_case.execute(CurrentUser(self.admin), show_all=True)
        one_user = use_case.execute(CurrentUser(self.admin), user_id="u-2")

        assert [entry.user_id for entry in own] == ["u-1"]
        assert len(everyone) == 2
        assert [entry.user_id for entry in one_user] == ["u-2"]


class TestUserUseCases:
    """Test cases for administrator bootstrap and user deletion."""

    def test_first_user_promotes_self(self):
        """Test self-promotion works while no admin exists."""
        user = make_user("u-1")
        repository = MockUserRepository(user)

        promoted = PromoteUserUseCase(repository).execute(CurrentUser(user), "u-1")

        assert promoted.role == UserRole.ADMIN

    def test_promotion_closed_once_admin_exists(self):
        """Test self-promotion is refused when an admin exists."""
        user = make_user("u-1")
        repository = MockUserRepository(user, make_user("a-1", role=UserRole.ADMIN))

        with pytest.raises(AuthorizationError):
            PromoteUserUseCase(repository).execute(CurrentUser(user), "u-1")

    def test_cannot_promote_others(self):
        """Test users can only promote themselves."""
        user = make_user("u-1")
        repository = MockUserRepository(user, make_user("u-2"))

        with pytest.raises(AuthorizationError):
            PromoteUserUseCase(repository).execute(CurrentUser(user), "u-2")

    def test_admin_cannot_delete_self(self):
        """Test admins cannot remove their own account."""
        admin = make_user("a-1", role=UserRole.ADMIN)
        repository = MockUserRepository(admin)

        with pytest.raises(BusinessRuleViolation):
            DeleteUserUseCase(repository).execute(CurrentUser(admin), "a-1")


class TestReportUseCases:
    """Test cases for report scoping and costs."""

    def setup_method(self):
        """Set up test fixtures."""
        self.employee = make_user("u-1", first_name="Anna", hourly_rate=Decimal("20.00"))
        self.colleague = make_user("u-2", first_name="Ben", hourly_rate=Decimal("30.00"))
        self.admin = make_user("a-1", role=UserRole.ADMIN)
        users = MockUserRepository(self.employee, self.colleague, self.admin)
        self.entries = MockTimeEntryRepository(users.data)
        for user_id in ("u-1", "u-2"):
            self.entries.save(TimeEntry(
                user_id=user_id,
                start_time=datetime(2024, 1, 2, 9, 0),
                end_time=datetime(2024, 1, 2, 17, 0),
                break_minutes=30
            ))
        self.request = ReportRequestDTO(
            start_date=date(2024, 1, 1), end_date=date(2024, 1, 31), group_by="user"
        )

    def test_admin_report_has_costs(self):
        """Test admins get all users, user grouping and costs."""
        report = GetReportDataUseCase(self.entries).execute(CurrentUser(self.admin), self.request)

        assert report.grouping == ReportGrouping.USER
        assert report.total_entries == 2
        assert {group.key: group.total_costs for group in report.groups} == {"Anna": 150.0, "Ben": 225.0}
        assert report.summary["total_costs"] == 375.0

    def test_employee_report_is_scoped(self):
        """Test employees see only their own entries, by day and without costs."""
        report = GetReportDataUseCase(self.entries).execute(CurrentUser(self.employee), self.request)

        assert report.grouping == ReportGrouping.DAY
        assert report.total_entries == 1
        assert report.groups[0].total_costs is None
        assert "total_costs" not in report.summary
