"""
Time Entry use cases for the application layer.
Implements business logic for time tracking operations.
"""

import logging
from typing import List, Optional
from datetime import date

from timekeeper.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CurrentUser,
    Clock,
    require_found,
    require_reference
)
from timekeeper.application.dto.time_entry_dto import (
    StartTimerRequestDTO,
    CreateTimeEntryRequestDTO,
    UpdateTimeEntryRequestDTO
)
from timekeeper.domain.models.base import AuthorizationError
from timekeeper.domain.models.time_entry import (
    TimeEntry,
    TimeEntryStatus,
    TimeEntryStartedEvent,
    REVIEW_STATUSES
)
from timekeeper.domain.repositories.time_entry_repository import TimeEntryRepository
from timekeeper.domain.repositories.project_repository import ProjectRepository
from timekeeper.domain.repositories.user_repository import UserRepository
from timekeeper.domain.services.timer_service import TimerService


logger = logging.getLogger(__name__)


class TimeEntryUseCase(AuthorizedUseCase):
    """Shared checks for time entry use cases."""

    def _check_status_permission(self, current_user: CurrentUser, status: Optional[TimeEntryStatus]) -> None:
        """Only administrators may approve or reject entries."""
        if status is not None and TimeEntryStatus(status) in REVIEW_STATUSES and not current_user.is_admin:
            raise AuthorizationError("Only administrators can approve or reject time entries")

    def _check_project(self, project_repository: ProjectRepository, project_id: Optional[str]) -> None:
        """A referenced project must exist."""
        if project_id:
            require_reference(
                project_repository.get_by_id(project_id), "project_id", "Project not found"
            )


class ListTimeEntriesUseCase(AuthorizedUseCase):
    """
    Use case for listing time entries.
    Administrators may list one user's entries or everyone's; everybody else
    only ever sees their own.
    """

    def __init__(self, time_entry_repository: TimeEntryRepository):
        self.time_entry_repository = time_entry_repository

    def execute(
        self,
        current_user: CurrentUser,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        user_id: Optional[str] = None,
        show_all: bool = False
    ) -> List[TimeEntry]:
        if current_user.is_admin and user_id:
            return self.time_entry_repository.list_by_user(user_id, start_date, end_date)

        if current_user.is_admin and show_all:
            return self.time_entry_repository.list_all(start_date, end_date)

        return self.time_entry_repository.list_by_user(current_user.user_id, start_date, end_date)


class GetTimeEntryUseCase(AuthorizedUseCase):
    """Use case for reading a single time entry."""

    def __init__(self, time_entry_repository: TimeEntryRepository):
        self.time_entry_repository = time_entry_repository

    def execute(self, current_user: CurrentUser, entry_id: str) -> TimeEntry:
        entry = require_found(self.time_entry_repository.get_by_id(entry_id), "TimeEntry", entry_id)
        self._require_owner_or_admin(current_user, entry.user_id)
        return entry


class GetRunningEntryUseCase(AuthorizedUseCase):
    """Use case for reading the caller's running timer."""

    def __init__(self, time_entry_repository: TimeEntryRepository):
        self.time_entry_repository = time_entry_repository

    def execute(self, current_user: CurrentUser) -> Optional[TimeEntry]:
        return self.time_entry_repository.get_running_entry(current_user.user_id)


class CreateTimeEntryUseCase(TimeEntryUseCase):
    """
    Use case for creating a manual time entry.

    The owner's row is locked before the overlap check so that two concurrent
    creations for the same user are checked one after the other.
    """

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        user_repository: UserRepository,
        project_repository: ProjectRepository,
        timer_service: Optional[TimerService] = None,
        clock: Optional[Clock] = None
    ):
        self.time_entry_repository = time_entry_repository
        self.user_repository = user_repository
        self.project_repository = project_repository
        self.timer_service = timer_service or TimerService()
        self.clock = clock or Clock()

    def execute(self, current_user: CurrentUser, request: CreateTimeEntryRequestDTO) -> TimeEntry:
        self._check_status_permission(current_user, request.status)
        self._check_project(self.project_repository, request.project_id)

        self.user_repository.lock(current_user.user_id)

        entry = TimeEntry(
            user_id=current_user.user_id,
            project_id=request.project_id,
            date=request.date or self.clock.local_date(request.start_time),
            start_time=request.start_time,
            end_time=request.end_time,
            break_minutes=request.break_minutes,
            description=request.description,
            status=request.status,
            is_running=False
        )

        same_day = self.time_entry_repository.list_by_user_and_date(current_user.user_id, entry.date)
        self.timer_service.ensure_no_overlap(entry, same_day)

        saved = self.time_entry_repository.save(entry)
        self._publish_events(saved)
        logger.info("Time entry %s created for user %s", saved.id, current_user.user_id)

        return self.time_entry_repository.get_by_id(saved.id)


class UpdateTimeEntryUseCase(TimeEntryUseCase):
    """
    Use case for editing a time entry.
    Setting an end time on a running entry stops its timer.
    """

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        project_repository: ProjectRepository
    ):
        self.time_entry_repository = time_entry_repository
        self.project_repository = project_repository

    def execute(
        self,
        current_user: CurrentUser,
        entry_id: str,
        request: UpdateTimeEntryRequestDTO
    ) -> TimeEntry:
        entry = require_found(self.time_entry_repository.get_by_id(entry_id), "TimeEntry", entry_id)
        self._require_owner_or_admin(current_user, entry.user_id)
        self._check_status_permission(current_user, request.status)
        self._check_project(self.project_repository, request.project_id)

        entry.update_details(
            project_id=request.project_id,
            entry_date=request.date,
            start_time=request.start_time,
            end_time=request.end_time,
            break_minutes=request.break_minutes,
            description=request.description,
            clear_project=request.clears_project
        )
        if request.status is not None:
            entry.change_status(request.status)

        saved = self.time_entry_repository.save(entry)
        self._publish_events(saved)

        return self.time_entry_repository.get_by_id(saved.id)


class DeleteTimeEntryUseCase(AuthorizedUseCase):
    """Use case for deleting a time entry, running or not."""

    def __init__(self, time_entry_repository: TimeEntryRepository):
        self.time_entry_repository = time_entry_repository

    def execute(self, current_user: CurrentUser, entry_id: str) -> None:
        entry = require_found(self.time_entry_repository.get_by_id(entry_id), "TimeEntry", entry_id)
        self._require_owner_or_admin(current_user, entry.user_id)

        self.time_entry_repository.delete(entry_id)
        logger.info("Time entry %s deleted by user %s", entry_id, current_user.user_id)


class StartTimerUseCase(TimeEntryUseCase):
    """
    Use case for starting a timer.
    A timer that is already running is stopped first, inside the same transaction.
    """

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        user_repository: UserRepository,
        project_repository: ProjectRepository,
        timer_service: Optional[TimerService] = None,
        clock: Optional[Clock] = None
    ):
        self.time_entry_repository = time_entry_repository
        self.user_repository = user_repository
        self.project_repository = project_repository
        self.timer_service = timer_service or TimerService()
        self.clock = clock or Clock()

    def execute(self, current_user: CurrentUser, request: StartTimerRequestDTO) -> TimeEntry:
        self._check_project(self.project_repository, request.project_id)

        self.user_repository.lock(current_user.user_id)
        running = self.time_entry_repository.get_running_entry(current_user.user_id)

        now = self.clock.now()
        stopped, started = self.timer_service.start_timer(
            user_id=current_user.user_id,
            now=now,
            today=self.clock.local_date(now),
            running_entry=running,
            project_id=request.project_id,
            description=request.description
        )

        # The previous timer has to be closed before the new one is written
        if stopped is not None:
            self.time_entry_repository.save(stopped)
            self._publish_events(stopped)

        saved = self.time_entry_repository.save(started)
        saved.add_event(TimeEntryStartedEvent(saved.id, saved.user_id, saved.project_id))
        self._publish_events(saved)

        return self.time_entry_repository.get_by_id(saved.id)


class StopTimerUseCase(AuthorizedUseCase):
    """Use case for stopping the caller's running timer."""

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        user_repository: UserRepository,
        timer_service: Optional[TimerService] = None,
        clock: Optional[Clock] = None
    ):
        self.time_entry_repository = time_entry_repository
        self.user_repository = user_repository
        self.timer_service = timer_service or TimerService()
        self.clock = clock or Clock()

    def execute(self, current_user: CurrentUser) -> TimeEntry:
        self.user_repository.lock(current_user.user_id)
        running = self.time_entry_repository.get_running_entry(current_user.user_id)

        stopped = self.timer_service.stop_timer(running, self.clock.now())

        saved = self.time_entry_repository.save(stopped)
        self._publish_events(saved)

        return self.time_entry_repository.get_by_id(saved.id)
