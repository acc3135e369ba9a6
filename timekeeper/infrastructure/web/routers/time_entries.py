"""
Time tracking router.
Handles time entry management for the authenticated user.
"""

from typing import Annotated, List, Optional
from datetime import date
from fastapi import APIRouter, Depends, status, Query

from timekeeper.infrastructure.auth import get_current_user, get_user_repository
from timekeeper.application.use_cases.base_use_case import CurrentUser, Clock
from timekeeper.application.use_cases.time_entry_use_cases import (
    CreateTimeEntryUseCase,
    UpdateTimeEntryUseCase,
    GetTimeEntryUseCase,
    GetRunningEntryUseCase,
    ListTimeEntriesUseCase,
    DeleteTimeEntryUseCase
)
from timekeeper.application.dto.time_entry_dto import (
    CreateTimeEntryRequestDTO,
    UpdateTimeEntryRequestDTO,
    TimeEntryResponseDTO
)
from timekeeper.application.dto.base_dto import MessageResponseDTO
from timekeeper.infrastructure.repositories.time_entry_repository import SQLAlchemyTimeEntryRepository
from timekeeper.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from timekeeper.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository
from timekeeper.infrastructure.web.dependencies import (
    get_time_entry_repository,
    get_project_repository,
    get_clock
)


router = APIRouter()


@router.get("", response_model=List[TimeEntryResponseDTO])
def list_time_entries(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    clock: Annotated[Clock, Depends(get_clock)],
    start_date: Optional[date] = Query(None, alias="startDate", description="First day, inclusive"),
    end_date: Optional[date] = Query(None, alias="endDate", description="Last day, inclusive"),
    user_id: Optional[str] = Query(None, alias="userId", description="Entries of one user (admins only)"),
    show_all: bool = Query(False, alias="showAll", description="Entries of all users (admins only)")
):
    """
    List time entries, newest first.

    - **startDate** / **endDate**: Inclusive day range
    - **userId**: Administrators may list another user's entries
    - **showAll**: Administrators may list everybody's entries
    """
    use_case = ListTimeEntriesUseCase(repository)
    entries = use_case.execute(current_user, start_date, end_date, user_id, show_all)

    now = clock.now()
    return [TimeEntryResponseDTO.from_domain(entry, now) for entry in entries]


@router.get("/running", response_model=Optional[TimeEntryResponseDTO])
def get_running_entry(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """Get the caller's running timer entry, or null when no timer runs."""
    entry = GetRunningEntryUseCase(repository).execute(current_user)
    return TimeEntryResponseDTO.from_domain(entry, clock.now()) if entry else None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TimeEntryResponseDTO)
def create_time_entry(
    request: CreateTimeEntryRequestDTO,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    user_repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)],
    project_repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """
    Create a manual time entry.

    - **startTime** / **endTime**: Required, end after start
    - **date**: Day the entry counts for, defaults to the start day
    - **breakMinutes**: Unpaid break, subtracted from the duration
    - **projectId**, **description**, **status**: Optional

    Rejected with 400 when the range overlaps another entry of the same day.
    """
    use_case = CreateTimeEntryUseCase(repository, user_repository, project_repository, clock=clock)
    entry = use_case.execute(current_user, request)
    return TimeEntryResponseDTO.from_domain(entry)


@router.get("/{time_entry_id}", response_model=TimeEntryResponseDTO)
def get_time_entry(
    time_entry_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """Get a specific time entry by ID."""
    entry = GetTimeEntryUseCase(repository).execute(current_user, time_entry_id)
    return TimeEntryResponseDTO.from_domain(entry, clock.now())


@router.put("/{time_entry_id}", response_model=TimeEntryResponseDTO)
def update_time_entry(
    time_entry_id: str,
    request: UpdateTimeEntryRequestDTO,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    project_repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """
    Update an existing time entry.

    Only the fields sent are changed; an explicit null project removes it.
    Sending an end time for a running entry stops the timer.
    """
    use_case = UpdateTimeEntryUseCase(repository, project_repository)
    entry = use_case.execute(current_user, time_entry_id, request)
    return TimeEntryResponseDTO.from_domain(entry, clock.now())


@router.delete("/{time_entry_id}", response_model=MessageResponseDTO)
def delete_time_entry(
    time_entry_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)]
):
    """Delete a time entry."""
    DeleteTimeEntryUseCase(repository).execute(current_user, time_entry_id)
    return MessageResponseDTO(message="Time entry deleted")
