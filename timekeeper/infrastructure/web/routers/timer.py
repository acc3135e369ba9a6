"""
Timer router.
Starts and stops the caller's running time entry.
"""

from typing import Annotated, Optional
from fastapi import APIRouter, Body, Depends, status

from timekeeper.infrastructure.auth import get_current_user, get_user_repository
from timekeeper.application.use_cases.base_use_case import CurrentUser, Clock
from timekeeper.application.use_cases.time_entry_use_cases import StartTimerUseCase, StopTimerUseCase
from timekeeper.application.dto.time_entry_dto import StartTimerRequestDTO, TimeEntryResponseDTO
from timekeeper.infrastructure.repositories.time_entry_repository import SQLAlchemyTimeEntryRepository
from timekeeper.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from timekeeper.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository
from timekeeper.infrastructure.web.dependencies import (
    get_time_entry_repository,
    get_project_repository,
    get_clock
)


router = APIRouter()


@router.post("/start", status_code=status.HTTP_201_CREATED, response_model=TimeEntryResponseDTO)
def start_timer(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    user_repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)],
    project_repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)],
    clock: Annotated[Clock, Depends(get_clock)],
    request: Optional[StartTimerRequestDTO] = Body(default=None)
):
    """
    Start a timer for the authenticated user.

    - **projectId**: Project to track time for (optional)
    - **description**: Work description (optional)

    A timer that is still running is stopped at the same instant.
    """
    use_case = StartTimerUseCase(repository, user_repository, project_repository, clock=clock)
    entry = use_case.execute(current_user, request or StartTimerRequestDTO())
    return TimeEntryResponseDTO.from_domain(entry, clock.now())


@router.post("/stop", response_model=TimeEntryResponseDTO)
def stop_timer(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    user_repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)],
    clock: Annotated[Clock, Depends(get_clock)]
):
    """Stop the running timer; 400 when no timer is running."""
    entry = StopTimerUseCase(repository, user_repository, clock=clock).execute(current_user)
    return TimeEntryResponseDTO.from_domain(entry)
