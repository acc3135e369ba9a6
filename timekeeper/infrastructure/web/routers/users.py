"""
User management router.
Administrators maintain the user list; the initial administrator is set up
through self-promotion while no administrator exists.
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends, status

from timekeeper.infrastructure.auth import get_current_user, get_user_repository
from timekeeper.application.use_cases.base_use_case import CurrentUser
from timekeeper.application.use_cases.user_use_cases import (
    ListUsersUseCase,
    CreateUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    PromoteUserUseCase
)
from timekeeper.application.dto.user_dto import CreateUserRequestDTO, UpdateUserRequestDTO, UserResponseDTO
from timekeeper.application.dto.base_dto import MessageResponseDTO
from timekeeper.infrastructure.repositories.user_repository import SQLAlchemyUserRepository, SQLAlchemyGroupRepository
from timekeeper.infrastructure.web.dependencies import get_group_repository


router = APIRouter()


@router.get("", response_model=List[UserResponseDTO])
def list_users(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)]
):
    """List active users ordered by first name (administrators only)."""
    users = ListUsersUseCase(repository).execute(current_user)
    return [UserResponseDTO.from_domain(user) for user in users]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserResponseDTO)
def create_user(
    request: CreateUserRequestDTO,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)],
    group_repository: Annotated[SQLAlchemyGroupRepository, Depends(get_group_repository)]
):
    """
    Create a user (administrators only).

    - **username**: Unique, at least 3 characters
    - **role**: employee or admin
    - **hourlyRate**: Used for cost reports
    - **targetHoursPerDay**: Daily target for the overtime balance
    """
    user = CreateUserUseCase(repository, group_repository).execute(current_user, request)
    return UserResponseDTO.from_domain(user)


@router.put("/{user_id}", response_model=UserResponseDTO)
def update_user(
    user_id: str,
    request: UpdateUserRequestDTO,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)],
    group_repository: Annotated[SQLAlchemyGroupRepository, Depends(get_group_repository)]
):
    """Update a user (administrators only)."""
    user = UpdateUserUseCase(repository, group_repository).execute(current_user, user_id, request)
    return UserResponseDTO.from_domain(user)


@router.delete("/{user_id}", response_model=MessageResponseDTO)
def delete_user(
    user_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)]
):
    """Delete a user together with their time entries (administrators only)."""
    DeleteUserUseCase(repository).execute(current_user, user_id)
    return MessageResponseDTO(message="User deleted")


@router.post("/{user_id}/promote", response_model=UserResponseDTO)
def promote_user(
    user_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)]
):
    """Promote the caller to administrator while no administrator exists."""
    user = PromoteUserUseCase(repository).execute(current_user, user_id)
    return UserResponseDTO.from_domain(user)
